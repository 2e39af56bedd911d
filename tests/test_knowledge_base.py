# tests/test_knowledge_base.py
"""End-to-end tests for the KnowledgeBase."""

import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from ragdesk import KnowledgeBase, LocalProvider, Settings
from ragdesk.embedder import ClientEmbedder, HashEmbedder
from ragdesk.exceptions import DocumentNotFound, IngestionFailed, UnsupportedFileType
from ragdesk.stores import InMemoryDocumentStore

SCENARIO_TEXT = "Sentence one. Sentence two. Sentence three is the target."
REFUND_TEXT = (
    "Refund requests are answered within five business days. "
    "Keep the receipt until the refund has been processed."
)
SHIPPING_TEXT = "Shipping is free for orders above fifty euros, otherwise it costs five."


@pytest.fixture
def small_kb(mock_provider):
    return KnowledgeBase(provider=mock_provider, settings=Settings(chunk_size=20))


class TestConstruction:
    def test_defaults_to_local_provider(self):
        kb = KnowledgeBase()

        assert isinstance(kb.embedder, ClientEmbedder)
        assert isinstance(kb.store, InMemoryDocumentStore)
        assert kb.embedder.dimension == 1024

    def test_settings_flow_into_components(self, mock_provider):
        settings = Settings(
            chunk_size=300,
            chunk_overlap_sentences=1,
            min_relevance=0.2,
            relative_relevance=0.7,
        )
        kb = KnowledgeBase(provider=mock_provider, settings=settings)

        assert kb.settings is settings
        assert kb.chunker.chunk_size == 300
        assert kb.chunker.overlap_sentences == 1
        assert kb.ranker.min_relevance == 0.2
        assert kb.ranker.relative_relevance == 0.7
        assert kb.retriever().default_k == 5
        assert kb.retriever(default_k=2).default_k == 2

    def test_custom_store(self, mock_provider):
        store = InMemoryDocumentStore()
        assert KnowledgeBase(provider=mock_provider, store=store).store is store


class TestScenarios:
    def test_empty_store_returns_empty_context(self, kb):
        assert kb.search("anything") == ""

    def test_overlap_and_search(self, small_kb):
        pieces = small_kb.chunker.split(SCENARIO_TEXT)
        assert len(pieces) >= 2
        assert pieces[1].startswith(pieces[0])

        small_kb.add_document("faq.txt", SCENARIO_TEXT)
        context = small_kb.search("target")

        assert context.startswith("[Source: faq.txt]\n")
        assert "Sentence three is the target." in context

    def test_delete_unknown_id(self, kb):
        kb.add_document("refunds.txt", REFUND_TEXT)
        before = kb.get_stats()

        with pytest.raises(DocumentNotFound):
            kb.delete_document("does-not-exist")

        assert kb.get_stats() == before

    def test_same_text_under_two_names(self, kb):
        first = kb.add_document("a.txt", REFUND_TEXT)
        second = kb.add_document("b.txt", REFUND_TEXT)

        a_ids = {c.id for c in kb.store.get_chunks_by_source("a.txt")}
        b_ids = {c.id for c in kb.store.get_chunks_by_source("b.txt")}
        assert a_ids and b_ids
        assert a_ids.isdisjoint(b_ids)

        kb.delete_document(first.id)

        assert kb.list_documents() == [second]
        assert kb.get_sources(kb.search("refund")) == ["b.txt"]


class TestDocuments:
    def test_cascading_delete(self, kb):
        refunds = kb.add_document("refunds.txt", REFUND_TEXT)
        kb.add_document("shipping.txt", SHIPPING_TEXT)

        kb.delete_document(refunds.id)

        assert refunds.id not in {d.id for d in kb.list_documents()}
        assert all(c.source_name != "refunds.txt" for c in kb.store.list_chunks())
        assert kb.search("refund") == ""

    def test_stats(self, kb):
        kb.add_document("refunds.txt", REFUND_TEXT)
        kb.add_document("shipping.txt", SHIPPING_TEXT)

        stats = kb.get_stats()

        assert stats.total_documents == 2
        assert stats.total_chunks == sum(d.chunks for d in stats.documents)
        assert [d.name for d in stats.documents] == ["refunds.txt", "shipping.txt"]

    def test_listing_wire_shape(self, kb):
        kb.add_document("refunds.txt", REFUND_TEXT)

        listing = [d.model_dump(by_alias=True) for d in kb.list_documents()]

        assert set(listing[0]) == {"id", "name", "uploadDate"}

    def test_reingest_replaces(self, kb):
        kb.add_document("policy.txt", REFUND_TEXT)
        kb.add_document("policy.txt", SHIPPING_TEXT)

        assert len(kb.list_documents()) == 1
        assert kb.get_sources(kb.search("shipping")) == ["policy.txt"]
        assert kb.search("refund") == ""

    def test_concurrent_ingestion(self, kb):
        names = [f"doc{i}.txt" for i in range(10)]
        with ThreadPoolExecutor(max_workers=5) as pool:
            documents = list(pool.map(lambda n: kb.add_document(n, REFUND_TEXT), names))

        stats = kb.get_stats()
        assert stats.total_documents == 10
        assert {d.id for d in documents} == {d.id for d in stats.documents}
        per_doc = {d.chunks for d in stats.documents}
        assert len(per_doc) == 1
        assert stats.total_chunks == 10 * per_doc.pop()


class TestSearch:
    def test_disabled_knowledge_base(self, kb, keyword_embedder):
        kb.add_document("refunds.txt", REFUND_TEXT)
        calls_before = len(keyword_embedder.calls)

        assert kb.search("refund", use_knowledge_base=False) == ""
        assert len(keyword_embedder.calls) == calls_before

    def test_only_relevant_sources(self, kb):
        kb.add_document("refunds.txt", REFUND_TEXT)
        kb.add_document("shipping.txt", SHIPPING_TEXT)

        assert kb.get_sources(kb.search("When is shipping free?")) == ["shipping.txt"]

    def test_rank_scores_pass_threshold(self, kb):
        kb.add_document("refunds.txt", REFUND_TEXT)
        kb.add_document("shipping.txt", SHIPPING_TEXT)

        results = kb.rank("refund shipping")

        assert results
        best = results[0].score
        assert all(r.score > max(0.3, best * 0.5) for r in results)

    def test_hash_embeddings_match_identical_text(self):
        kb = KnowledgeBase(provider=LocalProvider())
        kb.add_document("hours.txt", SHIPPING_TEXT)

        context = kb.search(SHIPPING_TEXT)

        assert context == f"[Source: hours.txt]\n{SHIPPING_TEXT}"

    @pytest.mark.asyncio
    async def test_async_paths(self, kb):
        await kb.aadd_document("refunds.txt", REFUND_TEXT)

        assert kb.get_sources(await kb.asearch("refund")) == ["refunds.txt"]
        assert await kb.asearch("refund", use_knowledge_base=False) == ""


class TestIngestFile:
    def test_ingest_text_file(self, kb, write_file):
        path = write_file("refunds.txt", REFUND_TEXT)

        document = kb.ingest_file(path)

        assert document.name == "refunds.txt"
        assert os.path.exists(path)

    def test_custom_source_name(self, kb, write_file):
        path = write_file("upload-123.md", REFUND_TEXT)

        document = kb.ingest_file(path, source_name="Refund policy.md")

        assert document.name == "Refund policy.md"

    def test_remove_after_success(self, kb, write_file):
        path = write_file("tmp_upload.txt", REFUND_TEXT)

        kb.ingest_file(path, "refunds.txt", remove_after=True)

        assert not os.path.exists(path)
        assert kb.get_stats().total_documents == 1

    def test_remove_after_failure(self, kb, write_file):
        path = write_file("report.docx", "not really a docx")

        with pytest.raises(UnsupportedFileType):
            kb.ingest_file(path, remove_after=True)

        assert not os.path.exists(path)
        assert kb.list_documents() == []

    def test_missing_file(self, kb, tmp_path):
        with pytest.raises(IngestionFailed, match="not found"):
            kb.ingest_file(tmp_path / "missing.txt")

    def test_extraction_error_is_wrapped(self, kb, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa invalid utf-8")

        with pytest.raises(IngestionFailed) as excinfo:
            kb.ingest_file(path)

        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_aingest_file(self, kb, write_file):
        path = write_file("refunds.txt", REFUND_TEXT)

        document = await kb.aingest_file(path, remove_after=True)

        assert document.name == "refunds.txt"
        assert not os.path.exists(path)


class TestHashFallbackEndToEnd:
    def test_fallback_vectors_stored(self, write_file):
        kb = KnowledgeBase(provider=LocalProvider(), settings=Settings(embedding_dimension=32))
        kb.ingest_file(write_file("refunds.txt", REFUND_TEXT))

        chunk = kb.store.list_chunks()[0]
        assert chunk.embedding == HashEmbedder(dimension=32).embed_text(chunk.text)
