# tests/test_ingestor.py
"""Tests for the ingestion pipeline."""

import pytest

from ragdesk.chunker import SentenceChunker
from ragdesk.embedder import Embedder
from ragdesk.exceptions import IngestionFailed
from ragdesk.ingestor import Ingestor
from ragdesk.stores import InMemoryDocumentStore

SCENARIO_TEXT = "Sentence one. Sentence two. Sentence three is the target."
LONG_SENTENCE = "This sentence is comfortably longer than fifty characters in total."


class BrokenEmbedder(Embedder):
    @property
    def dimension(self) -> int:
        return 2

    def embed_text(self, text: str) -> list[float]:
        raise RuntimeError("embedding exploded")


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def ingestor(store, keyword_embedder):
    return Ingestor(
        store=store,
        chunker=SentenceChunker(chunk_size=20, overlap_sentences=2),
        embedder=keyword_embedder,
    )


class TestIngestor:
    def test_drops_short_chunks(self, ingestor, store):
        document = ingestor.ingest("faq.txt", SCENARIO_TEXT)

        chunks = store.list_chunks()
        assert [c.text for c in chunks] == [SCENARIO_TEXT]
        assert chunks[0].source_name == document.name == "faq.txt"
        assert chunks[0].upload_date == document.upload_date

    def test_embeds_each_chunk_in_order(self, store, keyword_embedder):
        ingestor = Ingestor(
            store=store,
            chunker=SentenceChunker(chunk_size=80, overlap_sentences=0),
            embedder=keyword_embedder,
            min_chunk_length=0,
        )
        text = f"{LONG_SENTENCE} Refund requests need a receipt. Shipping is free."

        ingestor.ingest("a.txt", text)

        assert keyword_embedder.calls == [c.text for c in store.list_chunks()]
        assert all(c.embedding is not None for c in store.list_chunks())

    def test_chunk_ids_unique(self, store, keyword_embedder):
        ingestor = Ingestor(
            store=store,
            chunker=SentenceChunker(chunk_size=5, overlap_sentences=0),
            embedder=keyword_embedder,
            min_chunk_length=0,
        )
        ingestor.ingest("a.txt", "One. Two. Three. Four.")

        ids = [c.id for c in store.list_chunks()]
        assert len(ids) == len(set(ids)) == 4

    def test_empty_text_registers_document_without_chunks(self, ingestor, store):
        document = ingestor.ingest("empty.txt", "   ")

        assert store.list_documents() == [document]
        assert store.count_chunks() == 0

    def test_failure_leaves_store_unchanged(self, store):
        ingestor = Ingestor(
            store=store,
            chunker=SentenceChunker(),
            embedder=BrokenEmbedder(),
        )

        with pytest.raises(IngestionFailed) as excinfo:
            ingestor.ingest("bad.txt", LONG_SENTENCE)

        assert excinfo.value.source_name == "bad.txt"
        assert isinstance(excinfo.value.__cause__, RuntimeError)
        assert store.list_documents() == []
        assert store.count_chunks() == 0

    def test_progress_events(self, ingestor):
        events = []

        ingestor.ingest(
            "faq.txt",
            SCENARIO_TEXT,
            on_progress=lambda event, current, total, message: events.append(event),
        )

        assert events[0] == "chunking"
        assert "embedding" in events
        assert events[-1] == "storing"

    def test_logs_added_document(self, ingestor, caplog):
        with caplog.at_level("INFO", logger="ragdesk.ingestor"):
            ingestor.ingest("faq.txt", SCENARIO_TEXT)

        assert "Document faq.txt added: 1 chunks" in caplog.text


class TestIngestorAsync:
    @pytest.mark.asyncio
    async def test_aingest(self, ingestor, store):
        document = await ingestor.aingest("faq.txt", SCENARIO_TEXT)

        assert store.list_documents() == [document]
        assert store.count_chunks() == 1

    @pytest.mark.asyncio
    async def test_aingest_failure(self, store):
        ingestor = Ingestor(store=store, chunker=SentenceChunker(), embedder=BrokenEmbedder())

        with pytest.raises(IngestionFailed):
            await ingestor.aingest("bad.txt", LONG_SENTENCE)
        assert store.list_documents() == []
