# tests/test_retriever.py
"""Tests for the retrieval pipeline."""

import pytest

from ragdesk.models import Chunk
from ragdesk.retriever import Retriever, get_sources
from ragdesk.stores import InMemoryDocumentStore


@pytest.fixture
def store(keyword_embedder):
    store = InMemoryDocumentStore()
    for name, text in [
        ("refunds.txt", "Refund requests are answered within five business days."),
        ("shipping.txt", "Shipping is free for orders above fifty euros."),
    ]:
        store.add_document(
            name,
            [Chunk(text=text, source_name=name, embedding=keyword_embedder.embed_text(text))],
        )
    return store


class TestGetSources:
    def test_distinct_in_order(self):
        context = "[Source: b.txt]\nx\n\n---\n\n[Source: a.txt]\ny\n\n---\n\n[Source: b.txt]\nz"
        assert get_sources(context) == ["b.txt", "a.txt"]

    def test_empty(self):
        assert get_sources("") == []


class TestRetriever:
    def test_empty_store_skips_embedding(self, keyword_embedder):
        retriever = Retriever(store=InMemoryDocumentStore(), embedder=keyword_embedder)

        assert retriever.search("anything") == ""
        assert keyword_embedder.calls == []

    def test_get_context(self, store, keyword_embedder):
        retriever = Retriever(store=store, embedder=keyword_embedder)

        results = retriever.get_context("How long does a refund take?")

        assert [r.chunk.source_name for r in results] == ["refunds.txt"]
        assert results[0].score == pytest.approx(1.0)

    def test_search_formats_context(self, store, keyword_embedder):
        retriever = Retriever(store=store, embedder=keyword_embedder)

        context = retriever.search("shipping")

        assert context == "[Source: shipping.txt]\nShipping is free for orders above fifty euros."

    def test_no_relevant_chunks(self, store, keyword_embedder):
        retriever = Retriever(store=store, embedder=keyword_embedder)
        assert retriever.search("password") == ""

    @pytest.mark.asyncio
    async def test_asearch(self, store, keyword_embedder):
        retriever = Retriever(store=store, embedder=keyword_embedder)
        assert get_sources(await retriever.asearch("refund")) == ["refunds.txt"]
