# tests/stores/test_memory.py
"""Tests for the in-memory document store."""

import re
import threading
from datetime import UTC, datetime

import pytest

from ragdesk.exceptions import DocumentNotFound
from ragdesk.models import Chunk
from ragdesk.stores import DocumentStore, InMemoryDocumentStore, sanitize_name


@pytest.fixture
def store():
    return InMemoryDocumentStore()


def chunks_for(name: str, *texts: str) -> list[Chunk]:
    return [Chunk(text=text, source_name=name, embedding=[1.0, 0.0]) for text in texts]


class TestSanitizeName:
    def test_replaces_non_alphanumerics(self):
        assert sanitize_name("my file (v2).pdf") == "my_file__v2__pdf"


class TestInMemoryDocumentStore:
    def test_is_document_store(self, store):
        assert isinstance(store, DocumentStore)

    def test_add_document(self, store):
        document = store.add_document("faq.txt", chunks_for("faq.txt", "a", "b"))

        assert re.fullmatch(r"\d+_faq_txt", document.id)
        assert store.list_documents() == [document]
        assert store.count_chunks() == 2

    def test_id_uses_epoch_millis(self, store):
        upload_date = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
        document = store.add_document("a.txt", [], upload_date=upload_date)

        assert document.id == f"{int(upload_date.timestamp() * 1000)}_a_txt"
        assert document.upload_date == upload_date

    def test_id_collision_gets_suffix(self, store):
        upload_date = datetime(2024, 1, 1, tzinfo=UTC)
        first = store.add_document("a.txt", [], upload_date=upload_date)
        second = store.add_document("a_txt", [], upload_date=upload_date)

        assert first.id != second.id
        assert second.id == f"{first.id}_2"

    def test_rejects_foreign_chunks(self, store):
        with pytest.raises(ValueError):
            store.add_document("a.txt", chunks_for("b.txt", "x"))
        assert store.list_documents() == []

    def test_same_name_replaces_document(self, store):
        old = store.add_document("faq.txt", chunks_for("faq.txt", "old 1", "old 2"))
        new = store.add_document("faq.txt", chunks_for("faq.txt", "new"))

        assert store.list_documents() == [new]
        assert store.get_document(old.id) is None
        assert [c.text for c in store.list_chunks()] == ["new"]

    def test_delete_cascades(self, store):
        keep = store.add_document("keep.txt", chunks_for("keep.txt", "k1", "k2"))
        gone = store.add_document("gone.txt", chunks_for("gone.txt", "g1", "g2", "g3"))

        deleted = store.delete_document(gone.id)

        assert deleted == gone
        assert store.list_documents() == [keep]
        assert all(c.source_name != "gone.txt" for c in store.list_chunks())
        assert store.count_chunks() == 2

    def test_delete_unknown_raises(self, store):
        store.add_document("a.txt", chunks_for("a.txt", "x"))
        before = (store.list_documents(), store.list_chunks())

        with pytest.raises(DocumentNotFound) as excinfo:
            store.delete_document("missing")

        assert excinfo.value.document_id == "missing"
        assert isinstance(excinfo.value, KeyError)
        assert (store.list_documents(), store.list_chunks()) == before

    def test_lookup_by_name(self, store):
        document = store.add_document("a.txt", chunks_for("a.txt", "x"))

        assert store.get_document_by_name("a.txt") == document
        assert store.get_document_by_name("b.txt") is None
        assert [c.text for c in store.get_chunks_by_source("a.txt")] == ["x"]

    def test_snapshots_are_copies(self, store):
        store.add_document("a.txt", chunks_for("a.txt", "x"))
        snapshot = store.list_chunks()
        snapshot.clear()

        assert store.count_chunks() == 1

    def test_stats(self, store):
        a = store.add_document("a.txt", chunks_for("a.txt", "1", "2"))
        b = store.add_document("b.txt", chunks_for("b.txt", "3"))

        stats = store.stats()

        assert stats.total_documents == 2
        assert stats.total_chunks == 3
        assert [(d.id, d.chunks) for d in stats.documents] == [(a.id, 2), (b.id, 1)]

    def test_stats_wire_shape(self, store):
        store.add_document("a.txt", chunks_for("a.txt", "1"))

        data = store.stats().model_dump(by_alias=True)

        assert set(data) == {"totalDocuments", "totalChunks", "documents"}
        assert set(data["documents"][0]) == {"id", "name", "uploadDate", "chunks"}

    def test_concurrent_adds(self, store):
        def add(i: int) -> None:
            name = f"doc{i}.txt"
            store.add_document(name, chunks_for(name, "a", "b", "c"))

        threads = [threading.Thread(target=add, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stats = store.stats()
        assert stats.total_documents == 20
        assert stats.total_chunks == 60
        assert all(d.chunks == 3 for d in stats.documents)
