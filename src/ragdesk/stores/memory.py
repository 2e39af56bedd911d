# src/ragdesk/stores/memory.py
"""In-memory document store implementation."""

import logging
import re
import threading
from collections import Counter
from datetime import UTC, datetime

from ragdesk.exceptions import DocumentNotFound
from ragdesk.models import Chunk, Document, DocumentStats, StoreStats
from ragdesk.stores.base import DocumentStore

logger = logging.getLogger(__name__)

_UNSAFE_ID_CHARS_RE = re.compile(r"[^a-zA-Z0-9]")


def sanitize_name(name: str) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return _UNSAFE_ID_CHARS_RE.sub("_", name)


class InMemoryDocumentStore(DocumentStore):
    """Thread-safe in-memory document store.

    All reads and writes go through one lock. Writers build the new
    collections aside and swap them in, so readers never observe a document
    without its chunks (or the reverse), and a failed write leaves the
    previous state untouched.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._documents: dict[str, Document] = {}
        self._chunks: list[Chunk] = []

    def _new_document_id(self, name: str, upload_date: datetime) -> str:
        """Build ``<epoch-ms>_<sanitized name>``, suffixed on collision. Caller holds the lock."""
        base = f"{int(upload_date.timestamp() * 1000)}_{sanitize_name(name)}"
        document_id = base
        suffix = 1
        while document_id in self._documents:
            suffix += 1
            document_id = f"{base}_{suffix}"
        return document_id

    def _find_by_name(self, name: str) -> Document | None:
        for document in self._documents.values():
            if document.name == name:
                return document
        return None

    def add_document(
        self,
        name: str,
        chunks: list[Chunk],
        upload_date: datetime | None = None,
    ) -> Document:
        """Register a document and its chunks, replacing a live namesake."""
        upload_date = upload_date or datetime.now(UTC)
        stray = [chunk.id for chunk in chunks if chunk.source_name != name]
        if stray:
            raise ValueError(f"Chunks {stray} do not belong to document {name!r}")

        with self._lock:
            documents = dict(self._documents)
            remaining = self._chunks

            previous = self._find_by_name(name)
            if previous is not None:
                del documents[previous.id]
                remaining = [chunk for chunk in self._chunks if chunk.source_name != name]
                logger.info("Replacing document %s (%s)", name, previous.id)

            document = Document(
                id=self._new_document_id(name, upload_date),
                name=name,
                upload_date=upload_date,
            )
            documents[document.id] = document
            new_chunks = [*remaining, *chunks]

            self._documents, self._chunks = documents, new_chunks

        return document

    def delete_document(self, document_id: str) -> Document:
        """Delete a document and every chunk carrying its name."""
        with self._lock:
            document = self._documents.get(document_id)
            if document is None:
                raise DocumentNotFound(document_id)

            remaining = [chunk for chunk in self._chunks if chunk.source_name != document.name]
            removed = len(self._chunks) - len(remaining)

            documents = dict(self._documents)
            del documents[document_id]
            self._documents, self._chunks = documents, remaining

        logger.info("Document %s deleted: %d chunks removed", document.name, removed)
        return document

    def get_document(self, document_id: str) -> Document | None:
        with self._lock:
            return self._documents.get(document_id)

    def get_document_by_name(self, name: str) -> Document | None:
        with self._lock:
            return self._find_by_name(name)

    def list_documents(self) -> list[Document]:
        with self._lock:
            return list(self._documents.values())

    def list_chunks(self) -> list[Chunk]:
        with self._lock:
            return list(self._chunks)

    def get_chunks_by_source(self, source_name: str) -> list[Chunk]:
        with self._lock:
            return [chunk for chunk in self._chunks if chunk.source_name == source_name]

    def count_chunks(self) -> int:
        with self._lock:
            return len(self._chunks)

    def stats(self) -> StoreStats:
        with self._lock:
            documents = list(self._documents.values())
            per_source = Counter(chunk.source_name for chunk in self._chunks)
            total_chunks = len(self._chunks)

        return StoreStats(
            total_documents=len(documents),
            total_chunks=total_chunks,
            documents=[
                DocumentStats(
                    id=document.id,
                    name=document.name,
                    upload_date=document.upload_date,
                    chunks=per_source[document.name],
                )
                for document in documents
            ],
        )
