"""Abstract base class for document storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from ragdesk.models import Chunk, Document, StoreStats


class DocumentStore(ABC):
    """Owns documents and their chunks.

    A document and its chunks are added together and deleted together;
    chunks belong to the live document whose name equals their source_name.
    """

    @abstractmethod
    def add_document(
        self,
        name: str,
        chunks: list[Chunk],
        upload_date: datetime | None = None,
    ) -> Document:
        """Register a document and its chunks atomically.

        If a live document already has this name it is replaced, chunks included.
        Returns the new Document with its generated id.
        """
        ...

    @abstractmethod
    def delete_document(self, document_id: str) -> Document:
        """Delete a document and all of its chunks.

        Raises:
            DocumentNotFound: If no document has this id.
        """
        ...

    @abstractmethod
    def get_document(self, document_id: str) -> Document | None:
        """Retrieve a document by ID. Returns None if not found."""
        ...

    @abstractmethod
    def get_document_by_name(self, name: str) -> Document | None:
        """Retrieve the live document with this name, if any."""
        ...

    @abstractmethod
    def list_documents(self) -> list[Document]:
        """Snapshot of all live documents, in ingestion order."""
        ...

    @abstractmethod
    def list_chunks(self) -> list[Chunk]:
        """Snapshot of all chunks, in ingestion order."""
        ...

    @abstractmethod
    def get_chunks_by_source(self, source_name: str) -> list[Chunk]:
        """Get all chunks of the document with this name."""
        ...

    @abstractmethod
    def count_chunks(self) -> int:
        """Count the total number of chunks in the store."""
        ...

    @abstractmethod
    def stats(self) -> StoreStats:
        """Document count, chunk count and per-document breakdown."""
        ...
