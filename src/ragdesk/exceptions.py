"""Exceptions raised by ragdesk."""


class RagdeskError(Exception):
    """Base class for all ragdesk errors."""


class DocumentNotFound(RagdeskError, KeyError):
    """Raised when a document id is not present in the store.

    Attributes:
        document_id: The id that was looked up.
    """

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class IngestionFailed(RagdeskError):
    """Raised when a document could not be extracted or ingested.

    Nothing from the failed ingestion is visible in the store.

    Attributes:
        source_name: Name of the document being ingested.
    """

    def __init__(self, message: str, source_name: str | None = None) -> None:
        super().__init__(message)
        self.source_name = source_name


class UnsupportedFileType(IngestionFailed):
    """Raised when no loader is registered for a file extension."""


class EmbeddingResponseError(RagdeskError):
    """Raised by providers when an embedding response has an unexpected shape."""
