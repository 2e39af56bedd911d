"""Ingestion pipeline for ragdesk."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from ragdesk.chunker import Chunker
from ragdesk.embedder import Embedder
from ragdesk.exceptions import IngestionFailed, RagdeskError
from ragdesk.models import Chunk, Document
from ragdesk.stores import DocumentStore

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type ("chunking", "embedding" or "storing")
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message

Example:
    def on_progress(event: str, current: int, total: int, message: str) -> None:
        print(f"[{event}] {current}/{total}: {message}")
"""


class Ingestor:
    """Orchestrates the ingestion pipeline.

    Pipeline:
    1. Split the text into chunks
    2. Drop chunks shorter than min_chunk_length
    3. Embed each chunk, one at a time, in source order
    4. Register the document and its chunks in the store in one step

    Nothing is visible in the store until step 4, so a failure anywhere
    leaves the store as it was.
    """

    def __init__(
        self,
        store: DocumentStore,
        chunker: Chunker,
        embedder: Embedder,
        min_chunk_length: int = 50,
    ) -> None:
        """Initialize the ingestor with all required components.

        Args:
            store: Store that receives the document and its chunks
            chunker: Component to split text into chunks
            embedder: Component to embed chunks
            min_chunk_length: Chunks shorter than this are discarded
        """
        self.store = store
        self.chunker = chunker
        self.embedder = embedder
        self.min_chunk_length = min_chunk_length

    def _split(self, name: str, text: str, progress: ProgressCallback) -> list[str]:
        progress("chunking", 0, 1, f"Chunking {name}...")
        pieces = self.chunker.split(text)
        kept = [piece for piece in pieces if len(piece) >= self.min_chunk_length]
        if len(kept) < len(pieces):
            logger.debug(
                "Discarded %d chunks of %s shorter than %d characters",
                len(pieces) - len(kept),
                name,
                self.min_chunk_length,
            )
        progress("chunking", 1, 1, f"{len(kept)} chunks")
        return kept

    def _register(
        self,
        name: str,
        chunks: list[Chunk],
        upload_date: datetime,
        progress: ProgressCallback,
    ) -> Document:
        progress("storing", 0, 1, f"Storing {len(chunks)} chunks...")
        document = self.store.add_document(name, chunks, upload_date=upload_date)
        progress("storing", 1, 1, "Storing complete")

        if not chunks:
            logger.warning("Document %s added without any chunks", name)
        logger.info("Document %s added: %d chunks", name, len(chunks))
        return document

    def ingest(
        self,
        name: str,
        text: str,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Ingest already-extracted text under a source name.

        Args:
            name: Source name, unique among live documents
            text: Extracted plain text
            on_progress: Optional callback(event, current, total, message)

        Returns:
            The registered Document

        Raises:
            IngestionFailed: If any step fails; the store is left unchanged.
        """

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        upload_date = datetime.now(UTC)
        try:
            pieces = self._split(name, text, progress)

            chunks = []
            for i, piece in enumerate(pieces):
                progress("embedding", i, len(pieces), f"Embedding chunk {i + 1}/{len(pieces)}")
                chunks.append(
                    Chunk(
                        text=piece,
                        source_name=name,
                        upload_date=upload_date,
                        embedding=self.embedder.embed_text(piece),
                    )
                )
            progress("embedding", len(pieces), len(pieces), "Embedding complete")

            return self._register(name, chunks, upload_date, progress)
        except RagdeskError:
            raise
        except Exception as e:
            logger.exception("Error adding document %s", name)
            raise IngestionFailed(f"Failed to ingest {name}: {e}", source_name=name) from e

    async def aingest(
        self,
        name: str,
        text: str,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Ingest text with async embedding calls.

        Chunks are still embedded one after another; other tasks run while
        each provider call is in flight.
        """

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        upload_date = datetime.now(UTC)
        try:
            pieces = self._split(name, text, progress)

            chunks = []
            for i, piece in enumerate(pieces):
                progress("embedding", i, len(pieces), f"Embedding chunk {i + 1}/{len(pieces)}")
                chunks.append(
                    Chunk(
                        text=piece,
                        source_name=name,
                        upload_date=upload_date,
                        embedding=await self.embedder.aembed_text(piece),
                    )
                )
            progress("embedding", len(pieces), len(pieces), "Embedding complete")

            return self._register(name, chunks, upload_date, progress)
        except RagdeskError:
            raise
        except Exception as e:
            logger.exception("Error adding document %s", name)
            raise IngestionFailed(f"Failed to ingest {name}: {e}", source_name=name) from e
