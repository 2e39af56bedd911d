# src/ragdesk/knowledge_base.py
"""Central class tying chunking, embedding, storage and ranking together."""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragdesk.configuration import ProviderConfig
    from ragdesk.ingestor import Ingestor, ProgressCallback
    from ragdesk.loaders import LoaderRegistry
    from ragdesk.retriever import Retriever

from ragdesk.chunker import SentenceChunker
from ragdesk.exceptions import IngestionFailed, RagdeskError
from ragdesk.models import Document, ScoredChunk, StoreStats
from ragdesk.ranker import Ranker
from ragdesk.retriever import get_sources
from ragdesk.settings import Settings
from ragdesk.stores import DocumentStore, InMemoryDocumentStore

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _removing(path: Path, enabled: bool) -> Iterator[None]:
    """Remove path when the block exits, whether it succeeded or not."""
    try:
        yield
    finally:
        if enabled:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass
            except OSError:
                logger.warning("Could not remove %s", path, exc_info=True)


class KnowledgeBase:
    """Document knowledge base for retrieval-augmented chat.

    A KnowledgeBase owns one document store and the components that fill and
    query it. Documents go in as plain text (or files), are split into
    overlapping sentence chunks, embedded and stored; queries come back as a
    source-tagged context string ready to be prepended to a prompt.

    Example:
        from ragdesk import KnowledgeBase, LiteLLMProvider

        kb = KnowledgeBase(provider=LiteLLMProvider(embedding="mistral/mistral-embed"))
        kb.add_document("faq.txt", text)
        context = kb.search("How do I reset my password?")
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig | None = None,
        settings: Settings | None = None,
        store: DocumentStore | None = None,
        loader_registry: LoaderRegistry | None = None,
    ) -> None:
        """Create a knowledge base.

        Args:
            provider: Provider configuration (builds the embedder). Defaults to
                      LocalProvider(), which uses hash embeddings only.
            settings: Behavioral settings (chunk_size, default_k, thresholds, etc.)
            store: Document store. Defaults to a fresh InMemoryDocumentStore.
            loader_registry: Optional loader registry for file loading. If None, uses default.
        """
        self._settings = settings if settings is not None else Settings()

        if provider is None:
            from ragdesk.configuration import LocalProvider

            provider = LocalProvider()

        self.store = store if store is not None else InMemoryDocumentStore()
        self.embedder = provider.build_embedder(self._settings)
        self.chunker = SentenceChunker(
            chunk_size=self._settings.chunk_size,
            overlap_sentences=self._settings.chunk_overlap_sentences,
            segmenter=self._settings.sentence_segmenter,
        )
        self.ranker = Ranker(
            min_relevance=self._settings.min_relevance,
            relative_relevance=self._settings.relative_relevance,
            separator=self._settings.context_separator,
        )

        # Loader registry (lazily created if not provided)
        self._loader_registry = loader_registry

    @property
    def settings(self) -> Settings:
        return self._settings

    def _get_loader_registry(self) -> LoaderRegistry:
        """Get or create the loader registry."""
        if self._loader_registry is None:
            from ragdesk.loaders import LoaderRegistry

            self._loader_registry = LoaderRegistry.default()
        return self._loader_registry

    def ingestor(self) -> Ingestor:
        """Create an Ingestor writing into this knowledge base's store."""
        from ragdesk.ingestor import Ingestor

        return Ingestor(
            store=self.store,
            chunker=self.chunker,
            embedder=self.embedder,
            min_chunk_length=self._settings.min_chunk_length,
        )

    def retriever(self, *, default_k: int | None = None) -> Retriever:
        """Create a Retriever reading from this knowledge base's store.

        Args:
            default_k: Number of candidates per query. If None, uses settings default.
        """
        from ragdesk.retriever import Retriever

        return Retriever(
            store=self.store,
            embedder=self.embedder,
            ranker=self.ranker,
            default_k=default_k if default_k is not None else self._settings.default_k,
        )

    # Documents

    def add_document(
        self,
        name: str,
        text: str,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Chunk, embed and register a document.

        Args:
            name: Source name shown in context blocks. Re-using the name of a
                  live document replaces that document.
            text: Extracted plain text.
            on_progress: Optional callback for progress updates.

        Raises:
            IngestionFailed: If ingestion fails; the store is left unchanged.
        """
        return self.ingestor().ingest(name, text, on_progress=on_progress)

    async def aadd_document(
        self,
        name: str,
        text: str,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Async version of add_document()."""
        return await self.ingestor().aingest(name, text, on_progress=on_progress)

    def _load_file(self, file_path: Path, source_name: str) -> str:
        if not file_path.exists():
            raise IngestionFailed(f"File not found: {file_path}", source_name=source_name)
        try:
            return self._get_loader_registry().load(str(file_path))
        except RagdeskError:
            raise
        except Exception as e:
            logger.exception("Error extracting text from %s", file_path)
            raise IngestionFailed(
                f"Failed to extract text from {source_name}: {e}", source_name=source_name
            ) from e

    def ingest_file(
        self,
        filepath: str | Path,
        source_name: str | None = None,
        *,
        remove_after: bool = False,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Extract text from a file and add it as a document.

        Args:
            filepath: Path to the file to ingest
            source_name: Name for the document. Defaults to the file name.
            remove_after: Remove the file once done, on success and on failure
                          alike (for uploaded temporary files).
            on_progress: Optional callback for progress updates

        Raises:
            UnsupportedFileType: If no loader handles the file extension
            IngestionFailed: If the file is missing, extraction fails or
                             ingestion fails
        """
        file_path = Path(filepath)
        name = source_name or file_path.name

        with _removing(file_path, remove_after):
            text = self._load_file(file_path, name)
            return self.add_document(name, text, on_progress=on_progress)

    async def aingest_file(
        self,
        filepath: str | Path,
        source_name: str | None = None,
        *,
        remove_after: bool = False,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        """Async version of ingest_file(). Text extraction itself is synchronous."""
        file_path = Path(filepath)
        name = source_name or file_path.name

        with _removing(file_path, remove_after):
            text = self._load_file(file_path, name)
            return await self.aadd_document(name, text, on_progress=on_progress)

    def delete_document(self, document_id: str) -> Document:
        """Delete a document and all of its chunks.

        Raises:
            DocumentNotFound: If no document has this id; nothing changes.
        """
        return self.store.delete_document(document_id)

    def list_documents(self) -> list[Document]:
        return self.store.list_documents()

    def get_stats(self) -> StoreStats:
        return self.store.stats()

    # Queries

    def rank(self, query: str, top_k: int | None = None) -> list[ScoredChunk]:
        """Relevant chunks with their scores, best first."""
        return self.retriever().get_context(query, k=top_k)

    def search(
        self,
        query: str,
        use_knowledge_base: bool = True,
        top_k: int | None = None,
    ) -> str:
        """Build the context string for a query.

        Args:
            query: User's question
            use_knowledge_base: When False, skip retrieval and return ""
            top_k: Number of candidates considered. If None, uses settings default.

        Returns:
            Source-tagged context blocks, or "" when the knowledge base is
            disabled, empty, or holds nothing relevant.
        """
        if not use_knowledge_base:
            return ""
        return self.retriever().search(query, k=top_k)

    async def asearch(
        self,
        query: str,
        use_knowledge_base: bool = True,
        top_k: int | None = None,
    ) -> str:
        """Async version of search()."""
        if not use_knowledge_base:
            return ""
        return await self.retriever().asearch(query, k=top_k)

    @staticmethod
    def get_sources(context: str) -> list[str]:
        """Distinct source names cited in a context string."""
        return get_sources(context)
