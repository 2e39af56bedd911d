"""Retrieval pipeline for ragdesk."""

import re

from ragdesk.embedder import Embedder
from ragdesk.models import ScoredChunk
from ragdesk.ranker import Ranker, format_context
from ragdesk.stores import DocumentStore

_SOURCE_TAG_RE = re.compile(r"\[Source: ([^\]]+)\]")


def get_sources(context: str) -> list[str]:
    """Distinct source names tagged in a context string, in order of appearance."""
    sources: list[str] = []
    for match in _SOURCE_TAG_RE.finditer(context):
        if match.group(1) not in sources:
            sources.append(match.group(1))
    return sources


class Retriever:
    """Orchestrates the retrieval pipeline."""

    def __init__(
        self,
        store: DocumentStore,
        embedder: Embedder,
        ranker: Ranker | None = None,
        default_k: int = 5,
    ) -> None:
        """Initialize the retriever.

        Args:
            store: Store holding the chunks to search
            embedder: Embedder for query embedding
            ranker: Scoring and filtering component (default: Ranker())
            default_k: Default number of candidates considered per query
        """
        self.store = store
        self.embedder = embedder
        self.ranker = ranker or Ranker()
        self.default_k = default_k

    def get_context(self, query: str, k: int | None = None) -> list[ScoredChunk]:
        """Get the relevant chunks for a query.

        Args:
            query: User's search query
            k: Number of candidates considered (default: self.default_k)

        Returns:
            Relevant chunks with scores, best first. Empty if the store is
            empty or nothing passes the relevance threshold.
        """
        k = self.default_k if k is None else k

        chunks = self.store.list_chunks()
        if not chunks:
            return []

        query_embedding = self.embedder.embed_text(query)
        return self.ranker.rank(query, query_embedding, chunks, k=k)

    async def aget_context(self, query: str, k: int | None = None) -> list[ScoredChunk]:
        """Async version of get_context()."""
        k = self.default_k if k is None else k

        chunks = self.store.list_chunks()
        if not chunks:
            return []

        query_embedding = await self.embedder.aembed_text(query)
        return self.ranker.rank(query, query_embedding, chunks, k=k)

    def search(self, query: str, k: int | None = None) -> str:
        """Get the formatted context string for a query ("" if nothing is relevant)."""
        return format_context(self.get_context(query, k=k), self.ranker.separator)

    async def asearch(self, query: str, k: int | None = None) -> str:
        """Async version of search()."""
        return format_context(await self.aget_context(query, k=k), self.ranker.separator)
