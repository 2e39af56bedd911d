# src/ragdesk/ranker.py
"""Similarity ranking with adaptive relevance filtering."""

import numpy as np

from ragdesk.models import Chunk, ScoredChunk
from ragdesk.settings import DEFAULT_CONTEXT_SEPARATOR


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """Compute cosine similarity between two vectors.

    Formula: cos(θ) = (a · b) / (||a|| * ||b||)

    Returns 0.0 when either vector has zero norm or when the dimensions
    differ: a hash fallback vector and a provider vector are not comparable.
    """
    if len(a) != len(b):
        return 0.0

    a_arr, b_arr = np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    norm_a, norm_b = np.linalg.norm(a_arr), np.linalg.norm(b_arr)

    # Zero vectors have no direction, so similarity is undefined - return 0
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a_arr, b_arr) / (norm_a * norm_b))


def lexical_similarity(query: str, text: str) -> float:
    """Fraction of query words that occur (case-insensitively) inside text."""
    words = query.lower().split()
    if not words:
        return 0.0
    text_lower = text.lower()
    matches = sum(1 for word in words if word in text_lower)
    return matches / len(words)


def format_context(
    results: list[ScoredChunk],
    separator: str = DEFAULT_CONTEXT_SEPARATOR,
) -> str:
    """Render scored chunks as source-tagged blocks."""
    return separator.join(
        f"[Source: {result.chunk.source_name}]\n{result.chunk.text}" for result in results
    )


class Ranker:
    """Scores chunks against a query and keeps the clearly relevant ones.

    Each chunk is scored by cosine similarity between its embedding and the
    query embedding. Chunks without a usable embedding (missing, or of a
    different dimension) are scored by lexical overlap instead.

    After taking the top ``k`` scores, only chunks scoring strictly above
    ``max(min_relevance, best * relative_relevance)`` are kept, so a weak
    result set does not drag in noise and a strong best match raises the bar
    for the rest.
    """

    def __init__(
        self,
        min_relevance: float = 0.3,
        relative_relevance: float = 0.5,
        separator: str = DEFAULT_CONTEXT_SEPARATOR,
    ) -> None:
        self.min_relevance = min_relevance
        self.relative_relevance = relative_relevance
        self.separator = separator

    def score(self, query: str, query_embedding: list[float], chunk: Chunk) -> float:
        """Score a single chunk."""
        if chunk.embedding is None or len(chunk.embedding) != len(query_embedding):
            return lexical_similarity(query, chunk.text)
        return cosine_similarity(query_embedding, chunk.embedding)

    def threshold(self, best_score: float) -> float:
        """Relevance cutoff for a result set whose best score is best_score."""
        return max(self.min_relevance, best_score * self.relative_relevance)

    def rank(
        self,
        query: str,
        query_embedding: list[float],
        chunks: list[Chunk],
        k: int = 5,
    ) -> list[ScoredChunk]:
        """Return the relevant top-k chunks, best first.

        Args:
            query: Raw query text (used for lexical fallback scoring)
            query_embedding: Embedding of the query
            chunks: Candidate chunks
            k: Number of candidates considered before filtering

        Returns:
            Scored chunks passing the adaptive threshold, in descending score order.
            Ties keep their original order.
        """
        if not chunks or k <= 0:
            return []

        scored = [
            ScoredChunk(chunk=chunk, score=self.score(query, query_embedding, chunk))
            for chunk in chunks
        ]
        # sorted() is stable, so equal scores keep store order
        top = sorted(scored, key=lambda result: result.score, reverse=True)[:k]

        cutoff = self.threshold(top[0].score)
        return [result for result in top if result.score > cutoff]

    def search(
        self,
        query: str,
        query_embedding: list[float],
        chunks: list[Chunk],
        k: int = 5,
    ) -> str:
        """Rank chunks and format the survivors as a context string.

        Returns an empty string when nothing is relevant.
        """
        return format_context(self.rank(query, query_embedding, chunks, k), self.separator)
