# src/ragdesk/embedder/hashing.py
"""Deterministic hash-based embedder used when no provider is available."""

import re

from ragdesk.embedder.base import Embedder
from ragdesk.settings import DEFAULT_EMBEDDING_DIMENSION

_WORD_SPLIT_RE = re.compile(r"\s+")


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def word_hash(word: str) -> int:
    """Signed 32-bit rolling hash (``h * 31 + code``) over UTF-16 code units."""
    data = word.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code)
    return h


class HashEmbedder(Embedder):
    """Embedder that derives a vector from per-word hashes.

    The vector carries no semantics: slot ``i`` holds a value in [0, 0.99]
    derived from the i-th whitespace-separated word of the lower-cased text,
    and slots past the last word stay 0. It is a pure function of the text,
    so identical inputs always produce identical vectors.

    Example:
        embedder = HashEmbedder()
        vector = embedder.embed_text("Opening hours are 9 to 5.")
        assert len(vector) == 1024
    """

    def __init__(self, dimension: int = DEFAULT_EMBEDDING_DIMENSION) -> None:
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed_text(self, text: str) -> list[float]:
        vector = [0.0] * self._dimension
        words = _WORD_SPLIT_RE.split(text.lower())

        for index, word in enumerate(words):
            if index >= self._dimension:
                break
            vector[index % self._dimension] = (abs(word_hash(word)) % 100) / 100

        return vector
