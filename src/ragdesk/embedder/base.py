"""Embedder abstract base class."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Embedders never raise: whatever goes wrong, the caller gets a vector.
    Subclasses must implement embed_text.
    """

    @property
    @abstractmethod
    def dimension(self) -> int | None:
        """Vector dimension, or None if only known after the first call."""
        ...

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts, one at a time, in order."""
        return [self.embed_text(text) for text in texts]

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async).

        Default implementation calls sync embed_text(). Override in
        subclasses for true async behavior.
        """
        return self.embed_text(text)
