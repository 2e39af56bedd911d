"""Abstract base class for embedding providers."""

from abc import ABC, abstractmethod


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Implementations of this class generate vector embeddings for text.
    The interface supports batched embedding for efficiency.

    Implementations may raise on any failure (network, auth, malformed
    payload); the embedder layer decides what to do about it.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, texts):
                return my_api.embed_batch(texts)
    """

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts.

        Args:
            texts: List of texts to embed.

        Returns:
            List of embedding vectors, one per input text.
            Order is preserved (result[i] corresponds to texts[i]).
        """
        ...

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (async).

        Default implementation calls sync embed(). Override in subclasses
        for true async behavior.
        """
        return self.embed(texts)
