"""Client-based embedder with deterministic fallback."""

import logging

from ragdesk.embedder.base import Embedder
from ragdesk.embedder.hashing import HashEmbedder
from ragdesk.exceptions import EmbeddingResponseError
from ragdesk.providers.base import EmbeddingClient

logger = logging.getLogger(__name__)


class ClientEmbedder(Embedder):
    """Embedder that prefers an EmbeddingClient and falls back to hashing.

    The fallback is taken when no client is configured, when the client
    raises (network error, timeout, missing credentials), or when the
    returned vector fails validation. Failures are logged, never raised.

    Example:
        from ragdesk.providers.litellm import LiteLLMEmbeddingClient
        from ragdesk.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="mistral/mistral-embed", timeout=10.0)
        embedder = ClientEmbedder(embedding_client=client)

        # No provider: every vector comes from the hash fallback
        embedder = ClientEmbedder(embedding_client=None)
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient | None,
        fallback: HashEmbedder | None = None,
        expected_dimension: int | None = None,
    ) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation, or None to
                use the fallback exclusively.
            fallback: Embedder used when the client is unavailable.
                Default: HashEmbedder with 1024 dimensions.
            expected_dimension: If set, provider vectors of any other length
                are rejected in favour of the fallback.
        """
        self._client = embedding_client
        self._fallback = fallback or HashEmbedder()
        self.expected_dimension = expected_dimension

    @property
    def dimension(self) -> int | None:
        if self._client is None:
            return self._fallback.dimension
        return self.expected_dimension

    @property
    def fallback(self) -> HashEmbedder:
        return self._fallback

    def _validate(self, vectors: list[list[float]]) -> list[float]:
        if len(vectors) != 1:
            raise EmbeddingResponseError(f"Expected 1 vector, got {len(vectors)}")
        vector = vectors[0]
        if not vector:
            raise EmbeddingResponseError("Provider returned an empty vector")
        if self.expected_dimension is not None and len(vector) != self.expected_dimension:
            raise EmbeddingResponseError(
                f"Expected dimension {self.expected_dimension}, got {len(vector)}"
            )
        return [float(v) for v in vector]

    def embed_text(self, text: str) -> list[float]:
        """Embed via the client, or the fallback on any failure."""
        if self._client is None:
            return self._fallback.embed_text(text)

        try:
            return self._validate(self._client.embed([text]))
        except Exception as e:
            logger.warning("Embedding provider failed, using fallback embedding: %s", e)
            return self._fallback.embed_text(text)

    async def aembed_text(self, text: str) -> list[float]:
        """Embed via the client (async), or the fallback on any failure."""
        if self._client is None:
            return self._fallback.embed_text(text)

        try:
            return self._validate(await self._client.aembed([text]))
        except Exception as e:
            logger.warning("Embedding provider failed, using fallback embedding: %s", e)
            return self._fallback.embed_text(text)
