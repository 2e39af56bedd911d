"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragdesk.embedder import Embedder
    from ragdesk.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for embedding calls.

    Vectors come from the remote model; whenever a call fails, times out or
    returns something malformed, the hash fallback is used for that text.

    Args:
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "mistral/mistral-embed", "openai/text-embedding-3-small"
        api_key: Optional explicit API key. If None, LiteLLM reads the
                 provider's environment variable (e.g. MISTRAL_API_KEY).
        expected_dimension: Reject provider vectors of any other length.

    Example:
        provider = LiteLLMProvider(embedding="mistral/mistral-embed")
    """

    embedding: str
    api_key: str | None = None
    expected_dimension: int | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client.

        Args:
            settings: Settings containing embedding_timeout, num_retries and
                      the fallback embedding_dimension.
        """
        from ragdesk.embedder import ClientEmbedder, HashEmbedder
        from ragdesk.providers import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            timeout=settings.embedding_timeout,
            api_key=self.api_key,
        )
        return ClientEmbedder(
            embedding_client=embedding_client,
            fallback=HashEmbedder(dimension=settings.embedding_dimension),
            expected_dimension=self.expected_dimension,
        )
