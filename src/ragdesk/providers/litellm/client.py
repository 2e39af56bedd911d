"""LiteLLM client implementation for embedding APIs."""

from typing import Any

import litellm

from ragdesk.providers.base import EmbeddingClient
from ragdesk.providers.litellm.models import EmbeddingModels
from ragdesk.providers.schemas import EmbeddingPayload


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Supports any embedding model available through LiteLLM (Mistral, OpenAI,
    Gemini, Ollama, ...). Responses are validated before they are returned;
    a malformed payload raises EmbeddingResponseError.

    Example:
        from ragdesk.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.MISTRAL_EMBED)
        embeddings = client.embed(["Hello world", "How are you?"])

        # Fail fast instead of waiting on a slow provider
        client = LiteLLMEmbeddingClient(timeout=5.0, num_retries=0)
    """

    def __init__(
        self,
        model: str = EmbeddingModels.MISTRAL_EMBED,
        num_retries: int = 3,
        timeout: float = 30.0,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "mistral/mistral-embed", "openai/text-embedding-3-small"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            timeout: Seconds to wait for the provider before giving up.
            api_key: Explicit API key. If None, LiteLLM reads the provider's
                     usual environment variable (e.g. MISTRAL_API_KEY).
        """
        self.model = model
        self.num_retries = num_retries
        self.timeout = timeout
        self.api_key = api_key

    def _embedding_kwargs(self, texts: list[str]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
            "timeout": self.timeout,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        return kwargs

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        response = litellm.embedding(**self._embedding_kwargs(texts))
        return EmbeddingPayload.parse(response, expected_count=len(texts)).vectors()

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM (async)."""
        if not texts:
            return []

        response = await litellm.aembedding(**self._embedding_kwargs(texts))
        return EmbeddingPayload.parse(response, expected_count=len(texts)).vectors()
