"""Provider implementations for ragdesk.

This module contains the embedding provider abstraction:
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementation (requires: pip install ragdesk[litellm])

Usage:
    from ragdesk.providers import EmbeddingClient
    from ragdesk.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels
"""

from ragdesk.providers.base import EmbeddingClient
from ragdesk.providers.schemas import EmbeddingItem, EmbeddingPayload

try:
    from ragdesk.providers.litellm import EmbeddingModels, LiteLLMEmbeddingClient
except ImportError:
    from ragdesk._optional import _create_missing_dependency_class

    class EmbeddingModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    LiteLLMEmbeddingClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMEmbeddingClient", "litellm"
    )

__all__ = [
    "EmbeddingClient",
    "EmbeddingItem",
    "EmbeddingPayload",
    "EmbeddingModels",
    "LiteLLMEmbeddingClient",
]
