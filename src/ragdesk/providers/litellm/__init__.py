"""LiteLLM provider client for ragdesk.

Usage:
    from ragdesk.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

    client = LiteLLMEmbeddingClient(model=EmbeddingModels.MISTRAL_EMBED)
"""

from ragdesk.providers.litellm.client import LiteLLMEmbeddingClient
from ragdesk.providers.litellm.models import EmbeddingModels

__all__ = ["EmbeddingModels", "LiteLLMEmbeddingClient"]
