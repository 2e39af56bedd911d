"""Configuration objects for ragdesk.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build the embedder):
- LiteLLMProvider: Remote embeddings through LiteLLM, hash fallback
- LocalProvider: Hash embeddings only

Example:
    from ragdesk import KnowledgeBase, LiteLLMProvider

    kb = KnowledgeBase(provider=LiteLLMProvider(embedding="mistral/mistral-embed"))
"""

from ragdesk.configuration.base import ProviderConfig
from ragdesk.configuration.providers import LiteLLMProvider, LocalProvider

__all__ = ["ProviderConfig", "LiteLLMProvider", "LocalProvider"]
