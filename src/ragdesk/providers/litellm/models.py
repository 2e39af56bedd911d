"""Curated embedding model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. You can always pass
any valid LiteLLM embedding model string directly.

Example:
    from ragdesk.providers.litellm import EmbeddingModels, LiteLLMEmbeddingClient

    client = LiteLLMEmbeddingClient(model=EmbeddingModels.MISTRAL_EMBED)
"""


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient."""

    # Mistral
    MISTRAL_EMBED = "mistral/mistral-embed"

    # OpenAI
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"

    # Google Gemini
    GEMINI_EMBEDDING_001 = "gemini/gemini-embedding-001"

    # Local models (Ollama)
    OLLAMA_NOMIC_EMBED = "ollama/nomic-embed-text"
