"""Provider configurations."""

from ragdesk.configuration.providers.litellm import LiteLLMProvider
from ragdesk.configuration.providers.local import LocalProvider

__all__ = ["LiteLLMProvider", "LocalProvider"]
