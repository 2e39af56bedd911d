# src/ragdesk/configuration/base.py
"""Protocol definition for provider configuration objects.

Implementations can use @dataclass(frozen=True) for immutability. Any
object with a matching build_embedder() satisfies the protocol without
inheriting from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ragdesk.embedder import Embedder
    from ragdesk.settings import Settings


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the embedder used for both chunks and
    queries.

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            embedding: str

            def build_embedder(self, settings: Settings) -> Embedder: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for creating vector embeddings.

        Args:
            settings: Settings containing embedding_dimension, embedding_timeout
                      and num_retries.
        """
        ...
