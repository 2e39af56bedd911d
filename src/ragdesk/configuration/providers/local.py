"""Local (offline) provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragdesk.embedder import Embedder
    from ragdesk.settings import Settings


@dataclass(frozen=True)
class LocalProvider:
    """Provider configuration without a remote embedding model.

    Every vector comes from the deterministic hash embedder, so retrieval
    quality is limited but nothing leaves the process.

    Example:
        kb = KnowledgeBase(provider=LocalProvider())
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        from ragdesk.embedder import ClientEmbedder, HashEmbedder

        return ClientEmbedder(
            embedding_client=None,
            fallback=HashEmbedder(dimension=settings.embedding_dimension),
        )
