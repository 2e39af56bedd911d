"""Embedding functionality for ragdesk."""

from ragdesk.embedder.base import Embedder
from ragdesk.embedder.client import ClientEmbedder
from ragdesk.embedder.hashing import HashEmbedder, word_hash

__all__ = ["Embedder", "ClientEmbedder", "HashEmbedder", "word_hash"]
