"""Storage abstractions for ragdesk."""

from ragdesk.stores.base import DocumentStore
from ragdesk.stores.memory import InMemoryDocumentStore, sanitize_name

__all__ = ["DocumentStore", "InMemoryDocumentStore", "sanitize_name"]
