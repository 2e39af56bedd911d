"""Data models for ragdesk."""

from ragdesk.models.chunk import Chunk
from ragdesk.models.document import Document
from ragdesk.models.results import DocumentStats, ScoredChunk, StoreStats

__all__ = ["Chunk", "Document", "DocumentStats", "ScoredChunk", "StoreStats"]
