"""Result data models for ragdesk queries and statistics."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ragdesk.models.chunk import Chunk


class ScoredChunk(BaseModel):
    """A chunk together with its relevance score for one query."""

    chunk: Chunk
    score: float


class DocumentStats(BaseModel):
    """Per-document breakdown in StoreStats."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    upload_date: datetime
    chunks: int


class StoreStats(BaseModel):
    """Snapshot of the knowledge base contents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_documents: int = 0
    total_chunks: int = 0
    documents: list[DocumentStats] = Field(default_factory=list)
