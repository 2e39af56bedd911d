"""Chunk data model."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Chunk(BaseModel):
    """A bounded piece of a document, the unit of retrieval."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    source_name: str
    upload_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    embedding: list[float] | None = None
