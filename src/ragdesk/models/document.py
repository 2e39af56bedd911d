"""Document data model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """An ingested source.

    ``name`` is the label shown to users and the key that ties chunks back to
    their document, so it is unique among live documents.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    upload_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
