"""Typed views of raw embedding provider responses."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ragdesk.exceptions import EmbeddingResponseError

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class EmbeddingItem(BaseModel):
    """One vector of an embedding response."""

    model_config = ConfigDict(from_attributes=True)

    index: int = 0
    embedding: list[FiniteFloat] = Field(min_length=1)


class EmbeddingPayload(BaseModel):
    """The ``data`` list of an OpenAI-style embedding response."""

    model_config = ConfigDict(from_attributes=True)

    data: list[EmbeddingItem] = Field(min_length=1)

    @classmethod
    def parse(cls, response: Any, expected_count: int) -> "EmbeddingPayload":
        """Validate a raw provider response.

        Args:
            response: Provider response object or dict with a ``data`` list.
            expected_count: Number of texts that were sent.

        Raises:
            EmbeddingResponseError: If the response does not have the expected shape.
        """
        try:
            if isinstance(response, dict):
                payload = cls.model_validate(response)
            else:
                payload = cls.model_validate(response, from_attributes=True)
        except ValidationError as e:
            raise EmbeddingResponseError(f"Malformed embedding response: {e}") from e

        if len(payload.data) != expected_count:
            raise EmbeddingResponseError(
                f"Embedding count mismatch: {expected_count} texts, {len(payload.data)} vectors"
            )
        return payload

    def vectors(self) -> list[list[float]]:
        """Vectors ordered by their response index."""
        return [item.embedding for item in sorted(self.data, key=lambda item: item.index)]
