# src/ragdesk/settings.py
"""Configuration management for ragdesk.

This module contains behavioral settings that apply regardless of which
embedding provider is used. Settings are passed programmatically - the
library does not read from environment variables.

For applications that want env-based config, read env vars at the
application layer (see ``ragdesk.config``) and pass values explicitly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Dimension of the local hash embedding
DEFAULT_EMBEDDING_DIMENSION = 1024

# Separator between source-tagged blocks in a context string
DEFAULT_CONTEXT_SEPARATOR = "\n\n---\n\n"

SentenceSegmenter = Literal["punctuation", "pysbd"]


class Settings(BaseModel):
    """Behavioral settings for ragdesk.

    Example:
        settings = Settings(chunk_size=800, default_k=3)

        # Smaller chunks for short FAQ-style documents
        settings = Settings(chunk_size=200, chunk_overlap_sentences=1)
    """

    # Chunking
    chunk_size: int = Field(default=500, gt=0)
    chunk_overlap_sentences: int = Field(default=2, ge=0, le=2)
    min_chunk_length: int = Field(default=50, ge=0)
    sentence_segmenter: SentenceSegmenter = "punctuation"

    # Retrieval
    default_k: int = Field(default=5, gt=0)
    min_relevance: float = 0.3
    relative_relevance: float = Field(default=0.5, ge=0.0, le=1.0)
    context_separator: str = DEFAULT_CONTEXT_SEPARATOR

    # Embedding
    embedding_dimension: int = Field(default=DEFAULT_EMBEDDING_DIMENSION, gt=0)
    embedding_timeout: float = Field(default=30.0, gt=0)
    num_retries: int = Field(default=3, ge=0)
