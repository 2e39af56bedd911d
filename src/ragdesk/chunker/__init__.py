"""Text chunking for ragdesk."""

from ragdesk.chunker.base import Chunker
from ragdesk.chunker.sentence import (
    SentenceChunker,
    normalize_whitespace,
    split_sentences,
    split_text,
)

__all__ = [
    "Chunker",
    "SentenceChunker",
    "normalize_whitespace",
    "split_sentences",
    "split_text",
]
