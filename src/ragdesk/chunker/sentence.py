# src/ragdesk/chunker/sentence.py
"""Sentence-based chunker implementation."""

import re

from ragdesk.chunker.base import Chunker
from ragdesk.settings import SentenceSegmenter

_WHITESPACE_RE = re.compile(r"\s+")

# A run of non-terminal characters closed by one or more of . ! ?, or the
# unterminated tail of the text.
_SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+$")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str) -> list[str]:
    """Split normalized text on terminal punctuation.

    Text without any terminal punctuation comes back as a single sentence.
    """
    sentences = [match.group().strip() for match in _SENTENCE_RE.finditer(text)]
    return [s for s in sentences if s]


class SentenceChunker(Chunker):
    """Chunker that packs whole sentences into size-bounded chunks.

    Sentences are accumulated greedily. When the next sentence would push the
    running chunk past ``chunk_size``, the running chunk is emitted and the
    next one starts with the last ``overlap_sentences`` sentences of it, so
    neighbouring chunks share context. A sentence is never split; one that is
    longer than ``chunk_size`` on its own is emitted as-is.

    Example:
        chunker = SentenceChunker(chunk_size=500, overlap_sentences=2)
        chunks = chunker.split(text)
    """

    def __init__(
        self,
        chunk_size: int = 500,
        overlap_sentences: int = 2,
        segmenter: SentenceSegmenter = "punctuation",
        language: str = "en",
    ) -> None:
        """Initialize the sentence chunker.

        Args:
            chunk_size: Maximum characters per chunk before overlap is added.
            overlap_sentences: Sentences carried over from the previous chunk (0-2).
            segmenter: "punctuation" splits on . ! ? (default); "pysbd" uses
                pySBD sentence boundary disambiguation (abbreviations, decimals).
            language: Language code for the pysbd segmenter.

        Raises:
            ValueError: If chunk_size or overlap_sentences is out of range.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if not 0 <= overlap_sentences <= 2:
            raise ValueError(f"overlap_sentences must be between 0 and 2, got {overlap_sentences}")
        self.chunk_size = chunk_size
        self.overlap_sentences = overlap_sentences
        self.segmenter = segmenter
        self._pysbd = None
        if segmenter == "pysbd":
            try:
                import pysbd
            except ImportError:
                raise ImportError(
                    "pysbd is required for the pysbd segmenter. "
                    "Install with: pip install ragdesk[pysbd]"
                ) from None
            self._pysbd = pysbd.Segmenter(language=language, clean=False)

    def sentences(self, text: str) -> list[str]:
        """Normalize text and split it into sentences."""
        normalized = normalize_whitespace(text)
        if not normalized:
            return []
        if self._pysbd is not None:
            segments = [s.strip() for s in self._pysbd.segment(normalized)]
            return [s for s in segments if s]
        return split_sentences(normalized)

    def split(self, text: str) -> list[str]:
        """Split text into overlapping, size-bounded chunks."""
        chunks: list[str] = []
        current: list[str] = []

        for sentence in self.sentences(text):
            if current and len(" ".join([*current, sentence])) > self.chunk_size:
                chunks.append(" ".join(current))
                current = current[-self.overlap_sentences :] if self.overlap_sentences else []
            current.append(sentence)

        if current:
            chunks.append(" ".join(current))

        return chunks


def split_text(text: str, chunk_size: int = 500, overlap_sentences: int = 2) -> list[str]:
    """Split text with a punctuation-based SentenceChunker."""
    return SentenceChunker(chunk_size=chunk_size, overlap_sentences=overlap_sentences).split(text)
