"""Chunker abstract base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Abstract base class for splitting document text into chunks."""

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Split text into an ordered list of chunk texts."""
        ...
