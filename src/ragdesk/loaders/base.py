"""Loader abstract base class."""

from abc import ABC, abstractmethod
from pathlib import Path


class Loader(ABC):
    """Abstract base class for extracting plain text from files."""

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset()

    @property
    def extensions(self) -> frozenset[str]:
        """Lower-case file extensions (with leading dot) this loader handles."""
        return self.SUPPORTED_EXTENSIONS

    def supports(self, path: str) -> bool:
        """Check if this loader supports the given path."""
        return Path(path).suffix.lower() in self.extensions

    @abstractmethod
    def load(self, path: str) -> str:
        """Load a file and return its text.

        Args:
            path: Path to the file to load

        Returns:
            The extracted plain text (may be empty)

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...
