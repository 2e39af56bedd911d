"""Text and Markdown file loader."""

from pathlib import Path

from ragdesk.loaders.base import Loader


class TextLoader(Loader):
    """Load plain text and markdown files as UTF-8 text."""

    SUPPORTED_EXTENSIONS = frozenset({".txt", ".md", ".markdown", ".text"})

    def load(self, path: str) -> str:
        """Load a text file and return its content."""
        file_path = Path(path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        return file_path.read_text(encoding="utf-8")
