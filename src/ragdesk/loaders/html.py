# src/ragdesk/loaders/html.py
"""HTML file loader - converts HTML to markdown text."""

from pathlib import Path

from ragdesk.loaders.base import Loader


class HTMLLoader(Loader):
    """Load HTML files and convert to markdown.

    Cleans HTML by removing scripts, styles, and navigation elements,
    then converts the rest to markdown.

    Requires: pip install ragdesk[html]
    """

    SUPPORTED_EXTENSIONS = frozenset({".html", ".htm"})

    # Tags to remove entirely (including their content)
    REMOVE_TAGS = ["script", "style", "nav", "footer", "header", "aside", "noscript"]

    def load(self, path: str) -> str:
        """Load an HTML file and return its content as markdown.

        Raises:
            ImportError: If beautifulsoup4 or markdownify is not installed
            FileNotFoundError: If file does not exist
        """
        try:
            from bs4 import BeautifulSoup
            from markdownify import markdownify
        except ImportError:
            raise ImportError(
                "beautifulsoup4 and markdownify are required for HTML support. "
                "Install with: pip install ragdesk[html]"
            ) from None

        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = file_path.read_text(encoding="utf-8")
        if not content.strip():
            return ""

        soup = BeautifulSoup(content, "html.parser")
        for tag in soup(self.REMOVE_TAGS):
            tag.decompose()

        md_text = markdownify(str(soup), heading_style="ATX")
        return self._clean_markdown(md_text).strip()

    def _clean_markdown(self, text: str) -> str:
        """Collapse runs of blank lines."""
        cleaned = []
        prev_blank = False

        for line in text.split("\n"):
            is_blank = not line.strip()
            if is_blank and prev_blank:
                continue
            cleaned.append(line)
            prev_blank = is_blank

        return "\n".join(cleaned)
