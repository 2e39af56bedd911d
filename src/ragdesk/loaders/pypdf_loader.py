# src/ragdesk/loaders/pypdf_loader.py
"""PDF loader using pypdf - lightweight, pure Python."""

from pathlib import Path

from ragdesk.loaders.base import Loader


class PyPDFLoader(Loader):
    """Load PDF files using pypdf.

    Extracts the text layer page by page; scanned PDFs without a text layer
    yield an empty string.

    Requires: pip install ragdesk[pdf]
    """

    SUPPORTED_EXTENSIONS = frozenset({".pdf"})

    def load(self, path: str) -> str:
        """Load a PDF file and return the text of all pages.

        Pages are separated by blank lines.

        Raises:
            ImportError: If pypdf is not installed
            FileNotFoundError: If file does not exist
        """
        try:
            from pypdf import PdfReader
        except ImportError:
            raise ImportError(
                "pypdf is required for PDF text extraction. "
                "Install with: pip install ragdesk[pdf]"
            ) from None

        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        reader = PdfReader(path)
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
        return "\n\n".join(page for page in pages if page)
