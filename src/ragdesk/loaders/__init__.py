"""File loaders for ragdesk."""

from ragdesk.loaders.base import Loader
from ragdesk.loaders.registry import LoaderRegistry
from ragdesk.loaders.text import TextLoader

# Optional loaders - imported lazily to avoid ImportError when deps not installed
__all__ = ["Loader", "LoaderRegistry", "TextLoader"]


def __getattr__(name: str) -> type:
    """Lazy import optional loaders."""
    if name == "PyPDFLoader":
        from ragdesk.loaders.pypdf_loader import PyPDFLoader

        return PyPDFLoader
    elif name == "HTMLLoader":
        from ragdesk.loaders.html import HTMLLoader

        return HTMLLoader
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
