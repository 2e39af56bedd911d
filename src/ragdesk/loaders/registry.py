"""Loader registry for selecting file loaders by extension."""

import importlib.util
from pathlib import Path

from ragdesk.exceptions import UnsupportedFileType
from ragdesk.loaders.base import Loader
from ragdesk.loaders.text import TextLoader


class LoaderRegistry:
    """Table of loaders keyed by file extension.

    The table is filled once, when loaders are registered; lookups are a
    dictionary access. A later registration for an extension wins.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._loaders: dict[str, Loader] = {}

    def register(self, loader: Loader) -> None:
        """Register a loader for all of its extensions."""
        for extension in loader.extensions:
            self._loaders[extension.lower()] = loader

    @property
    def extensions(self) -> list[str]:
        """Registered extensions, sorted."""
        return sorted(self._loaders)

    def find_loader(self, path: str) -> Loader | None:
        """Find the loader registered for the path's extension."""
        return self._loaders.get(Path(path).suffix.lower())

    def load(self, path: str) -> str:
        """Extract text from a file using the appropriate loader.

        Raises:
            UnsupportedFileType: If no loader is registered for the file type
        """
        loader = self.find_loader(path)
        if loader is None:
            raise UnsupportedFileType(
                f"No loader found for: {path} (supported: {', '.join(self.extensions)})"
            )
        return loader.load(path)

    @classmethod
    def default(cls) -> "LoaderRegistry":
        """Create a registry with all available loaders registered.

        Registers TextLoader (always available) plus the PDF and HTML
        loaders when their dependencies are installed.
        """
        registry = cls()
        registry.register(TextLoader())

        if importlib.util.find_spec("pypdf") is not None:
            from ragdesk.loaders.pypdf_loader import PyPDFLoader

            registry.register(PyPDFLoader())

        if (
            importlib.util.find_spec("bs4") is not None
            and importlib.util.find_spec("markdownify") is not None
        ):
            from ragdesk.loaders.html import HTMLLoader

            registry.register(HTMLLoader())

        return registry
