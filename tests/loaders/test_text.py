# tests/loaders/test_text.py
"""Tests for TextLoader."""

import pytest

from ragdesk.loaders.base import Loader
from ragdesk.loaders.text import TextLoader


@pytest.fixture
def loader():
    return TextLoader()


class TestTextLoader:
    def test_is_loader(self, loader):
        assert isinstance(loader, Loader)

    @pytest.mark.parametrize("name", ["a.txt", "a.md", "a.markdown", "a.text", "A.TXT"])
    def test_supports(self, loader, name):
        assert loader.supports(name)

    def test_does_not_support_pdf(self, loader):
        assert not loader.supports("a.pdf")

    def test_loads_content_verbatim(self, loader, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("# Title\n\nBody with ünïcode.", encoding="utf-8")

        assert loader.load(str(path)) == "# Title\n\nBody with ünïcode."

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            loader.load(str(tmp_path / "missing.txt"))
