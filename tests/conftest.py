"""Shared pytest fixtures."""

import logging
from dataclasses import dataclass
from typing import Any

import pytest

from ragdesk.embedder import Embedder


class KeywordEmbedder(Embedder):
    """Mock embedder: one dimension per vocabulary word, valued by occurrence count."""

    def __init__(self, vocabulary: list[str]) -> None:
        self.vocabulary = vocabulary
        self.calls: list[str] = []

    @property
    def dimension(self) -> int:
        return len(self.vocabulary)

    def embed_text(self, text: str) -> list[float]:
        self.calls.append(text)
        lowered = text.lower()
        return [float(lowered.count(word)) for word in self.vocabulary]


@dataclass(frozen=True)
class MockProvider:
    """Provider that hands out a prebuilt embedder."""

    _embedder: Any

    def build_embedder(self, settings: Any) -> Any:
        return self._embedder


@pytest.fixture
def keyword_embedder():
    return KeywordEmbedder(["target", "password", "refund", "hours", "shipping"])


@pytest.fixture
def mock_provider(keyword_embedder):
    return MockProvider(_embedder=keyword_embedder)


@pytest.fixture
def kb(mock_provider):
    """Knowledge base with keyword embeddings and default settings."""
    from ragdesk import KnowledgeBase

    return KnowledgeBase(provider=mock_provider)


@pytest.fixture
def make_chunk():
    """Factory for chunks with sensible defaults."""
    from ragdesk.models import Chunk

    def _make(text: str, source_name: str = "doc.txt", embedding=None) -> Chunk:
        return Chunk(text=text, source_name=source_name, embedding=embedding)

    return _make


@pytest.fixture
def write_file(tmp_path):
    """Write a text file under tmp_path and return its path."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


CONFIG_ENV_KEYS = [
    "RAGDESK_EMBEDDING_MODEL",
    "RAGDESK_EMBEDDING_API_KEY",
    "MISTRAL_API_KEY",
    "RAGDESK_CHUNK_SIZE",
    "RAGDESK_CHUNK_OVERLAP_SENTENCES",
    "RAGDESK_MIN_CHUNK_LENGTH",
    "RAGDESK_DEFAULT_K",
    "RAGDESK_NUM_RETRIES",
    "RAGDESK_MIN_RELEVANCE",
    "RAGDESK_RELATIVE_RELEVANCE",
    "RAGDESK_EMBEDDING_TIMEOUT",
    "RAGDESK_SENTENCE_SEGMENTER",
]


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """Isolate a test from the developer's environment and config files."""
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging (the CLI calls it)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
