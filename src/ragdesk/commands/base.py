# src/ragdesk/commands/base.py
"""Result types for the commands layer.

Commands return these data structures; the CLI decides how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ragdesk.models import StoreStats


@dataclass
class CommandResult:
    """Base result for all commands."""

    success: bool
    error: str | None = None


@dataclass
class FileIngestResult:
    """Result of ingesting a single file."""

    filepath: str
    document_id: str | None = None
    source_name: str | None = None
    chunks: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SearchResult:
    """One relevant chunk returned by a query."""

    source: str
    content: str
    score: float


@dataclass
class QueryResult(CommandResult):
    """Result of a query: the context string plus the scored chunks behind it."""

    query: str = ""
    context: str = ""
    sources: list[str] = field(default_factory=list)
    results: list[SearchResult] = field(default_factory=list)
    files: list[FileIngestResult] = field(default_factory=list)


@dataclass
class StatsResult(CommandResult):
    """Result of the stats command."""

    stats: StoreStats = field(default_factory=StoreStats)
    files: list[FileIngestResult] = field(default_factory=list)


@dataclass
class ChunksResult(CommandResult):
    """Result of previewing how a file is chunked."""

    filepath: str = ""
    chunks: list[str] = field(default_factory=list)
    min_chunk_length: int = 0

    @property
    def kept(self) -> list[str]:
        """Chunks long enough to be stored."""
        return [chunk for chunk in self.chunks if len(chunk) >= self.min_chunk_length]
