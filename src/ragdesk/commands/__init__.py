# src/ragdesk/commands/__init__.py
"""UI-agnostic command layer for ragdesk.

Commands return data structures, allowing the CLI (or any other front end)
to render results appropriately.

Usage:
    from ragdesk.commands import query

    result = query.query("How do I reset my password?", ["faq.txt"])
"""

from ragdesk.commands import chunks, ingest, query, stats
from ragdesk.commands.base import (
    ChunksResult,
    CommandResult,
    FileIngestResult,
    QueryResult,
    SearchResult,
    StatsResult,
)

__all__ = [
    "CommandResult",
    "FileIngestResult",
    "QueryResult",
    "SearchResult",
    "StatsResult",
    "ChunksResult",
    "chunks",
    "ingest",
    "query",
    "stats",
]
