# src/ragdesk/commands/stats.py
"""Stats command - document and chunk counts for a set of files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ragdesk.commands.base import StatsResult
from ragdesk.commands.ingest import FileCallback, ingest_files
from ragdesk.config import ConfigError, get_knowledge_base


def stats(
    paths: Sequence[str | Path],
    config_path: str | Path | None = None,
    on_file_complete: FileCallback | None = None,
) -> StatsResult:
    """Ingest the given files and report the store statistics."""
    kb = get_knowledge_base(config_path)
    if isinstance(kb, ConfigError):
        return StatsResult(success=False, error=kb.message)

    files = ingest_files(kb, paths, on_file_complete=on_file_complete)
    return StatsResult(success=True, stats=kb.get_stats(), files=files)
