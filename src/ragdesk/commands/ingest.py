# src/ragdesk/commands/ingest.py
"""Ingest command helpers shared by the other commands.

The store is in-memory, so every command starts by ingesting its files into
a fresh knowledge base.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ragdesk.commands.base import FileIngestResult
from ragdesk.exceptions import RagdeskError

if TYPE_CHECKING:
    from ragdesk.knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)

FileCallback = Callable[[FileIngestResult], None]


def ingest_files(
    kb: KnowledgeBase,
    paths: Sequence[str | Path],
    on_file_complete: FileCallback | None = None,
) -> list[FileIngestResult]:
    """Ingest each file, recording failures instead of stopping at the first one.

    Documents are named after the file's basename. When an earlier file in
    the same call already took that basename, the path is used as the name
    instead so the earlier document is not replaced. A path given twice is
    recorded as an error.

    Args:
        kb: Knowledge base receiving the documents
        paths: Files to ingest, in order
        on_file_complete: Optional callback invoked after each file

    Returns:
        One FileIngestResult per path, in input order
    """
    results = []
    used_names: set[str] = set()
    for path in paths:
        name = Path(path).name
        if name in used_names:
            name = str(path)

        if name in used_names:
            logger.warning("Skipping %s: given more than once", path)
            result = FileIngestResult(filepath=str(path), error="Duplicate file")
        else:
            result = _ingest_one(kb, path, name)
            if result.ok:
                used_names.add(name)

        results.append(result)
        if on_file_complete:
            on_file_complete(result)
    return results


def _ingest_one(kb: KnowledgeBase, path: str | Path, name: str) -> FileIngestResult:
    try:
        document = kb.ingest_file(path, source_name=name)
    except RagdeskError as e:
        logger.warning("Skipping %s: %s", path, e)
        return FileIngestResult(filepath=str(path), error=str(e))
    return FileIngestResult(
        filepath=str(path),
        document_id=document.id,
        source_name=document.name,
        chunks=len(kb.store.get_chunks_by_source(document.name)),
    )
