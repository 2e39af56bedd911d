# src/ragdesk/commands/query.py
"""Query command - build the context for a question."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ragdesk.commands.base import QueryResult, SearchResult
from ragdesk.commands.ingest import FileCallback, ingest_files
from ragdesk.config import ConfigError, get_knowledge_base
from ragdesk.ranker import format_context
from ragdesk.retriever import get_sources


def query(
    question: str,
    paths: Sequence[str | Path],
    config_path: str | Path | None = None,
    k: int | None = None,
    use_knowledge_base: bool = True,
    on_file_complete: FileCallback | None = None,
) -> QueryResult:
    """Ingest the given files and build the context for a question.

    Args:
        question: The question to ask
        paths: Files making up the knowledge base
        config_path: Override config file path
        k: Number of candidates considered (None for the settings default)
        use_knowledge_base: When False, nothing is retrieved
        on_file_complete: Optional callback invoked after each file

    Returns:
        QueryResult with the context string and the scored chunks
    """
    kb = get_knowledge_base(config_path)
    if isinstance(kb, ConfigError):
        return QueryResult(success=False, query=question, error=kb.message)

    files = ingest_files(kb, paths, on_file_complete=on_file_complete)
    if not any(f.ok for f in files):
        return QueryResult(
            success=False,
            query=question,
            error="No files could be ingested",
            files=files,
        )

    scored = kb.rank(question, top_k=k) if use_knowledge_base else []
    context = format_context(scored, kb.settings.context_separator)

    return QueryResult(
        success=True,
        query=question,
        context=context,
        sources=get_sources(context),
        results=[
            SearchResult(source=r.chunk.source_name, content=r.chunk.text, score=r.score)
            for r in scored
        ],
        files=files,
    )
