# src/ragdesk/commands/chunks.py
"""Chunks command - preview how a file would be split."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ragdesk.chunker import SentenceChunker
from ragdesk.commands.base import ChunksResult
from ragdesk.config import build_settings, describe_validation_error, load_config
from ragdesk.exceptions import RagdeskError
from ragdesk.loaders import LoaderRegistry


def chunks(
    path: str | Path,
    config_path: str | Path | None = None,
    chunk_size: int | None = None,
    overlap: int | None = None,
) -> ChunksResult:
    """Split a file into chunks without embedding or storing anything.

    Args:
        path: File to preview
        config_path: Override config file path
        chunk_size: Override the configured chunk size
        overlap: Override the configured overlap (sentences)
    """
    try:
        settings = build_settings(load_config(config_path))
        chunker = SentenceChunker(
            chunk_size=chunk_size if chunk_size is not None else settings.chunk_size,
            overlap_sentences=overlap if overlap is not None else settings.chunk_overlap_sentences,
            segmenter=settings.sentence_segmenter,
        )
        text = LoaderRegistry.default().load(str(path))
    except ValidationError as e:
        return ChunksResult(
            success=False,
            filepath=str(path),
            error=f"Invalid settings: {describe_validation_error(e)}",
        )
    except (RagdeskError, OSError, ValueError) as e:
        return ChunksResult(success=False, filepath=str(path), error=str(e))

    return ChunksResult(
        success=True,
        filepath=str(path),
        chunks=chunker.split(text),
        min_chunk_length=settings.min_chunk_length,
    )
