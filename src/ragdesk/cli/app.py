# src/ragdesk/cli/app.py
"""Command-line interface for ragdesk.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import logging
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table
    from rich.text import Text
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install ragdesk[cli]"
    ) from e

from ragdesk import __version__
from ragdesk.commands import chunks, query, stats
from ragdesk.commands.base import FileIngestResult
from ragdesk.config import load_env_file
from ragdesk.logging_utils import configure_logging

app = typer.Typer(
    name="ragdesk",
    help="ragdesk - Document knowledge base for retrieval-augmented chat.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"ragdesk {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """ragdesk - Document knowledge base for retrieval-augmented chat."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    load_env_file()


def _render_files(files: list[FileIngestResult], plain: bool) -> None:
    for f in files:
        if f.ok:
            # Files sharing a basename are stored under their path
            renamed = f" as {f.source_name}" if f.source_name != Path(f.filepath).name else ""
            if plain:
                console.print(f"Ingested {f.filepath}{renamed} ({f.chunks} chunks)")
            else:
                console.print(
                    f"[green]Ingested {f.filepath}{renamed}[/green] [dim]({f.chunks} chunks)[/dim]"
                )
        elif plain:
            console.print(f"Failed {f.filepath}: {f.error}")
        else:
            console.print(f"[red]Failed {f.filepath}:[/red] {f.error}")


@app.command(name="query")
def query_cmd(
    files: list[str] = typer.Argument(..., help="Files making up the knowledge base"),
    question: str = typer.Option(..., "--question", "-q", help="Question to ask"),
    k: int = typer.Option(
        None,
        "--k",
        "-k",
        help="Number of candidates considered",
    ),
    no_kb: bool = typer.Option(
        False,
        "--no-kb",
        help="Skip retrieval (the context is empty)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Ingest files and print the context retrieved for a question."""
    result = query.query(
        question=question,
        paths=files,
        config_path=config_file,
        k=k,
        use_knowledge_base=not no_kb,
    )
    _render_files(result.files, plain)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.context:
        if plain:
            console.print("No relevant context found.")
        else:
            console.print("[yellow]No relevant context found.[/yellow]")
        raise typer.Exit(0)

    if plain:
        console.print(result.context, markup=False, highlight=False)
        console.print()
        console.print("Sources:")
        for i, r in enumerate(result.results, 1):
            console.print(f"  [{i}] {r.source} (score: {r.score:.3f})", markup=False)
    else:
        console.print(Panel(Text(result.context), title="Context", border_style="green"))
        console.print("[bold]Sources:[/bold]")
        for i, r in enumerate(result.results, 1):
            console.print(f"  \\[{i}] [cyan]{r.source}[/cyan] [dim](score: {r.score:.3f})[/dim]")


@app.command(name="stats")
def stats_cmd(
    files: list[str] = typer.Argument(..., help="Files making up the knowledge base"),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Ingest files and show document and chunk counts."""
    result = stats.stats(paths=files, config_path=config_file)
    _render_files(result.files, plain)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    store_stats = result.stats
    if plain:
        console.print(f"Documents: {store_stats.total_documents}")
        console.print(f"Chunks: {store_stats.total_chunks}")
        for doc in store_stats.documents:
            console.print(f"  {doc.name}: {doc.chunks} chunks ({doc.id})")
        return

    table = Table(title=f"Documents ({store_stats.total_documents})")
    table.add_column("Name", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Uploaded")
    table.add_column("Chunks", justify="right", style="green")

    for doc in store_stats.documents:
        table.add_row(
            doc.name,
            doc.id,
            doc.upload_date.strftime("%Y-%m-%d %H:%M:%S"),
            str(doc.chunks),
        )

    console.print(table)
    console.print(f"[bold]Total chunks:[/bold] {store_stats.total_chunks}")


@app.command(name="chunks")
def chunks_cmd(
    file: str = typer.Argument(..., help="File to split"),
    chunk_size: int = typer.Option(
        None,
        "--chunk-size",
        help="Maximum characters per chunk (default: from settings)",
    ),
    overlap: int = typer.Option(
        None,
        "--overlap",
        help="Sentences carried into the next chunk (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Preview how a file is split into chunks."""
    result = chunks.chunks(
        path=file,
        config_path=config_file,
        chunk_size=chunk_size,
        overlap=overlap,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    kept = len(result.kept)
    for i, chunk in enumerate(result.chunks, 1):
        short = len(chunk) < result.min_chunk_length
        if plain:
            marker = " (discarded)" if short else ""
            console.print(f"[{i}] {len(chunk)} chars{marker}", markup=False)
            console.print(chunk, markup=False, highlight=False)
        else:
            style = "dim" if short else "green"
            subtitle = "discarded" if short else None
            console.print(
                Panel(
                    Text(chunk),
                    title=f"[{style}]#{i} - {len(chunk)} chars[/{style}]",
                    subtitle=subtitle,
                    border_style=style,
                )
            )

    console.print(f"{len(result.chunks)} chunks, {kept} kept", markup=False)
