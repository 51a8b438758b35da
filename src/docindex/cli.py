"""Command line interface for docindex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docindex.config import AppConfig
from docindex.errors import DocIndexError
from docindex.index.builder import build_index, write_index
from docindex.ingestion.crawler import crawl_all
from docindex.models import DocumentRecord


console = Console()
app = typer.Typer(help="docindex - build a lunr search index from the docs tree")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: DocIndexError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True, emoji=False)
    return typer.Exit(code=1)


def _crawl(config: AppConfig) -> List[DocumentRecord]:
    docs_root = config.resolve_docs_root(Path.cwd())
    try:
        records = crawl_all(docs_root, config.section_names, config.tutorial_names)
    except DocIndexError as exc:
        raise _fail(exc) from exc
    console.print(f"Crawled {len(records)} documents.", markup=False, soft_wrap=True, emoji=False)
    return records


@app.command()
def build(
    docs: Path = typer.Option(AppConfig().docs_root, "--docs", help="Documentation root"),
    output: Path = typer.Option(AppConfig().output_path, "--output", "-o", help="Index file to write"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Crawl the docs tree and write the search index."""
    _setup_logging(verbose)
    config = AppConfig(docs_root=docs, output_path=output)

    records = _crawl(config)
    try:
        serialized = build_index(records)
    except DocIndexError as exc:
        raise _fail(exc) from exc

    written = write_index(serialized, config.resolve_output_path(Path.cwd()))
    console.print(f"Search index written to {written}.", markup=False, soft_wrap=True, emoji=False)


@app.command()
def crawl(
    docs: Path = typer.Option(AppConfig().docs_root, "--docs", help="Documentation root"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the documents that would be indexed."""
    _setup_logging(verbose)
    records = _crawl(AppConfig(docs_root=docs))
    if not records:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Component")
    table.add_column("Subcomponent")
    table.add_column("Path")
    table.add_column("Title")

    for record in records:
        table.add_row(
            *(escape(value) for value in (record.component, record.subcomponent, record.path, record.title))
        )

    console.print(table)
