"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

MARKDOWN_SUFFIX = ".md"


def is_markdown(name: str) -> bool:
    """Return True when a file name ends in ``.md`` (case-sensitive)."""
    return name.endswith(MARKDOWN_SUFFIX)


def iter_children(directory: Path) -> Iterator[Path]:
    """Yield the immediate children of a directory sorted by name."""
    yield from sorted(directory.iterdir(), key=lambda child: child.name)


def iter_markdown_files(directory: Path) -> Iterator[Path]:
    """Yield ``.md`` files directly inside a directory, sorted by name."""
    for child in iter_children(directory):
        if child.is_file() and is_markdown(child.name):
            yield child


def read_text_exact(path: Path) -> str:
    """Read a UTF-8 file without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()
