"""Exceptions raised while crawling and indexing documentation."""

from __future__ import annotations

from pathlib import Path


class DocIndexError(Exception):
    """Base class for fatal build errors."""


class FormatError(DocIndexError):
    """A document path or its contents do not have the expected shape."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = path


class DuplicateDocumentError(FormatError):
    """Two records share the same index reference."""


class ConfigError(DocIndexError):
    """A directory or file in the docs tree has no label in the lookup tables."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name
