"""Markdown front-matter parsing.

A document is expected to look exactly like::

    ---
    title: Some title
    ---

    Body text until the end of the file.

Anything else is a fatal :class:`~docindex.errors.FormatError`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from docindex.errors import FormatError
from docindex.models import DocumentRecord
from docindex.utils.files import read_text_exact
from docindex.utils.text import strip_wrapping_quotes

LOGGER = logging.getLogger(__name__)

# Greedy prefix: the logical path is whatever follows the last "/docs/".
DOC_PATH_RE = re.compile(r".*/docs/(.*)\.md")
FRONT_MATTER_RE = re.compile(r"---\ntitle: ([^\n]+)\n---\n\n(.*)", re.DOTALL)


def doc_path_for(file_path: Path) -> str:
    """Return the logical document path of a markdown file.

    Raises:
        FormatError: if the path is not of the form ``<root>/docs/<path>.md``.
    """
    match = DOC_PATH_RE.fullmatch(Path(file_path).as_posix())
    if match is None:
        raise FormatError(f"{file_path} does not have expected format.", file_path)
    return match.group(1)


def parse_document(file_path: Path, component: str, subcomponent: str) -> DocumentRecord:
    """Read a markdown file and build its :class:`DocumentRecord`."""
    file_path = Path(file_path)
    doc_path = doc_path_for(file_path)

    try:
        contents = read_text_exact(file_path)
    except UnicodeDecodeError as exc:
        raise FormatError(f"The file at {file_path} is not valid UTF-8.", file_path) from exc
    match = FRONT_MATTER_RE.fullmatch(contents)
    if match is None:
        raise FormatError(
            f"The file at {file_path} does not have expected format.", file_path
        )

    LOGGER.debug("Parsed %s as %s", file_path, doc_path)
    return DocumentRecord(
        component=component,
        subcomponent=subcomponent,
        path=doc_path,
        title=strip_wrapping_quotes(match.group(1)),
        content=match.group(2),
    )
