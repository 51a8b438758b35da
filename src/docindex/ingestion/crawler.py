"""Walk the knowledge-base and tutorial trees and collect documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping

from docindex.config import KNOWLEDGE_BASE_DIR, TUTORIALS_DIR
from docindex.errors import ConfigError
from docindex.ingestion.markdown_loader import parse_document
from docindex.models import KNOWLEDGE_BASE, TUTORIALS, DocumentRecord
from docindex.utils.files import is_markdown, iter_children, iter_markdown_files

LOGGER = logging.getLogger(__name__)

# The front-matter pattern does not accept this file.
GLOSSARY_FILE = "glossary.md"


def crawl_sections(root_dir: Path, section_names: Mapping[str, str]) -> List[DocumentRecord]:
    """Parse every markdown file in the section directories under ``root_dir``.

    Every directory must have a label in ``section_names``; plain files at the
    top level are ignored.
    """
    records: List[DocumentRecord] = []
    for section_dir in iter_children(Path(root_dir)):
        if not section_dir.is_dir():
            LOGGER.debug("Skipping non-directory %s", section_dir)
            continue

        label = section_names.get(section_dir.name)
        if label is None:
            raise ConfigError(f"Cannot find section for {section_dir.name}.", section_dir.name)

        for file_path in iter_markdown_files(section_dir):
            if file_path.name == GLOSSARY_FILE:
                LOGGER.warning("Skipping %s: its format is not supported by the parser", file_path)
                continue
            records.append(parse_document(file_path, KNOWLEDGE_BASE, label))

    return records


def crawl_tutorials(root_dir: Path, tutorial_names: Mapping[str, str]) -> List[DocumentRecord]:
    """Parse every tutorial under ``root_dir``.

    A tutorial is either a directory of lesson files or a single markdown
    file. Every entry, file or directory, must have a label in
    ``tutorial_names``.
    """
    records: List[DocumentRecord] = []
    for entry in iter_children(Path(root_dir)):
        label = tutorial_names.get(entry.name)
        if label is None:
            raise ConfigError(f"Cannot find tutorial for {entry.name}.", entry.name)

        if entry.is_dir():
            for file_path in iter_markdown_files(entry):
                records.append(parse_document(file_path, TUTORIALS, label))
        elif is_markdown(entry.name):
            records.append(parse_document(entry, TUTORIALS, label))
        else:
            LOGGER.debug("Skipping non-markdown tutorial file %s", entry)

    return records


def crawl_all(
    docs_root: Path,
    section_names: Mapping[str, str],
    tutorial_names: Mapping[str, str],
) -> List[DocumentRecord]:
    """Crawl the knowledge base, then the tutorials, under ``docs_root``."""
    docs_root = Path(docs_root)
    records = crawl_sections(docs_root / KNOWLEDGE_BASE_DIR, section_names)
    records.extend(crawl_tutorials(docs_root / TUTORIALS_DIR, tutorial_names))
    return records
