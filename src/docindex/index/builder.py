"""Build and persist the lunr search index."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

from lunr import lunr

from docindex.errors import DuplicateDocumentError
from docindex.models import DocumentRecord

LOGGER = logging.getLogger(__name__)

REF_FIELD = "path"
SEARCH_FIELDS = ("title", "content")


def ensure_unique_paths(records: Sequence[DocumentRecord]) -> None:
    """Raise if two records would share one index reference."""
    seen: set[str] = set()
    for record in records:
        if record.path in seen:
            raise DuplicateDocumentError(
                f"Document path {record.path} appears more than once.", record.path
            )
        seen.add(record.path)


def build_index(
    records: Sequence[DocumentRecord],
    *,
    ref: str = REF_FIELD,
    fields: Sequence[str] = SEARCH_FIELDS,
) -> Dict[str, Any]:
    """Index ``records`` and return the serialized lunr.js-compatible index."""
    ensure_unique_paths(records)
    LOGGER.debug("Indexing %d documents on fields %s", len(records), ", ".join(fields))
    index = lunr(
        ref=ref,
        fields=list(fields),
        documents=[record.to_dict() for record in records],
    )
    return index.serialize()


def write_index(serialized: Dict[str, Any], output_path: Path) -> Path:
    """Write a serialized index as compact JSON, replacing any previous file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(serialized, ensure_ascii=False, separators=(",", ":")),
        encoding="utf-8",
    )
    return output_path
