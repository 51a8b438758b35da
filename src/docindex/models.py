"""Core docindex data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

KNOWLEDGE_BASE = "Knowledge Base"
TUTORIALS = "Tutorials"


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """One searchable document extracted from a markdown file."""

    component: str
    subcomponent: str
    path: str
    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
