"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

# Knowledge-base directory name -> section label.
SECTION_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "advanced": "Advanced",
        "getting-started": "Getting Started",
        "integrate": "Integrate",
        "learn-substrate": "Learn Substrate",
        "runtime": "Runtime",
        "smart-contracts": "Smart Contracts",
    }
)

# Tutorial directory or file name -> tutorial label.
TUTORIAL_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "build-a-dapp": "Build a dApp",
        "create-your-first-substrate-chain": "First Chain",
        "start-a-private-network": "Private Network",
        "add-a-pallet-to-your-runtime.md": "Add a Pallet",
        "create-a-pallet.md": "Create a Pallet",
        "visualize-node-metrics.md": "Node Metrics",
    }
)

DEFAULT_DOCS_ROOT = Path("../docs")
DEFAULT_OUTPUT_PATH = Path("data/search-index.json")
KNOWLEDGE_BASE_DIR = "knowledgebase"
TUTORIALS_DIR = "tutorials"


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    docs_root: Path = DEFAULT_DOCS_ROOT
    output_path: Path = DEFAULT_OUTPUT_PATH
    section_names: Mapping[str, str] = field(default_factory=lambda: SECTION_NAMES)
    tutorial_names: Mapping[str, str] = field(default_factory=lambda: TUTORIAL_NAMES)

    def __post_init__(self) -> None:
        self.docs_root = Path(self.docs_root)
        self.output_path = Path(self.output_path)

    def resolve_docs_root(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.docs_root, base_dir)

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_path, base_dir)
