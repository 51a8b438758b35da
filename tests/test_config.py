"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docindex.config import SECTION_NAMES, TUTORIAL_NAMES, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.docs_root == Path("../docs")
        assert config.output_path == Path("data/search-index.json")
        assert config.section_names is SECTION_NAMES
        assert config.tutorial_names is TUTORIAL_NAMES

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(
            docs_root=Path("/site/docs"),
            output_path=Path("/out/index.json"),
            section_names={"a": "A"},
            tutorial_names={"b.md": "B"},
        )

        assert config.docs_root == Path("/site/docs")
        assert config.output_path == Path("/out/index.json")
        assert config.section_names == {"a": "A"}
        assert config.tutorial_names == {"b.md": "B"}

    def test_string_paths_are_coerced(self) -> None:
        """Should accept plain strings for paths."""
        config = AppConfig(docs_root="docs", output_path="out.json")  # type: ignore[arg-type]

        assert config.docs_root == Path("docs")
        assert config.output_path == Path("out.json")

    def test_resolve_output_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(output_path=Path("/absolute/index.json"))

        assert config.resolve_output_path(Path("/base")) == Path("/absolute/index.json")

    def test_resolve_output_path_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig()

        assert config.resolve_output_path(base_dir=None) == Path("data/search-index.json")

    def test_resolve_output_path_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig()

        resolved = config.resolve_output_path(base_dir=Path("/project/website"))

        assert resolved == Path("/project/website/data/search-index.json")

    def test_resolve_docs_root_with_base(self) -> None:
        """Should resolve the default docs root relative to base_dir."""
        config = AppConfig()

        resolved = config.resolve_docs_root(base_dir=Path("/project/website"))

        assert resolved == Path("/project/website/../docs")


class TestLookupTables:
    """Test the static label lookup tables."""

    def test_section_labels(self) -> None:
        assert SECTION_NAMES["getting-started"] == "Getting Started"
        assert SECTION_NAMES["smart-contracts"] == "Smart Contracts"
        assert len(SECTION_NAMES) == 6

    def test_tutorial_labels(self) -> None:
        assert TUTORIAL_NAMES["visualize-node-metrics.md"] == "Node Metrics"
        assert TUTORIAL_NAMES["build-a-dapp"] == "Build a dApp"
        assert len(TUTORIAL_NAMES) == 6

    def test_tables_are_read_only(self) -> None:
        """Lookup tables cannot be modified at runtime."""
        with pytest.raises(TypeError):
            SECTION_NAMES["new"] = "New"  # type: ignore[index]
        with pytest.raises(TypeError):
            TUTORIAL_NAMES["new"] = "New"  # type: ignore[index]
