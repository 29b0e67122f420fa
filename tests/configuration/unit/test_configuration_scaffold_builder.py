"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from json_library_analyzer.configuration import default_settings
from json_library_analyzer.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from json_library_analyzer.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Analyzer configuration" in scaffold
    assert "analysis:" in scaffold
    assert "relationship_threshold:" in scaffold
    assert "schema_retention:" in scaffold
    assert "optimization:" in scaffold
    assert "normalize_array_min_items:" in scaffold
    assert "logging:" in scaffold


def test_written_scaffold_loads_as_default_configuration(tmp_path: Path) -> None:
    output_path = tmp_path / "analyzer.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.analysis == default_settings().analysis
    assert configuration.optimization == default_settings().optimization
    assert configuration.logging == default_settings().logging


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "analyzer.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
