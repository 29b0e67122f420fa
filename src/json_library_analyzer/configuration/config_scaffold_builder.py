"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "analyzer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Analyzer configuration for json-library-analyzer.
# Every key is optional; the values below are the defaults.

analysis:
  # Minimum schema similarity (exclusive) for a schema-match relationship.
  relationship_threshold: 0.3
  # Minimum schema similarity (exclusive) for the similar-schemas query.
  similar_schema_threshold: 0.5
  # latest: keep one schema per document, history: keep every analysis.
  schema_retention: latest
  # Number of navigation history entries kept.
  history_limit: 100

optimization:
  # Arrays of objects with more estimated items than this are normalization candidates.
  normalize_array_min_items: 100
  # Above this estimated item count a candidate is reported with high severity.
  high_severity_items: 1000

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML analyzer configuration listing every key with its default."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the analyzer configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
