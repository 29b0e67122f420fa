"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    AnalysisSettings,
    Configuration,
    LoggingSettings,
    OptimizationSettings,
    SchemaRetention,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        analysis=_parse_analysis_section(parsed.get("analysis")),
        optimization=_parse_optimization_section(parsed.get("optimization")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_analysis_section(value: Any) -> AnalysisSettings:
    section = _optional_mapping(value, "analysis")
    defaults = AnalysisSettings()
    retention_raw = _require_non_empty_string(
        section.get("schema_retention", defaults.schema_retention.value),
        "analysis.schema_retention",
    ).lower()
    try:
        retention = SchemaRetention(retention_raw)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in SchemaRetention)
        raise ConfigurationError(
            f"analysis.schema_retention must be one of: {allowed}."
        ) from exc
    return AnalysisSettings(
        relationship_threshold=_require_ratio(
            section.get("relationship_threshold", defaults.relationship_threshold),
            "analysis.relationship_threshold",
        ),
        similar_schema_threshold=_require_ratio(
            section.get("similar_schema_threshold", defaults.similar_schema_threshold),
            "analysis.similar_schema_threshold",
        ),
        schema_retention=retention,
        history_limit=_require_positive_int(
            section.get("history_limit", defaults.history_limit), "analysis.history_limit"
        ),
    )


def _parse_optimization_section(value: Any) -> OptimizationSettings:
    section = _optional_mapping(value, "optimization")
    defaults = OptimizationSettings()
    min_items = _require_positive_int(
        section.get("normalize_array_min_items", defaults.normalize_array_min_items),
        "optimization.normalize_array_min_items",
    )
    high_items = _require_positive_int(
        section.get("high_severity_items", defaults.high_severity_items),
        "optimization.high_severity_items",
    )
    if high_items < min_items:
        raise ConfigurationError(
            "optimization.high_severity_items must not be lower than "
            "optimization.normalize_array_min_items."
        )
    return OptimizationSettings(normalize_array_min_items=min_items, high_severity_items=high_items)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(
        section.get("level", LoggingSettings().level), "logging.level"
    ).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def resolve_log_level(level_name: str) -> int:
    """Translate a validated level name into a ``logging`` constant."""
    return logging.getLevelName(level_name.upper())


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_ratio(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigurationError(f"{field_name} must be a number.")
    if not 0 <= value <= 1:
        raise ConfigurationError(f"{field_name} must be between 0 and 1.")
    return float(value)


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
