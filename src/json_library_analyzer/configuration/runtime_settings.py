"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SchemaRetention(str, Enum):
    """How many schema records are kept per document."""

    LATEST = "latest"
    HISTORY = "history"


@dataclass(frozen=True)
class AnalysisSettings:
    """Thresholds and retention for schema analysis."""

    relationship_threshold: float = 0.3
    similar_schema_threshold: float = 0.5
    schema_retention: SchemaRetention = SchemaRetention.LATEST
    history_limit: int = 100


@dataclass(frozen=True)
class OptimizationSettings:
    """Item-count thresholds for the normalize-array heuristic."""

    normalize_array_min_items: int = 100
    high_severity_items: int = 1000


@dataclass(frozen=True)
class LoggingSettings:
    """Diagnostic output configuration."""

    level: str = "WARNING"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    analysis: AnalysisSettings = field(default_factory=AnalysisSettings)
    optimization: OptimizationSettings = field(default_factory=OptimizationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def default_settings() -> Configuration:
    """Return the configuration used when no file is given."""
    return Configuration()
