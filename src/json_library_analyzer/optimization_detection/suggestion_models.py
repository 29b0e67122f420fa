"""Optimization suggestion entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SuggestionKind(str, Enum):
    """Refactoring opportunity categories."""

    EXTRACT_SCHEMA = "extract-schema"
    NORMALIZE_ARRAY = "normalize-array"
    DEDUPLICATE = "deduplicate"
    REFACTOR = "refactor"


class Severity(str, Enum):
    """How urgently a suggestion should be surfaced."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class EstimatedSavings:
    """Rough gain expected from applying a suggestion."""

    size_kb: int | None = None
    complexity: int | None = None


@dataclass(frozen=True)
class OptimizationSuggestion:  # pylint: disable=too-many-instance-attributes
    """Heuristic refactoring hint attached to one document."""

    suggestion_id: str
    document_id: str
    kind: SuggestionKind
    severity: Severity
    description: str
    impact: float
    estimated_savings: EstimatedSavings
    affected_paths: tuple[str, ...]
