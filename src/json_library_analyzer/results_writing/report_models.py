"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

SCHEMAS_SHEET_NAME = "Schemas"
OPTIMIZATIONS_SHEET_NAME = "Optimizations"
RELATIONSHIPS_SHEET_NAME = "Relationships"
COMPARISONS_SHEET_NAME = "Comparisons"
STATISTICS_SHEET_NAME = "Statistics"

SCHEMA_COLUMNS: tuple[str, ...] = (
    "Schema ID",
    "Document ID",
    "Hash",
    "Complexity",
    "Root Type",
    "Structure",
)
OPTIMIZATION_COLUMNS: tuple[str, ...] = (
    "Suggestion ID",
    "Document ID",
    "Type",
    "Severity",
    "Impact",
    "Size Savings (KB)",
    "Complexity Savings (%)",
    "Paths",
    "Description",
)
RELATIONSHIP_COLUMNS: tuple[str, ...] = (
    "Source ID",
    "Target ID",
    "Type",
    "Confidence",
    "Common Paths",
)
COMPARISON_COLUMNS: tuple[str, ...] = (
    "Comparison ID",
    "First Document ID",
    "Second Document ID",
    "Similarity",
    "Common Fields",
    "Differences",
)


@dataclass(frozen=True)
class ReportMetadata:
    """Metadata rendered into the Statistics sheet."""

    generated_at: datetime
    library_path: Path | None
    output_path: Path
