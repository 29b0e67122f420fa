"""Analysis workbook writer service."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from json_library_analyzer.document_comparison.comparison_models import Comparison
from json_library_analyzer.library_statistics.statistics_models import LibraryStats
from json_library_analyzer.optimization_detection.suggestion_models import OptimizationSuggestion
from json_library_analyzer.relationship_detection.relationship_models import Relationship
from json_library_analyzer.schema_inference.schema_models import Schema

from .report_models import (
    COMPARISON_COLUMNS,
    COMPARISONS_SHEET_NAME,
    OPTIMIZATION_COLUMNS,
    OPTIMIZATIONS_SHEET_NAME,
    RELATIONSHIP_COLUMNS,
    RELATIONSHIPS_SHEET_NAME,
    SCHEMA_COLUMNS,
    SCHEMAS_SHEET_NAME,
    STATISTICS_SHEET_NAME,
    ReportMetadata,
)


# pylint: disable=too-many-arguments
def write_analysis_workbook(
    output_path: Path | str,
    *,
    schemas: Sequence[Schema],
    suggestions: Sequence[OptimizationSuggestion],
    relationships: Mapping[str, Sequence[Relationship]],
    comparisons: Sequence[Comparison],
    stats: LibraryStats,
    metadata: ReportMetadata,
) -> Path:
    """Write one sheet per artifact kind plus a Statistics sheet and return the path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = SCHEMAS_SHEET_NAME

    _write_table(sheet, SCHEMA_COLUMNS, (_schema_row(schema) for schema in schemas))
    _write_table(
        workbook.create_sheet(OPTIMIZATIONS_SHEET_NAME),
        OPTIMIZATION_COLUMNS,
        (_suggestion_row(suggestion) for suggestion in suggestions),
    )
    _write_table(
        workbook.create_sheet(RELATIONSHIPS_SHEET_NAME),
        RELATIONSHIP_COLUMNS,
        (
            _relationship_row(relationship)
            for source_relationships in relationships.values()
            for relationship in source_relationships
        ),
    )
    _write_table(
        workbook.create_sheet(COMPARISONS_SHEET_NAME),
        COMPARISON_COLUMNS,
        (_comparison_row(comparison) for comparison in comparisons),
    )
    _write_statistics_sheet(workbook.create_sheet(STATISTICS_SHEET_NAME), stats, metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


# pylint: enable=too-many-arguments


def _write_table(sheet, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    for row_index, row in enumerate(rows, start=2):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)


def _schema_row(schema: Schema) -> tuple[Any, ...]:
    return (
        schema.schema_id,
        schema.source_document_id,
        schema.hash,
        schema.complexity,
        schema.root.type.value,
        json.dumps(schema.root.to_dict(), separators=(",", ":"), ensure_ascii=False),
    )


def _suggestion_row(suggestion: OptimizationSuggestion) -> tuple[Any, ...]:
    return (
        suggestion.suggestion_id,
        suggestion.document_id,
        suggestion.kind.value,
        suggestion.severity.value,
        suggestion.impact,
        suggestion.estimated_savings.size_kb,
        suggestion.estimated_savings.complexity,
        "\n".join(suggestion.affected_paths),
        suggestion.description,
    )


def _relationship_row(relationship: Relationship) -> tuple[Any, ...]:
    return (
        relationship.source_id,
        relationship.target_id,
        relationship.type.value,
        relationship.confidence,
        ", ".join(relationship.common_paths),
    )


def _comparison_row(comparison: Comparison) -> tuple[Any, ...]:
    return (
        comparison.comparison_id,
        comparison.first_document_id,
        comparison.second_document_id,
        comparison.similarity_score,
        ", ".join(comparison.common_fields),
        comparison.differences_count,
    )


def _write_statistics_sheet(sheet, stats: LibraryStats, metadata: ReportMetadata) -> None:
    entries: list[tuple[str, Any]] = [
        ("generated_at", metadata.generated_at.isoformat()),
        ("library_path", str(metadata.library_path) if metadata.library_path else ""),
        ("output_path", str(metadata.output_path)),
    ]
    entries.extend(stats.to_dict().items())
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
    sheet.column_dimensions["A"].width = 32
