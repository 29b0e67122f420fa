"""Read-side aggregation over the library and the derived artifacts."""

from __future__ import annotations

import math
from collections.abc import Sequence

from json_library_analyzer.document_library.library_models import DocumentKind, JSONDocument
from json_library_analyzer.optimization_detection.suggestion_models import OptimizationSuggestion
from json_library_analyzer.schema_inference.schema_models import Schema

from .statistics_models import LibraryStats


def aggregate_library_stats(
    documents: Sequence[JSONDocument],
    schemas: Sequence[Schema],
    suggestions: Sequence[OptimizationSuggestion],
) -> LibraryStats:
    """Compute library counters without touching any store."""
    related_count = sum(len(document.related_ids) for document in documents)
    return LibraryStats(
        total_documents=len(documents),
        total_classes=sum(1 for document in documents if document.kind == DocumentKind.CLASS),
        total_instances=sum(
            1 for document in documents if document.kind == DocumentKind.INSTANCE
        ),
        total_relations=related_count / 2,
        average_complexity=_average_complexity(schemas),
        total_optimization_opportunities=len(suggestions),
    )


def _average_complexity(schemas: Sequence[Schema]) -> int:
    if not schemas:
        return 0
    average = sum(schema.complexity for schema in schemas) / len(schemas)
    # Half-up rounding, not banker's rounding.
    return math.floor(average + 0.5)
