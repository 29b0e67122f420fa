"""Library statistics tests."""

from __future__ import annotations

from datetime import UTC, datetime

from json_library_analyzer.document_library import DocumentKind, JSONDocument
from json_library_analyzer.library_statistics import aggregate_library_stats
from json_library_analyzer.optimization_detection import (
    EstimatedSavings,
    OptimizationSuggestion,
    Severity,
    SuggestionKind,
)
from json_library_analyzer.schema_inference import NodeType, Schema, SchemaNode

_NOW = datetime(2024, 1, 1, tzinfo=UTC)


def _document(
    document_id: str, kind: DocumentKind, related_ids: tuple[str, ...] = ()
) -> JSONDocument:
    return JSONDocument(
        document_id=document_id,
        name=document_id,
        kind=kind,
        content="{}",
        created_at=_NOW,
        updated_at=_NOW,
        related_ids=related_ids,
    )


def _schema(schema_id: str, complexity: int) -> Schema:
    return Schema(
        schema_id=schema_id,
        source_document_id=schema_id,
        root=SchemaNode(type=NodeType.NULL),
        hash="0" * 16,
        complexity=complexity,
    )


def _suggestion(index: int) -> OptimizationSuggestion:
    return OptimizationSuggestion(
        suggestion_id=f"opt_doc_{index}",
        document_id="doc",
        kind=SuggestionKind.NORMALIZE_ARRAY,
        severity=Severity.MEDIUM,
        description="Array of 150 items can be normalized",
        impact=5.0,
        estimated_savings=EstimatedSavings(size_kb=23, complexity=30),
        affected_paths=("$",),
    )


def test_empty_library_has_zero_counters() -> None:
    stats = aggregate_library_stats([], [], [])

    assert stats.to_dict() == {
        "totalDocuments": 0,
        "totalClasses": 0,
        "totalInstances": 0,
        "totalRelations": 0.0,
        "averageComplexity": 0,
        "totalOptimizationOpportunities": 0,
    }


def test_counts_kinds_relations_and_suggestions() -> None:
    documents = [
        _document("a", DocumentKind.CLASS, ("b", "c")),
        _document("b", DocumentKind.INSTANCE, ("a",)),
        _document("c", DocumentKind.INSTANCE),
    ]

    stats = aggregate_library_stats(documents, [], [_suggestion(0), _suggestion(1)])

    assert stats.total_documents == 3
    assert stats.total_classes == 1
    assert stats.total_instances == 2
    assert stats.total_relations == 1.5
    assert stats.total_optimization_opportunities == 2


def _average_of(*complexities: int) -> int:
    schemas = [_schema(f"s{index}", value) for index, value in enumerate(complexities)]
    return aggregate_library_stats([], schemas, []).average_complexity


def test_average_complexity_rounds_half_up() -> None:
    assert _average_of(10, 15) == 13
    assert _average_of(10, 20) == 15
    assert _average_of(10, 13) == 12
    assert _average_of(100) == 100
