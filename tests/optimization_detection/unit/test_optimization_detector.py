"""Optimization detection tests."""

from __future__ import annotations

import json

import pytest
from json_library_analyzer.configuration.runtime_settings import OptimizationSettings
from json_library_analyzer.json_values import parse_json_text
from json_library_analyzer.optimization_detection import (
    OptimizationSuggestion,
    Severity,
    SuggestionKind,
    detect_optimizations,
)
from json_library_analyzer.schema_inference import infer_schema_node


def _records(count: int) -> list[dict[str, object]]:
    return [{"id": index, "name": f"item-{index}", "price": index * 1.5} for index in range(count)]


def _detect(
    value: object, settings: OptimizationSettings | None = None
) -> list[OptimizationSuggestion]:
    root = infer_schema_node(parse_json_text(json.dumps(value)))
    return detect_optimizations("doc-1", root, settings)


def test_array_of_150_objects_is_a_medium_normalize_candidate() -> None:
    suggestions = _detect(_records(150))

    assert len(suggestions) == 1
    suggestion = suggestions[0]
    assert suggestion.kind is SuggestionKind.NORMALIZE_ARRAY
    assert suggestion.severity is Severity.MEDIUM
    assert suggestion.document_id == "doc-1"
    assert suggestion.suggestion_id == "opt_doc-1_0"
    assert suggestion.impact == pytest.approx(5.0)
    assert suggestion.estimated_savings.size_kb == 23
    assert suggestion.estimated_savings.complexity == 30
    assert suggestion.affected_paths == ("$",)
    assert "150" in suggestion.description


def test_array_above_high_threshold_is_high_severity_with_capped_impact() -> None:
    suggestions = _detect(_records(1500))

    assert len(suggestions) == 1
    assert suggestions[0].severity is Severity.HIGH
    assert suggestions[0].impact == 100.0


@pytest.mark.parametrize("count", [0, 1, 99, 100])
def test_arrays_up_to_the_minimum_are_not_reported(count: int) -> None:
    assert _detect(_records(count)) == []


def test_scalar_arrays_are_not_candidates() -> None:
    assert _detect(list(range(500))) == []


def test_nested_candidates_carry_dot_and_bracket_paths() -> None:
    document = {
        "orders": _records(120),
        "groups": [{"items": _records(200)}],
        "odd key": _records(101),
    }

    suggestions = _detect(document)

    assert [suggestion.affected_paths for suggestion in suggestions] == [
        ("$.orders",),
        ("$.groups[*].items",),
        ('$["odd key"]',),
    ]
    assert [suggestion.suggestion_id for suggestion in suggestions] == [
        "opt_doc-1_0",
        "opt_doc-1_1",
        "opt_doc-1_2",
    ]


def test_thresholds_come_from_settings() -> None:
    settings = OptimizationSettings(normalize_array_min_items=10, high_severity_items=20)

    medium = _detect(_records(15), settings)
    high = _detect(_records(25), settings)

    assert medium[0].severity is Severity.MEDIUM
    assert medium[0].impact == pytest.approx(0.5)
    assert high[0].severity is Severity.HIGH


def test_complexity_savings_are_capped() -> None:
    wide = [{f"field{column}": column for column in range(15)} for _ in range(150)]

    suggestions = _detect(wide)

    assert suggestions[0].estimated_savings.complexity == 100
