"""Document comparison tests."""

from __future__ import annotations

import logging

import pytest
from json_library_analyzer.document_comparison import compare_document_contents


def test_shared_and_differing_top_level_fields() -> None:
    comparison = compare_document_contents("a", '{"x": 1, "y": 2}', "b", '{"x": 3, "z": 4}')

    assert comparison is not None
    assert comparison.comparison_id == "comp_a_b"
    assert comparison.common_fields == ("x",)
    assert comparison.similarity_score == pytest.approx(0.5)
    assert comparison.differences_count == 2


def test_size_difference_adds_to_differences() -> None:
    comparison = compare_document_contents(
        "a", '{"x": 1, "y": 2, "z": 3}', "b", '{"x": 1}'
    )

    assert comparison is not None
    assert comparison.similarity_score == pytest.approx(1 / 3)
    assert comparison.differences_count == 4


def test_two_empty_objects_score_zero() -> None:
    comparison = compare_document_contents("a", "{}", "b", "{}")

    assert comparison is not None
    assert comparison.similarity_score == 0.0
    assert comparison.common_fields == ()
    assert comparison.differences_count == 0


def test_non_object_roots_have_no_fields() -> None:
    comparison = compare_document_contents("a", "[1, 2]", "b", '{"x": 1}')

    assert comparison is not None
    assert comparison.similarity_score == 0.0
    assert comparison.differences_count == 2


def test_nested_values_are_ignored() -> None:
    comparison = compare_document_contents("a", '{"x": {"p": 1}}', "b", '{"x": [1, 2]}')

    assert comparison is not None
    assert comparison.similarity_score == 1.0
    assert comparison.differences_count == 0


def test_malformed_content_yields_no_comparison(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        comparison = compare_document_contents("a", "{not valid json", "b", "{}")

    assert comparison is None
    assert "Comparison of a and b unavailable" in caplog.text
