"""Field-by-field comparison of raw document content."""

from __future__ import annotations

import logging

from json_library_analyzer.json_values import (
    JsonObject,
    JsonValue,
    MalformedJSONError,
    parse_json_text,
)

from .comparison_models import Comparison

_LOGGER = logging.getLogger(__name__)


def compare_document_contents(
    first_document_id: str,
    first_content: str,
    second_document_id: str,
    second_content: str,
) -> Comparison | None:
    """Compare the top-level property names of two documents.

    Returns ``None`` when either content is not valid JSON.
    """
    try:
        first_fields = top_level_fields(parse_json_text(first_content))
        second_fields = top_level_fields(parse_json_text(second_content))
    except MalformedJSONError as exc:
        _LOGGER.warning(
            "Comparison of %s and %s unavailable: %s", first_document_id, second_document_id, exc
        )
        return None

    second_set = set(second_fields)
    common_fields = tuple(field for field in first_fields if field in second_set)
    largest = max(len(first_fields), len(second_fields))
    similarity = len(common_fields) / largest if largest else 0.0
    differences = abs(len(first_fields) - len(second_fields)) + (
        len(first_fields) + len(second_fields) - 2 * len(common_fields)
    )
    return Comparison(
        comparison_id=f"comp_{first_document_id}_{second_document_id}",
        first_document_id=first_document_id,
        second_document_id=second_document_id,
        similarity_score=similarity,
        common_fields=common_fields,
        differences_count=differences,
    )


def top_level_fields(value: JsonValue) -> tuple[str, ...]:
    """Return property names of an object root; other roots have none."""
    if isinstance(value, JsonObject):
        return value.keys()
    return ()
