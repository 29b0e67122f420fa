"""JSON value parsing tests."""

from __future__ import annotations

import pytest
from json_library_analyzer.json_values import (
    MAX_NESTING_DEPTH,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    MalformedJSONError,
    nesting_depth,
    parse_json_text,
    render_literal,
    to_json_value,
)


def test_parses_every_value_kind_into_tagged_values() -> None:
    value = parse_json_text('{"s": "x", "n": 1.5, "b": true, "z": null, "a": [1], "o": {}}')

    assert isinstance(value, JsonObject)
    assert value.keys() == ("s", "n", "b", "z", "a", "o")
    entries = dict(value.entries)
    assert entries["s"] == JsonString("x")
    assert entries["n"] == JsonNumber(1.5)
    assert entries["b"] == JsonBoolean(True)
    assert entries["z"] == JsonNull()
    assert entries["a"] == JsonArray((JsonNumber(1),))
    assert entries["o"] == JsonObject(())


def test_booleans_are_not_classified_as_numbers() -> None:
    assert to_json_value(True) == JsonBoolean(True)
    assert to_json_value(0) == JsonNumber(0)


@pytest.mark.parametrize("text", ["{not valid json", "", "[1, 2", "NaN", '{"a": Infinity}'])
def test_malformed_text_raises_domain_error(text: str) -> None:
    with pytest.raises(MalformedJSONError):
        parse_json_text(text)


def test_unsupported_python_values_are_rejected() -> None:
    with pytest.raises(TypeError, match="Unsupported JSON value type"):
        to_json_value({1, 2})


def test_render_literal_uses_compact_json_text() -> None:
    assert render_literal(JsonString("héllo")) == '"héllo"'
    assert render_literal(JsonNumber(3)) == "3"
    assert render_literal(JsonBoolean(False)) == "false"
    assert render_literal(JsonNull()) == "null"


def test_render_literal_rejects_containers() -> None:
    with pytest.raises(ValueError):
        render_literal(JsonArray(()))


def _nested_arrays(depth: int) -> str:
    return "[" * depth + "]" * depth


def test_nesting_depth_counts_containers_along_the_deepest_path() -> None:
    assert nesting_depth(1) == 0
    assert nesting_depth([]) == 1
    assert nesting_depth({"a": [1, {"b": []}], "c": {}}) == 4


def test_nesting_at_the_limit_is_accepted() -> None:
    value = parse_json_text(_nested_arrays(MAX_NESTING_DEPTH))

    assert isinstance(value, JsonArray)


@pytest.mark.parametrize("depth", [MAX_NESTING_DEPTH + 1, 700, 100_000])
def test_deeper_nesting_raises_domain_error(depth: int) -> None:
    with pytest.raises(MalformedJSONError):
        parse_json_text(_nested_arrays(depth))
