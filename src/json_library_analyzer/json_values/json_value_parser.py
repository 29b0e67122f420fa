"""Conversion of JSON text and decoded Python values into tagged JSON values."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .json_value_model import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


# Schema walks recurse once per container level.
MAX_NESTING_DEPTH = 200


class MalformedJSONError(Exception):
    """Raised when document content is not valid JSON or nests deeper than supported."""


def parse_json_text(text: str) -> JsonValue:
    """Parse JSON text into a tagged value."""
    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except (json.JSONDecodeError, ValueError, TypeError, RecursionError) as exc:
        raise MalformedJSONError(f"Invalid JSON content: {exc}") from exc
    depth = nesting_depth(decoded)
    if depth > MAX_NESTING_DEPTH:
        raise MalformedJSONError(
            f"JSON content nests {depth} levels deep, the limit is {MAX_NESTING_DEPTH}."
        )
    return to_json_value(decoded)


def nesting_depth(value: Any) -> int:
    """Return the number of nested arrays and objects along the deepest path."""
    deepest = 0
    pending: list[tuple[Any, int]] = [(value, 0)]
    while pending:
        current, depth = pending.pop()
        if isinstance(current, Mapping):
            children: Any = current.values()
        elif isinstance(current, list | tuple):
            children = current
        else:
            continue
        deepest = max(deepest, depth + 1)
        pending.extend((child, depth + 1) for child in children)
    return deepest


def to_json_value(value: Any) -> JsonValue:
    """Convert an already decoded Python value into a tagged value."""
    if value is None:
        return JsonNull()
    if isinstance(value, bool):
        return JsonBoolean(value)
    if isinstance(value, int | float):
        return JsonNumber(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, list | tuple):
        return JsonArray(tuple(to_json_value(item) for item in value))
    if isinstance(value, Mapping):
        return JsonObject(tuple((str(key), to_json_value(item)) for key, item in value.items()))
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def render_literal(value: JsonValue) -> str:
    """Render a scalar value as compact JSON text."""
    match value:
        case JsonNull():
            return "null"
        case JsonBoolean(value=flag):
            return "true" if flag else "false"
        case JsonNumber(value=number):
            return json.dumps(number)
        case JsonString(value=text):
            return json.dumps(text, ensure_ascii=False)
        case JsonArray() | JsonObject():
            raise ValueError("Only scalar values can be rendered as literals.")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")
