"""JSON value model exports."""

from .json_value_model import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .json_value_parser import (
    MAX_NESTING_DEPTH,
    MalformedJSONError,
    nesting_depth,
    parse_json_text,
    render_literal,
    to_json_value,
)

__all__ = [
    "MAX_NESTING_DEPTH",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "MalformedJSONError",
    "nesting_depth",
    "parse_json_text",
    "render_literal",
    "to_json_value",
]
