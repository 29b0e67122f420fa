"""Recursive structural type inference over tagged JSON values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import replace

from json_library_analyzer.json_values import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    render_literal,
)

from .schema_models import NodeType, SchemaNode


def infer_schema_node(value: JsonValue) -> SchemaNode:
    """Infer the schema tree describing one JSON value."""
    match value:
        case JsonObject(entries=entries):
            return SchemaNode(
                type=NodeType.OBJECT,
                children={key: infer_schema_node(item) for key, item in entries},
            )
        case JsonArray(items=items):
            return _infer_array(items)
        case JsonString():
            return _scalar(NodeType.STRING, value)
        case JsonNumber():
            return _scalar(NodeType.NUMBER, value)
        case JsonBoolean():
            return _scalar(NodeType.BOOLEAN, value)
        case JsonNull():
            return _scalar(NodeType.NULL, value)


def _scalar(node_type: NodeType, value: JsonValue) -> SchemaNode:
    return SchemaNode(type=node_type, samples=(render_literal(value),))


def _infer_array(items: Sequence[JsonValue]) -> SchemaNode:
    if not items:
        return SchemaNode(type=NodeType.ARRAY)

    item_nodes = [infer_schema_node(item) for item in items]
    item_kinds = Counter(node.type for node in item_nodes)
    if len(item_kinds) > 1:
        return SchemaNode(type=NodeType.MIXED)

    item_type = item_nodes[0]
    if item_type.is_object:
        item_type = _merge_object_items(item_nodes)
    return SchemaNode(type=NodeType.ARRAY, item_type=item_type)


def _merge_object_items(item_nodes: Sequence[SchemaNode]) -> SchemaNode:
    """Annotate the first element's node with key counts across all elements.

    Keys absent from the first element are appended in first-seen order.
    """
    key_counts: Counter[str] = Counter()
    first_seen: dict[str, SchemaNode] = {}
    for node in item_nodes:
        for key, child in (node.children or {}).items():
            key_counts[key] += 1
            first_seen.setdefault(key, child)

    total = len(item_nodes)
    children = {
        key: replace(child, occurrences=key_counts[key], frequency=key_counts[key] / total)
        for key, child in first_seen.items()
    }
    return replace(item_nodes[0], children=children)
