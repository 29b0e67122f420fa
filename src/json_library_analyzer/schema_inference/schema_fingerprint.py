"""Schema hashing and complexity scoring."""

from __future__ import annotations

import hashlib
import json
from typing import Any

from .schema_models import SchemaNode

COMPLEXITY_SCALE = 10
MAX_COMPLEXITY = 100
_HASH_LENGTH = 16


def fingerprint_schema_node(node: SchemaNode) -> str:
    """Return a short, order-sensitive digest of the node's structure.

    Samples and counts are left out so documents with the same shape share a hash.
    """
    description = json.dumps(_structure(node), separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(description.encode("utf-8")).hexdigest()[:_HASH_LENGTH]


def calculate_complexity(node: SchemaNode, scale: int = COMPLEXITY_SCALE) -> int:
    """Return the node's complexity score clamped to [0, 100]."""
    return min(_raw_complexity(node) * scale, MAX_COMPLEXITY)


def _raw_complexity(node: SchemaNode) -> int:
    complexity = 1
    if node.children:
        complexity += sum(_raw_complexity(child) for child in node.children.values())
    if node.item_type is not None:
        complexity += _raw_complexity(node.item_type)
    return complexity


def _structure(node: SchemaNode) -> dict[str, Any]:
    described: dict[str, Any] = {"type": node.type.value}
    if node.children is not None:
        described["children"] = [[key, _structure(child)] for key, child in node.children.items()]
    if node.item_type is not None:
        described["itemType"] = _structure(node.item_type)
    return described
