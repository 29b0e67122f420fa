"""Top-level structural similarity between schema nodes."""

from __future__ import annotations

from json_library_analyzer.schema_inference.schema_models import SchemaNode
from json_library_analyzer.schema_inference.schema_paths import ROOT_PATH, child_path

BASE_SIMILARITY = 0.5


def compare_schema_nodes(first: SchemaNode, second: SchemaNode) -> float:
    """Return a symmetric similarity in [0, 1].

    Nodes of different types score 0. Two objects that both have keys score the Jaccard
    ratio of their key sets, two key-less objects score 0, and any other pair of equal
    types scores 0.5. Nested children are not compared.
    """
    if first.type is not second.type:
        return 0.0
    if first.is_object and second.is_object:
        first_keys = set(first.field_names())
        second_keys = set(second.field_names())
        if not first_keys and not second_keys:
            return 0.0
        if first_keys and second_keys:
            return len(first_keys & second_keys) / len(first_keys | second_keys)
    return BASE_SIMILARITY


def common_top_level_paths(first: SchemaNode, second: SchemaNode) -> tuple[str, ...]:
    """Return ``$``-rooted paths of keys present in both object nodes."""
    if not (first.is_object and second.is_object):
        return ()
    second_keys = set(second.field_names())
    return tuple(
        child_path(ROOT_PATH, key) for key in first.field_names() if key in second_keys
    )
