"""Type inference tests."""

from __future__ import annotations

import json

from json_library_analyzer.json_values import parse_json_text
from json_library_analyzer.schema_inference import NodeType, SchemaNode, infer_schema_node


def _infer(text: str) -> SchemaNode:
    return infer_schema_node(parse_json_text(text))


def test_nested_object_produces_children_per_property() -> None:
    root = _infer('{"a": 1, "b": {"c": 2}}')

    assert root.type is NodeType.OBJECT
    assert root.children is not None
    assert list(root.children) == ["a", "b"]
    assert root.children["a"].type is NodeType.NUMBER
    nested = root.children["b"]
    assert nested.type is NodeType.OBJECT
    assert nested.children is not None
    assert nested.children["c"].type is NodeType.NUMBER
    assert root.item_type is None


def test_empty_object_has_empty_children_mapping() -> None:
    root = _infer("{}")

    assert root.type is NodeType.OBJECT
    assert root.children == {}


def test_scalars_carry_one_rendered_sample() -> None:
    root = _infer('{"s": "hi", "n": 2, "b": false, "z": null}')

    assert root.children is not None
    assert root.children["s"].samples == ('"hi"',)
    assert root.children["n"].samples == ("2",)
    assert root.children["b"].type is NodeType.BOOLEAN
    assert root.children["z"].type is NodeType.NULL
    assert root.children["z"].samples == ("null",)
    assert root.samples == ()


def test_homogeneous_array_sets_item_type_from_first_element() -> None:
    root = _infer("[1, 2, 3]")

    assert root.type is NodeType.ARRAY
    assert root.children is None
    assert root.item_type is not None
    assert root.item_type.type is NodeType.NUMBER
    assert root.item_type.samples == ("1",)


def test_heterogeneous_array_is_mixed_without_item_type() -> None:
    root = _infer('[1, "a", true]')

    assert root.type is NodeType.MIXED
    assert root.item_type is None
    assert root.children is None


def test_booleans_and_numbers_do_not_share_a_kind() -> None:
    assert _infer("[true, 1]").type is NodeType.MIXED


def test_empty_array_is_homogeneous_without_item_type() -> None:
    root = _infer("[]")

    assert root.type is NodeType.ARRAY
    assert root.item_type is None


def test_nested_arrays_are_classified_by_their_own_inferred_type() -> None:
    assert _infer('[[1], [1, "x"]]').type is NodeType.MIXED
    homogeneous = _infer("[[1], [2, 3]]")
    assert homogeneous.type is NodeType.ARRAY
    assert homogeneous.item_type is not None
    assert homogeneous.item_type.type is NodeType.ARRAY


def test_array_of_objects_counts_key_occurrences_across_elements() -> None:
    root = _infer('[{"a": 1}, {"a": 2, "b": "x"}, {"a": 3}, {"a": 4}]')

    assert root.item_type is not None
    children = root.item_type.children
    assert children is not None
    assert list(children) == ["a", "b"]
    assert children["a"].occurrences == 4
    assert children["a"].frequency == 1.0
    assert children["b"].occurrences == 1
    assert children["b"].frequency == 0.25
    assert children["b"].type is NodeType.STRING


def test_large_array_of_objects_reports_element_count_as_occurrences() -> None:
    items = [{"id": index, "name": f"n{index}", "active": True} for index in range(150)]

    root = _infer(json.dumps(items))

    assert root.item_type is not None
    assert root.item_type.children is not None
    assert {child.occurrences for child in root.item_type.children.values()} == {150}


def test_inference_is_deterministic() -> None:
    text = '{"a": [1, 2], "b": {"c": [{"d": null}]}, "e": "x"}'

    assert _infer(text) == _infer(text)


def test_to_dict_renders_camel_case_shape() -> None:
    rendered = _infer('{"a": [1]}').to_dict()

    assert rendered["type"] == "object"
    assert rendered["children"]["a"]["type"] == "array"
    assert rendered["children"]["a"]["itemType"]["type"] == "number"
    assert "itemType" not in rendered
