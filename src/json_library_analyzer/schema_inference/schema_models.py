"""Schema inference entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """Structural kind of one schema node."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    MIXED = "mixed"


@dataclass(frozen=True)
class SchemaNode:
    """Structural descriptor of one JSON subtree.

    ``children`` is set only for object nodes and ``item_type`` only for arrays whose
    elements all reduce to the same type.
    """

    type: NodeType
    occurrences: int = 1
    frequency: float = 1.0
    samples: tuple[str, ...] = ()
    children: Mapping[str, SchemaNode] | None = None
    item_type: SchemaNode | None = None

    @property
    def is_object(self) -> bool:
        return self.type is NodeType.OBJECT

    def field_names(self) -> tuple[str, ...]:
        """Return the property names of an object node, empty for anything else."""
        return tuple(self.children) if self.children is not None else ()

    def to_dict(self) -> dict[str, Any]:
        """Render the node in its camelCase exchange shape."""
        rendered: dict[str, Any] = {
            "type": self.type.value,
            "occurrences": self.occurrences,
            "frequency": self.frequency,
            "samples": list(self.samples),
        }
        if self.children is not None:
            rendered["children"] = {key: child.to_dict() for key, child in self.children.items()}
        if self.item_type is not None:
            rendered["itemType"] = self.item_type.to_dict()
        return rendered


@dataclass(frozen=True)
class Schema:
    """One inference result for one document at one point in time."""

    schema_id: str
    source_document_id: str
    root: SchemaNode
    hash: str
    complexity: int
