"""Schema inference exports."""

from .schema_fingerprint import calculate_complexity, fingerprint_schema_node
from .schema_models import NodeType, Schema, SchemaNode
from .schema_paths import ROOT_PATH, child_path, item_path
from .type_inferencer import infer_schema_node

__all__ = [
    "NodeType",
    "ROOT_PATH",
    "Schema",
    "SchemaNode",
    "calculate_complexity",
    "child_path",
    "fingerprint_schema_node",
    "infer_schema_node",
    "item_path",
]
