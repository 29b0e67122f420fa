"""Relationship detection exports."""

from .relationship_detector import detect_relationships, find_similar_schemas
from .relationship_models import Relationship, RelationshipType
from .schema_similarity import common_top_level_paths, compare_schema_nodes

__all__ = [
    "Relationship",
    "RelationshipType",
    "common_top_level_paths",
    "compare_schema_nodes",
    "detect_relationships",
    "find_similar_schemas",
]
