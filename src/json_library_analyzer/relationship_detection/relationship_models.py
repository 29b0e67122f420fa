"""Relationship detection entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RelationshipType(str, Enum):
    """Kinds of edges between two documents."""

    REFERENCE = "reference"
    SCHEMA_MATCH = "schema-match"
    COMMON_FIELD = "common-field"


@dataclass(frozen=True)
class Relationship:
    """Directed, computed edge from a source document to a target document."""

    source_id: str
    target_id: str
    type: RelationshipType
    confidence: float
    common_paths: tuple[str, ...] = ()
