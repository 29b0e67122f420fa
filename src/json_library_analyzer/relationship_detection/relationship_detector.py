"""Pairwise schema-match detection over stored schemas."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from json_library_analyzer.schema_inference.schema_models import Schema
from json_library_analyzer.schema_store.schema_repository import SchemaStore

from .relationship_models import Relationship, RelationshipType
from .schema_similarity import common_top_level_paths, compare_schema_nodes

_LOGGER = logging.getLogger(__name__)


def detect_relationships(
    source_id: str,
    target_ids: Iterable[str],
    store: SchemaStore,
    threshold: float,
) -> list[Relationship]:
    """Return schema-match relationships whose similarity exceeds the threshold.

    Documents without a stored schema are skipped.
    """
    source_schema = store.latest_for_document(source_id)
    if source_schema is None:
        _LOGGER.debug("No schema on record for %s, skipping relationship detection", source_id)
        return []

    relationships: list[Relationship] = []
    for target_id in target_ids:
        target_schema = store.latest_for_document(target_id)
        if target_schema is None:
            continue
        similarity = compare_schema_nodes(source_schema.root, target_schema.root)
        if similarity > threshold:
            relationships.append(
                Relationship(
                    source_id=source_id,
                    target_id=target_id,
                    type=RelationshipType.SCHEMA_MATCH,
                    confidence=similarity,
                    common_paths=common_top_level_paths(source_schema.root, target_schema.root),
                )
            )
    return relationships


def find_similar_schemas(schema: Schema, store: SchemaStore, threshold: float) -> list[Schema]:
    """Return other stored schemas more similar than the threshold, most similar first."""
    scored = [
        (compare_schema_nodes(schema.root, candidate.root), candidate)
        for candidate in store.all()
        if candidate.schema_id != schema.schema_id
    ]
    matching = [(score, candidate) for score, candidate in scored if score > threshold]
    matching.sort(key=lambda item: item[0], reverse=True)
    return [candidate for _, candidate in matching]
