"""Heuristic detection of refactoring opportunities in schema trees."""

from __future__ import annotations

import math

from json_library_analyzer.configuration.runtime_settings import OptimizationSettings
from json_library_analyzer.schema_inference.schema_models import NodeType, SchemaNode
from json_library_analyzer.schema_inference.schema_paths import ROOT_PATH, child_path, item_path

from .suggestion_models import EstimatedSavings, OptimizationSuggestion, Severity, SuggestionKind

_SIZE_KB_PER_FIELD_VALUE = 0.05
_COMPLEXITY_PER_FIELD = 10
_ITEMS_PER_IMPACT_POINT = 10


def detect_optimizations(
    document_id: str,
    root: SchemaNode,
    settings: OptimizationSettings | None = None,
) -> list[OptimizationSuggestion]:
    """Walk the schema tree and collect suggestions in depth-first order."""
    resolved = settings or OptimizationSettings()
    suggestions: list[OptimizationSuggestion] = []
    _walk(root, ROOT_PATH, document_id, resolved, suggestions)
    return suggestions


def _walk(
    node: SchemaNode,
    path: str,
    document_id: str,
    settings: OptimizationSettings,
    suggestions: list[OptimizationSuggestion],
) -> None:
    suggestion = _normalize_array_candidate(node, path, document_id, settings, len(suggestions))
    if suggestion is not None:
        suggestions.append(suggestion)

    if node.children:
        for key, child in node.children.items():
            _walk(child, child_path(path, key), document_id, settings, suggestions)
    if node.item_type is not None:
        _walk(node.item_type, item_path(path), document_id, settings, suggestions)


def _normalize_array_candidate(
    node: SchemaNode,
    path: str,
    document_id: str,
    settings: OptimizationSettings,
    index: int,
) -> OptimizationSuggestion | None:
    if node.type is not NodeType.ARRAY or node.item_type is None:
        return None
    item_children = node.item_type.children
    if not item_children:
        return None

    # Occurrence counts stand in for the element count.
    estimated_items = max(child.occurrences for child in item_children.values())
    if estimated_items <= settings.normalize_array_min_items:
        return None

    field_count = len(item_children)
    severity = (
        Severity.HIGH if estimated_items > settings.high_severity_items else Severity.MEDIUM
    )
    impact = min(
        (estimated_items - settings.normalize_array_min_items) / _ITEMS_PER_IMPACT_POINT, 100.0
    )
    return OptimizationSuggestion(
        suggestion_id=f"opt_{document_id}_{index}",
        document_id=document_id,
        kind=SuggestionKind.NORMALIZE_ARRAY,
        severity=severity,
        description=(
            f"Array of {estimated_items} items can be normalized "
            "(extract a class structure and use references)"
        ),
        impact=impact,
        estimated_savings=EstimatedSavings(
            size_kb=math.ceil(estimated_items * field_count * _SIZE_KB_PER_FIELD_VALUE),
            complexity=min(field_count * _COMPLEXITY_PER_FIELD, 100),
        ),
        affected_paths=(path,),
    )
