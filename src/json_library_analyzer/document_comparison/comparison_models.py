"""Document comparison entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Comparison:
    """Top-level field overlap between two documents."""

    comparison_id: str
    first_document_id: str
    second_document_id: str
    similarity_score: float
    common_fields: tuple[str, ...]
    differences_count: int
