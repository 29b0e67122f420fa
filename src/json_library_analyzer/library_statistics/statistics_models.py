"""Library statistics entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LibraryStats:
    """Dashboard counters across documents and derived artifacts.

    ``total_relations`` halves the related-id count and may be fractional when relations
    are not symmetric.
    """

    total_documents: int
    total_classes: int
    total_instances: int
    total_relations: float
    average_complexity: int
    total_optimization_opportunities: int

    def to_dict(self) -> dict[str, int | float]:
        return {
            "totalDocuments": self.total_documents,
            "totalClasses": self.total_classes,
            "totalInstances": self.total_instances,
            "totalRelations": self.total_relations,
            "averageComplexity": self.average_complexity,
            "totalOptimizationOpportunities": self.total_optimization_opportunities,
        }
