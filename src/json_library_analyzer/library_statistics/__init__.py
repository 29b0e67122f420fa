"""Library statistics exports."""

from .statistics_aggregator import aggregate_library_stats
from .statistics_models import LibraryStats

__all__ = ["LibraryStats", "aggregate_library_stats"]
