"""Optimization detection exports."""

from .optimization_detector import detect_optimizations
from .suggestion_models import EstimatedSavings, OptimizationSuggestion, Severity, SuggestionKind

__all__ = [
    "EstimatedSavings",
    "OptimizationSuggestion",
    "Severity",
    "SuggestionKind",
    "detect_optimizations",
]
