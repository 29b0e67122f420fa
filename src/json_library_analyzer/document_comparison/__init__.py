"""Document comparison exports."""

from .comparison_models import Comparison
from .document_comparator import compare_document_contents, top_level_fields

__all__ = ["Comparison", "compare_document_contents", "top_level_fields"]
