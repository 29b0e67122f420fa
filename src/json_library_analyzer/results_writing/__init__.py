"""Results writing exports."""

from .analysis_report_writer import write_analysis_workbook
from .report_models import ReportMetadata

__all__ = ["ReportMetadata", "write_analysis_workbook"]
