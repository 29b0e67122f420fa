"""Analysis engine exports."""

from .engine_facade import JSONAnalysisEngine
from .history_models import HistoryAction, NavigationEntry
from .session_loader import AnalysisSession, SessionError, open_session

__all__ = [
    "AnalysisSession",
    "HistoryAction",
    "JSONAnalysisEngine",
    "NavigationEntry",
    "SessionError",
    "open_session",
]
