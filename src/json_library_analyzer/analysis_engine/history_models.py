"""Navigation history entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class HistoryAction(str, Enum):
    """What happened to a document."""

    OPENED = "opened"
    MODIFIED = "modified"
    ANALYZED = "analyzed"


@dataclass(frozen=True)
class NavigationEntry:
    """One history entry."""

    document_id: str
    action: HistoryAction
    timestamp: datetime
