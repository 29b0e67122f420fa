"""Document library entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DocumentKind(str, Enum):
    """Whether a document is a template or concrete data."""

    CLASS = "class"
    INSTANCE = "instance"


class DocumentStatus(str, Enum):
    """Save state shown next to a document."""

    NEW = "new"
    MODIFIED = "modified"
    SAVED = "saved"


@dataclass(frozen=True)
class JSONDocument:  # pylint: disable=too-many-instance-attributes
    """One JSON text artifact tracked by the library."""

    document_id: str
    name: str
    kind: DocumentKind
    content: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    related_ids: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    status: DocumentStatus = DocumentStatus.NEW


class LibraryEventKind(str, Enum):
    """Library changes delivered to listeners."""

    CREATED = "created"
    CONTENT_CHANGED = "content_changed"
    DELETED = "deleted"
    SELECTED = "selected"


@dataclass(frozen=True)
class LibraryEvent:
    """Notification about one document."""

    kind: LibraryEventKind
    document_id: str
