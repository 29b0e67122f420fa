"""In-memory document library with explicit change notifications."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, datetime

from .library_models import (
    DocumentKind,
    DocumentStatus,
    JSONDocument,
    LibraryEvent,
    LibraryEventKind,
)

LibraryListener = Callable[[LibraryEvent], None]


class DocumentLibrary:
    """Owns document records and notifies listeners synchronously, in subscription order."""

    def __init__(self) -> None:
        self._documents: dict[str, JSONDocument] = {}
        self._selected_id: str | None = None
        self._listeners: list[LibraryListener] = []

    def subscribe(self, listener: LibraryListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # pylint: disable=too-many-arguments
    def add_document(
        self,
        *,
        name: str,
        kind: DocumentKind,
        content: str,
        description: str | None = None,
        related_ids: Iterable[str] = (),
        tags: Iterable[str] = (),
        document_id: str | None = None,
    ) -> str:
        """Add a new document, select it and return its identifier."""
        now = datetime.now(UTC)
        resolved_id = document_id or f"json_{uuid.uuid4().hex[:12]}"
        self._documents[resolved_id] = JSONDocument(
            document_id=resolved_id,
            name=name,
            kind=kind,
            content=content,
            created_at=now,
            updated_at=now,
            description=description,
            related_ids=tuple(related_ids),
            tags=tuple(tags),
            status=DocumentStatus.NEW,
        )
        self._selected_id = resolved_id
        self._notify(LibraryEventKind.CREATED, resolved_id)
        return resolved_id

    # pylint: enable=too-many-arguments

    def restore_document(self, document: JSONDocument) -> None:
        """Insert a previously persisted record as-is, without notifying listeners."""
        self._documents[document.document_id] = document

    def update_document(
        self,
        document_id: str,
        *,
        name: str | None = None,
        content: str | None = None,
        description: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> JSONDocument | None:
        """Apply changes; a name or content change marks the document as modified."""
        existing = self._documents.get(document_id)
        if existing is None:
            return None

        content_changed = content is not None and content != existing.content
        renamed = name is not None and name != existing.name
        updated = replace(
            existing,
            name=name if name is not None else existing.name,
            content=content if content is not None else existing.content,
            description=description if description is not None else existing.description,
            tags=tuple(tags) if tags is not None else existing.tags,
            status=DocumentStatus.MODIFIED if content_changed or renamed else existing.status,
            updated_at=datetime.now(UTC),
        )
        self._documents[document_id] = updated
        if content_changed:
            self._notify(LibraryEventKind.CONTENT_CHANGED, document_id)
        return updated

    def save_document(self, document_id: str) -> None:
        existing = self._documents.get(document_id)
        if existing is None:
            return
        self._documents[document_id] = replace(
            existing, status=DocumentStatus.SAVED, updated_at=datetime.now(UTC)
        )

    def delete_document(self, document_id: str) -> None:
        """Remove a document and strip it from every other document's relations."""
        if self._documents.pop(document_id, None) is None:
            return
        for other_id, other in list(self._documents.items()):
            if document_id in other.related_ids:
                self._documents[other_id] = replace(
                    other,
                    related_ids=tuple(rid for rid in other.related_ids if rid != document_id),
                )
        if self._selected_id == document_id:
            self._selected_id = None
        self._notify(LibraryEventKind.DELETED, document_id)

    def get_document(self, document_id: str) -> JSONDocument | None:
        return self._documents.get(document_id)

    def get_all_documents(self) -> list[JSONDocument]:
        return list(self._documents.values())

    def add_relation(self, source_id: str, target_id: str) -> None:
        """Relate source to target; self, unknown and duplicate relations are ignored."""
        source = self._documents.get(source_id)
        if source is None or target_id not in self._documents or source_id == target_id:
            return
        if target_id in source.related_ids:
            return
        self._documents[source_id] = replace(
            source, related_ids=(*source.related_ids, target_id)
        )

    def remove_relation(self, source_id: str, target_id: str) -> None:
        source = self._documents.get(source_id)
        if source is None:
            return
        self._documents[source_id] = replace(
            source, related_ids=tuple(rid for rid in source.related_ids if rid != target_id)
        )

    def get_relations(self, document_id: str) -> list[JSONDocument]:
        document = self._documents.get(document_id)
        if document is None:
            return []
        return [
            self._documents[related_id]
            for related_id in document.related_ids
            if related_id in self._documents
        ]

    def search_by_name(self, query: str) -> list[JSONDocument]:
        """Case-insensitive search over names and descriptions."""
        lowered = query.lower()
        return [
            document
            for document in self._documents.values()
            if lowered in document.name.lower()
            or (document.description is not None and lowered in document.description.lower())
        ]

    def get_by_kind(self, kind: DocumentKind) -> list[JSONDocument]:
        return [document for document in self._documents.values() if document.kind == kind]

    def select_document(self, document_id: str) -> None:
        if document_id not in self._documents:
            return
        self._selected_id = document_id
        self._notify(LibraryEventKind.SELECTED, document_id)

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    def clear(self) -> None:
        self._documents.clear()
        self._selected_id = None

    def __len__(self) -> int:
        return len(self._documents)

    def _notify(self, kind: LibraryEventKind, document_id: str) -> None:
        event = LibraryEvent(kind=kind, document_id=document_id)
        for listener in list(self._listeners):
            listener(event)
