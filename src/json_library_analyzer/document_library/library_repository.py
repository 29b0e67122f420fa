"""Versioned JSON file persistence for document records."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from .document_store import DocumentLibrary
from .library_models import DocumentKind, DocumentStatus, JSONDocument

LIBRARY_FORMAT = "json-library"
LIBRARY_FORMAT_VERSION = 1


class LibraryFormatError(Exception):
    """Raised when a library file cannot be read or does not follow the expected layout."""


class LibraryRepository:
    """Loads and saves document records; derived analysis artifacts are never written."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> DocumentLibrary:
        """Read the library file into a fresh in-memory library."""
        if not self._path.exists():
            raise LibraryFormatError(f"Library file not found: {self._path}")
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise LibraryFormatError(f"Library file is not valid JSON: {exc}") from exc

        documents = _validate_envelope(payload)
        library = DocumentLibrary()
        for index, raw_document in enumerate(documents):
            library.restore_document(_decode_document(raw_document, index))
        return library

    def save(self, library: DocumentLibrary) -> Path:
        """Write every document record and return the resolved file path."""
        payload = {
            "format": LIBRARY_FORMAT,
            "version": LIBRARY_FORMAT_VERSION,
            "documents": [_encode_document(document) for document in library.get_all_documents()],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )
        return self._path.resolve()


def _validate_envelope(payload: Any) -> Sequence[Any]:
    if not isinstance(payload, Mapping):
        raise LibraryFormatError("Library file root must be an object.")
    if payload.get("format") != LIBRARY_FORMAT:
        raise LibraryFormatError(f"Library file format must be '{LIBRARY_FORMAT}'.")
    if payload.get("version") != LIBRARY_FORMAT_VERSION:
        raise LibraryFormatError(
            f"Unsupported library file version: {payload.get('version')!r}"
        )
    documents = payload.get("documents", [])
    if not isinstance(documents, list):
        raise LibraryFormatError("Library 'documents' must be a list.")
    return documents


def _encode_document(document: JSONDocument) -> dict[str, Any]:
    return {
        "id": document.document_id,
        "name": document.name,
        "type": document.kind.value,
        "description": document.description,
        "content": document.content,
        "createdAt": document.created_at.isoformat(),
        "updatedAt": document.updated_at.isoformat(),
        "relatedIds": list(document.related_ids),
        "tags": list(document.tags),
        "status": document.status.value,
    }


def _decode_document(raw: Any, index: int) -> JSONDocument:
    label = f"documents[{index}]"
    if not isinstance(raw, Mapping):
        raise LibraryFormatError(f"{label} must be an object.")
    try:
        return JSONDocument(
            document_id=_require_string(raw.get("id"), f"{label}.id"),
            name=_require_string(raw.get("name"), f"{label}.name"),
            kind=DocumentKind(raw.get("type")),
            content=_require_string(raw.get("content"), f"{label}.content", allow_empty=True),
            created_at=_require_timestamp(raw.get("createdAt"), f"{label}.createdAt"),
            updated_at=_require_timestamp(raw.get("updatedAt"), f"{label}.updatedAt"),
            description=_optional_string(raw.get("description"), f"{label}.description"),
            related_ids=_string_tuple(raw.get("relatedIds"), f"{label}.relatedIds"),
            tags=_string_tuple(raw.get("tags"), f"{label}.tags"),
            status=DocumentStatus(raw.get("status", DocumentStatus.SAVED.value)),
        )
    except ValueError as exc:
        raise LibraryFormatError(f"{label} is invalid: {exc}") from exc


def _require_string(value: Any, field_name: str, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise LibraryFormatError(f"{field_name} must be a string.")
    if not allow_empty and not value.strip():
        raise LibraryFormatError(f"{field_name} must not be empty.")
    return value


def _require_timestamp(value: Any, field_name: str) -> datetime:
    return datetime.fromisoformat(_require_string(value, field_name))


def _string_tuple(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise LibraryFormatError(f"{field_name} must be a list of strings.")
    return tuple(value)


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise LibraryFormatError(f"{field_name} must be a string or null.")
    return value
