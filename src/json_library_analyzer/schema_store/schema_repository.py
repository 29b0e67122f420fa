"""In-memory schema records indexed by identifier and source document."""

from __future__ import annotations

from json_library_analyzer.configuration.runtime_settings import SchemaRetention
from json_library_analyzer.schema_inference.schema_models import Schema


class SchemaStore:
    """Holds schema records for one session.

    With ``SchemaRetention.LATEST`` a document keeps at most one record and re-analysis
    replaces it; with ``SchemaRetention.HISTORY`` every analysis is appended.
    """

    def __init__(self, retention: SchemaRetention = SchemaRetention.LATEST) -> None:
        self._retention = retention
        self._schemas: dict[str, Schema] = {}
        self._ids_by_document: dict[str, list[str]] = {}

    @property
    def retention(self) -> SchemaRetention:
        return self._retention

    def add(self, schema: Schema) -> None:
        document_ids = self._ids_by_document.setdefault(schema.source_document_id, [])
        if self._retention is SchemaRetention.LATEST:
            for previous_id in document_ids:
                self._schemas.pop(previous_id, None)
            document_ids.clear()
        self._schemas[schema.schema_id] = schema
        document_ids.append(schema.schema_id)

    def get(self, schema_id: str) -> Schema | None:
        return self._schemas.get(schema_id)

    def all(self) -> list[Schema]:
        return list(self._schemas.values())

    def for_document(self, document_id: str) -> list[Schema]:
        """Return every record kept for a document, oldest first."""
        schema_ids = self._ids_by_document.get(document_id, [])
        return [self._schemas[schema_id] for schema_id in schema_ids]

    def latest_for_document(self, document_id: str) -> Schema | None:
        schema_ids = self._ids_by_document.get(document_id)
        if not schema_ids:
            return None
        return self._schemas[schema_ids[-1]]

    def has_document(self, document_id: str) -> bool:
        return bool(self._ids_by_document.get(document_id))

    def discard_document(self, document_id: str) -> int:
        """Drop every record of a document and return how many were removed."""
        schema_ids = self._ids_by_document.pop(document_id, [])
        for schema_id in schema_ids:
            self._schemas.pop(schema_id, None)
        return len(schema_ids)

    def clear(self) -> None:
        self._schemas.clear()
        self._ids_by_document.clear()

    def __len__(self) -> int:
        return len(self._schemas)
