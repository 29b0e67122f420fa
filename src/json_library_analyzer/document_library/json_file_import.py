"""Bulk import of JSON files into a document library."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .document_store import DocumentLibrary
from .library_models import DocumentKind


def import_json_files(
    library: DocumentLibrary, paths: Iterable[Path | str], kind: DocumentKind
) -> list[str]:
    """Add one document per file, named after the file stem, and return the new ids.

    Content is stored verbatim; invalid JSON is kept and surfaces later as an empty
    analysis result.
    """
    document_ids: list[str] = []
    for raw_path in paths:
        path = Path(raw_path)
        content = path.read_text(encoding="utf-8")
        document_ids.append(library.add_document(name=path.stem, kind=kind, content=content))
    return document_ids
