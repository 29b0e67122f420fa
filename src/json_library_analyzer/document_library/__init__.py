"""Document library exports."""

from .document_store import DocumentLibrary, LibraryListener
from .json_file_import import import_json_files
from .library_models import (
    DocumentKind,
    DocumentStatus,
    JSONDocument,
    LibraryEvent,
    LibraryEventKind,
)
from .library_repository import LibraryFormatError, LibraryRepository

__all__ = [
    "DocumentKind",
    "DocumentLibrary",
    "DocumentStatus",
    "JSONDocument",
    "LibraryEvent",
    "LibraryEventKind",
    "LibraryFormatError",
    "LibraryListener",
    "LibraryRepository",
    "import_json_files",
]
