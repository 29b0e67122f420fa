"""Opening a library file together with its analysis engine."""

from __future__ import annotations

from dataclasses import dataclass

from json_library_analyzer.configuration import (
    Configuration,
    ConfigurationError,
    default_settings,
    load_configuration,
)
from json_library_analyzer.document_library import (
    DocumentLibrary,
    LibraryFormatError,
    LibraryRepository,
)

from .engine_facade import JSONAnalysisEngine


class SessionError(Exception):
    """Raised when a library session cannot be opened."""


@dataclass(frozen=True)
class AnalysisSession:
    """A loaded library, its repository and an engine with fresh derived state."""

    configuration: Configuration
    repository: LibraryRepository
    engine: JSONAnalysisEngine

    @property
    def library(self) -> DocumentLibrary:
        return self.engine.library


def open_session(
    library_path: str,
    config_path: str | None = None,
    *,
    create_missing: bool = False,
) -> AnalysisSession:
    """Load configuration and library and build an engine with empty derived state."""
    try:
        configuration = load_configuration(config_path) if config_path else default_settings()
        repository = LibraryRepository(library_path)
        if create_missing and not repository.exists():
            library = DocumentLibrary()
        else:
            library = repository.load()
    except (ConfigurationError, LibraryFormatError, OSError) as exc:
        raise SessionError(str(exc)) from exc

    engine = JSONAnalysisEngine(library, configuration)
    return AnalysisSession(configuration=configuration, repository=repository, engine=engine)
