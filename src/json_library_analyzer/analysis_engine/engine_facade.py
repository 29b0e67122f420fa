"""Schema inference and cross-document relationship engine."""

from __future__ import annotations

import itertools
import logging
from collections import deque
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from json_library_analyzer.configuration.runtime_settings import Configuration, default_settings
from json_library_analyzer.document_comparison import Comparison, compare_document_contents
from json_library_analyzer.document_library import DocumentLibrary, LibraryEvent, LibraryEventKind
from json_library_analyzer.json_values import MalformedJSONError, parse_json_text
from json_library_analyzer.library_statistics import LibraryStats, aggregate_library_stats
from json_library_analyzer.optimization_detection import (
    OptimizationSuggestion,
    detect_optimizations,
)
from json_library_analyzer.relationship_detection import (
    Relationship,
    compare_schema_nodes,
    detect_relationships,
    find_similar_schemas,
)
from json_library_analyzer.schema_inference import (
    Schema,
    calculate_complexity,
    fingerprint_schema_node,
    infer_schema_node,
)
from json_library_analyzer.schema_store import SchemaStore

from .history_models import HistoryAction, NavigationEntry

_LOGGER = logging.getLogger(__name__)


class JSONAnalysisEngine:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """Derives schemas, suggestions, relationships and comparisons for library documents.

    Every operation is synchronous and total: malformed content and unknown identifiers
    yield empty results instead of exceptions. Derived artifacts live only as long as the
    engine instance.
    """

    def __init__(
        self,
        library: DocumentLibrary | None = None,
        configuration: Configuration | None = None,
    ) -> None:
        settings = configuration or default_settings()
        self._library = library if library is not None else DocumentLibrary()
        self._analysis_settings = settings.analysis
        self._optimization_settings = settings.optimization
        self._schemas = SchemaStore(settings.analysis.schema_retention)
        self._relationships: dict[str, list[Relationship]] = {}
        self._optimizations: dict[str, list[OptimizationSuggestion]] = {}
        self._comparisons: dict[str, Comparison] = {}
        self._history: deque[NavigationEntry] = deque(maxlen=settings.analysis.history_limit)
        self._schema_sequence = itertools.count(1)

    @property
    def library(self) -> DocumentLibrary:
        return self._library

    def connect(self) -> Callable[[], None]:
        """Subscribe to library events; returns the unsubscribe callable."""
        return self._library.subscribe(self.handle_library_event)

    def handle_library_event(self, event: LibraryEvent) -> None:
        document = self._library.get_document(event.document_id)
        if event.kind == LibraryEventKind.DELETED:
            self.discard_document(event.document_id)
            return
        if document is None:
            return
        if event.kind == LibraryEventKind.CREATED:
            self.analyze_schema(document.document_id, document.content)
        elif event.kind == LibraryEventKind.CONTENT_CHANGED:
            self.add_to_history(document.document_id, HistoryAction.MODIFIED)
            self.analyze_schema(document.document_id, document.content)
        elif event.kind == LibraryEventKind.SELECTED:
            if not self._schemas.has_document(document.document_id):
                self.analyze_schema(document.document_id, document.content)
            self.add_to_history(document.document_id, HistoryAction.OPENED)

    def analyze_schema(self, document_id: str, content: str) -> str:
        """Infer, score and store a schema; return its id or ``""`` for malformed content."""
        try:
            parsed = parse_json_text(content)
        except MalformedJSONError as exc:
            _LOGGER.warning("Schema analysis failed for %s: %s", document_id, exc)
            return ""

        root = infer_schema_node(parsed)
        schema = Schema(
            schema_id=f"schema_{document_id}_{next(self._schema_sequence)}",
            source_document_id=document_id,
            root=root,
            hash=fingerprint_schema_node(root),
            complexity=calculate_complexity(root),
        )
        self._schemas.add(schema)

        suggestions = detect_optimizations(document_id, root, self._optimization_settings)
        if suggestions:
            self._optimizations[document_id] = suggestions
        else:
            self._optimizations.pop(document_id, None)

        _LOGGER.debug(
            "Analyzed %s as %s (hash=%s, complexity=%d, suggestions=%d)",
            document_id,
            schema.schema_id,
            schema.hash,
            schema.complexity,
            len(suggestions),
        )
        self.add_to_history(document_id, HistoryAction.ANALYZED)
        return schema.schema_id

    def get_schema(self, schema_id: str) -> Schema | None:
        return self._schemas.get(schema_id)

    def get_all_schemas(self) -> list[Schema]:
        return self._schemas.all()

    def get_latest_schema(self, document_id: str) -> Schema | None:
        return self._schemas.latest_for_document(document_id)

    def detect_relationships(self, source_id: str, target_ids: Iterable[str]) -> list[Relationship]:
        """Compute schema-match relationships; the result is not cached."""
        return detect_relationships(
            source_id,
            target_ids,
            self._schemas,
            self._analysis_settings.relationship_threshold,
        )

    def get_relationships(self, document_id: str) -> list[Relationship]:
        """Return relationships previously stored with ``cache_relationships``."""
        return list(self._relationships.get(document_id, []))

    def cache_relationships(self, document_id: str, relationships: Iterable[Relationship]) -> None:
        self._relationships[document_id] = list(relationships)

    def suggest_optimizations(self, document_id: str) -> list[OptimizationSuggestion]:
        return list(self._optimizations.get(document_id, []))

    def get_all_optimizations(self) -> list[OptimizationSuggestion]:
        """Return every stored suggestion, highest impact first."""
        suggestions = [item for items in self._optimizations.values() for item in items]
        return sorted(suggestions, key=lambda suggestion: suggestion.impact, reverse=True)

    def compare_schemas(self, first_schema_id: str, second_schema_id: str) -> float:
        first = self._schemas.get(first_schema_id)
        second = self._schemas.get(second_schema_id)
        if first is None or second is None:
            return 0.0
        return compare_schema_nodes(first.root, second.root)

    def find_similar_schemas(self, schema_id: str) -> list[Schema]:
        schema = self._schemas.get(schema_id)
        if schema is None:
            return []
        return find_similar_schemas(
            schema, self._schemas, self._analysis_settings.similar_schema_threshold
        )

    def create_comparison(
        self, first_document_id: str, second_document_id: str
    ) -> Comparison | None:
        """Compare two library documents and remember the result."""
        first = self._library.get_document(first_document_id)
        second = self._library.get_document(second_document_id)
        if first is None or second is None:
            return None
        comparison = compare_document_contents(
            first.document_id, first.content, second.document_id, second.content
        )
        if comparison is not None:
            self._comparisons[comparison.comparison_id] = comparison
        return comparison

    def get_comparisons(self) -> list[Comparison]:
        return list(self._comparisons.values())

    def get_library_stats(self) -> LibraryStats:
        return aggregate_library_stats(
            self._library.get_all_documents(),
            self._schemas.all(),
            self.get_all_optimizations(),
        )

    def sync_analyses(
        self, document_ids: Iterable[str] | None = None
    ) -> dict[str, list[Relationship]]:
        """Analyze documents, then detect relationships between every library document.

        Returns the non-empty relationship lists keyed by source id; nothing is cached.
        """
        all_ids = [document.document_id for document in self._library.get_all_documents()]
        target_ids = list(document_ids) if document_ids is not None else all_ids
        for document_id in target_ids:
            document = self._library.get_document(document_id)
            if document is not None:
                self.analyze_schema(document_id, document.content)

        detected: dict[str, list[Relationship]] = {}
        for source_id in all_ids:
            relationships = self.detect_relationships(
                source_id, [other_id for other_id in all_ids if other_id != source_id]
            )
            if relationships:
                detected[source_id] = relationships
        return detected

    def add_to_history(self, document_id: str, action: HistoryAction) -> None:
        self._history.append(
            NavigationEntry(document_id=document_id, action=action, timestamp=datetime.now(UTC))
        )

    def get_history(self) -> list[NavigationEntry]:
        return list(self._history)

    def discard_document(self, document_id: str) -> None:
        """Drop every derived artifact that belongs to or mentions a document."""
        self._schemas.discard_document(document_id)
        self._optimizations.pop(document_id, None)
        self._relationships.pop(document_id, None)
        for source_id, relationships in list(self._relationships.items()):
            self._relationships[source_id] = [
                relationship
                for relationship in relationships
                if relationship.target_id != document_id
            ]
        self._comparisons = {
            comparison_id: comparison
            for comparison_id, comparison in self._comparisons.items()
            if document_id not in (comparison.first_document_id, comparison.second_document_id)
        }

    def clear(self) -> None:
        """Reset derived state; library documents are left untouched."""
        self._schemas.clear()
        self._relationships.clear()
        self._optimizations.clear()
        self._comparisons.clear()
        self._history.clear()
