"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

import click

from json_library_analyzer.analysis_engine import AnalysisSession, SessionError, open_session
from json_library_analyzer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    resolve_log_level,
    write_placeholder_configuration,
)
from json_library_analyzer.document_library import DocumentKind, import_json_files
from json_library_analyzer.results_writing import ReportMetadata, write_analysis_workbook

_LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_library_option = click.option(
    "--library",
    "library_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON library file",
)
_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON analyzer configuration file",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-library-analyzer")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Override the configured diagnostic log level.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Schema inference and relationship analysis for JSON document libraries."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML analyzer configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate an analyzer configuration listing every setting with its default."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="import")
@_library_option
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in DocumentKind]),
    default=DocumentKind.INSTANCE.value,
    show_default=True,
    help="Document kind assigned to every imported file",
)
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=str))
@click.pass_context
def import_files(ctx: click.Context, library_path: str, kind: str, files: tuple[str, ...]) -> None:
    """Add JSON files to a library file, creating it when missing."""
    session = _open(ctx, library_path, None, create_missing=True)
    try:
        document_ids = import_json_files(session.library, files, DocumentKind(kind))
        session.repository.save(session.library)
    except (OSError, UnicodeDecodeError) as exc:
        raise CliError(str(exc)) from exc
    for document_id in document_ids:
        click.echo(document_id)


@cli.command(name="analyze")
@_library_option
@_config_option
@click.pass_context
def analyze(ctx: click.Context, library_path: str, config_path: str | None) -> None:
    """Analyze every document and print library statistics and suggestions."""
    session = _open(ctx, library_path, config_path)
    engine = session.engine
    detected = engine.sync_analyses()

    for key, value in engine.get_library_stats().to_dict().items():
        click.echo(f"{key}: {value}")
    click.echo(f"schemaMatches: {sum(len(items) for items in detected.values())}")
    for suggestion in engine.get_all_optimizations():
        click.echo(
            f"[{suggestion.severity.value}] {suggestion.document_id} "
            f"{', '.join(suggestion.affected_paths)}: {suggestion.description}"
        )


@cli.command(name="relationships")
@_library_option
@_config_option
@click.argument("document_id")
@click.pass_context
def relationships(
    ctx: click.Context, library_path: str, config_path: str | None, document_id: str
) -> None:
    """Print schema-match relationships from one document to every other document."""
    session = _open(ctx, library_path, config_path)
    engine = session.engine
    engine.sync_analyses()
    other_ids = [
        document.document_id
        for document in session.library.get_all_documents()
        if document.document_id != document_id
    ]
    for relationship in engine.detect_relationships(document_id, other_ids):
        click.echo(
            f"{relationship.target_id}\t{relationship.type.value}\t"
            f"{relationship.confidence:.2f}\t{','.join(relationship.common_paths)}"
        )


@cli.command(name="similar")
@_library_option
@_config_option
@click.argument("document_id")
@click.pass_context
def similar(
    ctx: click.Context, library_path: str, config_path: str | None, document_id: str
) -> None:
    """Print documents whose schema is similar to the given document's schema."""
    session = _open(ctx, library_path, config_path)
    engine = session.engine
    engine.sync_analyses()
    schema = engine.get_latest_schema(document_id)
    if schema is None:
        raise CliError(f"No schema available for document: {document_id}")
    for candidate in engine.find_similar_schemas(schema.schema_id):
        score = engine.compare_schemas(schema.schema_id, candidate.schema_id)
        click.echo(f"{candidate.source_document_id}\t{score:.2f}")


@cli.command(name="compare")
@_library_option
@click.argument("first_document_id")
@click.argument("second_document_id")
@click.pass_context
def compare(
    ctx: click.Context, library_path: str, first_document_id: str, second_document_id: str
) -> None:
    """Compare the top-level fields of two documents."""
    session = _open(ctx, library_path, None)
    comparison = session.engine.create_comparison(first_document_id, second_document_id)
    if comparison is None:
        raise CliError("Comparison unavailable: unknown document or invalid JSON content.")
    click.echo(f"similarity: {comparison.similarity_score:.2f}")
    click.echo(f"common_fields: {', '.join(comparison.common_fields)}")
    click.echo(f"differences: {comparison.differences_count}")


@cli.command(name="report")
@_library_option
@_config_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the analysis workbook to write",
)
@click.pass_context
def report(
    ctx: click.Context, library_path: str, config_path: str | None, output_path: str
) -> None:
    """Write schemas, suggestions, relationships and statistics to a workbook."""
    session = _open(ctx, library_path, config_path)
    engine = session.engine
    detected = engine.sync_analyses()
    document_ids = [document.document_id for document in session.library.get_all_documents()]
    for index, first_id in enumerate(document_ids):
        for second_id in document_ids[index + 1 :]:
            engine.create_comparison(first_id, second_id)

    try:
        resolved_output = write_analysis_workbook(
            output_path,
            schemas=engine.get_all_schemas(),
            suggestions=engine.get_all_optimizations(),
            relationships=detected,
            comparisons=engine.get_comparisons(),
            stats=engine.get_library_stats(),
            metadata=ReportMetadata(
                generated_at=datetime.now(UTC),
                library_path=session.repository.path.resolve(),
                output_path=Path(output_path).resolve(),
            ),
        )
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _open(
    ctx: click.Context,
    library_path: str,
    config_path: str | None,
    *,
    create_missing: bool = False,
) -> AnalysisSession:
    try:
        session = open_session(library_path, config_path, create_missing=create_missing)
    except SessionError as exc:
        raise CliError(str(exc)) from exc
    override = (ctx.obj or {}).get("log_level")
    _configure_logging(override or session.configuration.logging.level)
    return session


def _configure_logging(level_name: str) -> None:
    root_logger = logging.getLogger("json_library_analyzer")
    root_logger.setLevel(resolve_log_level(level_name))
    if not any(isinstance(handler, _StderrHandler) for handler in root_logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root_logger.addHandler(handler)


class _StderrHandler(logging.Handler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            sys.stderr.write(self.format(record) + "\n")
        except (OSError, ValueError):
            self.handleError(record)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
