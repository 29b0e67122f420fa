"""Boundary tests for schema inference internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_inference_core_does_not_import_stores_or_engine() -> None:
    inference_dir = _project_root() / "src" / "json_library_analyzer" / "schema_inference"
    core_modules = (
        inference_dir / "type_inferencer.py",
        inference_dir / "schema_fingerprint.py",
        inference_dir / "schema_models.py",
    )
    forbidden_import_fragments = (
        "json_library_analyzer.schema_store",
        "json_library_analyzer.analysis_engine",
        "json_library_analyzer.document_library",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
