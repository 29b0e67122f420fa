"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from json_library_analyzer.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["analyze"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--library" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["analyze", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_library_file_returns_cli_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["analyze", "--library", str(tmp_path / "missing.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Library file not found" in captured.err
    assert "Traceback" not in captured.err


def test_non_utf8_library_file_returns_cli_error(tmp_path: Path, capsys) -> None:
    library_path = tmp_path / "library.json"
    library_path.write_bytes(b"\xff\xfe\x00garbage")

    exit_code = main(["analyze", "--library", str(library_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Library file is not valid JSON" in captured.err
    assert "Traceback" not in captured.err
