import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from salary_reports.cli.app import app
from salary_reports.config.settings import get_settings
from salary_reports.core.logging import HANDLER_NAME

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("REPORT_FORMAT", "REPORT_TITLE", "REPORT_CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    original_level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(original_level)


def test_generate_text_report_to_stdout() -> None:
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("Employee Salaries")
    assert result.output.index("Alice") < result.output.index("Bob") < result.output.index("Carol")


def test_generate_markdown_from_input_file(tmp_path: Path) -> None:
    input_path = tmp_path / "salaries.json"
    input_path.write_text(
        json.dumps([{"employee_id": "42", "name": "Dana", "salary": 1234.5}]),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["generate", "--format", "markdown", "--input", str(input_path)])
    assert result.exit_code == 0, result.output
    assert "| 42 | Dana | 1,234.50 USD |" in result.output


def test_generate_pdf_requires_output() -> None:
    result = runner.invoke(app, ["generate", "--format", "pdf"])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output


def test_generate_pdf_to_file(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "salaries.pdf"
    result = runner.invoke(app, ["generate", "-f", "pdf", "-o", str(output_path)])
    assert result.exit_code == 0, result.output
    assert output_path.read_bytes().startswith(b"%PDF-")
    assert str(output_path) in result.output


def test_generate_uses_environment_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_FORMAT", "markdown")
    monkeypatch.setenv("REPORT_TITLE", "Payroll")
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("# Payroll")


def test_generate_reports_data_source_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "--input", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output


def test_generate_reports_render_error(tmp_path: Path) -> None:
    input_path = tmp_path / "salaries.json"
    input_path.write_text(
        json.dumps([{"employee_id": "1", "name": "Eve", "salary": -10}]),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["generate", "--input", str(input_path)])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output


def test_generate_rejects_unknown_format() -> None:
    result = runner.invoke(app, ["generate", "--format", "docx"])
    assert result.exit_code == 1
    assert "docx" in result.output


def test_invalid_settings_exit_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_CURRENCY", "dollars")
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output


def test_formats_lists_media_types() -> None:
    result = runner.invoke(app, ["formats"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "text\ttext/plain",
        "markdown\ttext/markdown",
        "pdf\tapplication/pdf",
    ]


def test_generate_reports_undecodable_input(tmp_path: Path) -> None:
    input_path = tmp_path / "salaries.json"
    input_path.write_bytes(b'[{"employee_id": "1", "name": "\xff\xfe", "salary": 1}]')
    result = runner.invoke(app, ["generate", "--input", str(input_path)])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_generate_reports_unwritable_output(tmp_path: Path) -> None:
    output_dir = tmp_path / "existing"
    output_dir.mkdir()
    result = runner.invoke(app, ["generate", "--output", str(output_dir)])
    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert not isinstance(result.exception, OSError)
