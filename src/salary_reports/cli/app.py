from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from ..composition import build_renderer, build_service
from ..config.settings import REPORT_FORMATS, AppSettings, get_settings
from ..core.errors import ConfigurationError, ReportingError
from ..core.logging import configure_logging
from ..reports.output import write_report
from ..sources import JsonFileSalarySource

app = typer.Typer(help="Salary report generator")


@app.command("generate")
def command_generate(
    report_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="報表格式（text、markdown、pdf），預設讀取 REPORT_FORMAT"
    ),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="JSON 薪資資料檔；未指定時使用示範資料"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="輸出檔案路徑；未指定時文字報表輸出至標準輸出"
    ),
) -> None:
    """產出薪資報表。"""

    settings = _load_settings()
    configure_logging(settings.log_level_value)

    source = JsonFileSalarySource(input_path) if input_path else None
    try:
        service = build_service(settings, source=source, report_format=report_format)
        report = service.generate_report()
        if output_path is None:
            if not report.is_text:
                raise ConfigurationError(f"{report.format} 報表為二進位格式，請指定 --output")
            typer.echo(report.text, nl=False)
            return
        target = write_report(report, output_path)
    except (ReportingError, OSError) as error:
        _exit_with_error(error)

    typer.echo(f"Report: {target}")


@app.command("formats")
def command_formats() -> None:
    """列出可用的報表格式。"""

    settings = _load_settings()
    for name in REPORT_FORMATS:
        renderer = build_renderer(name, settings)
        typer.echo(f"{name}\t{renderer.media_type}")


def _load_settings() -> AppSettings:
    try:
        return get_settings()
    except ValidationError as error:
        _exit_with_error(error)


def _exit_with_error(error: Exception) -> NoReturn:
    """輸出錯誤訊息並以代碼 1 結束程式。"""

    typer.echo(f"[ERROR] {error}", err=True)
    raise typer.Exit(code=1)
