"""Composition root: the only place concrete renderers and sources are wired together."""

from __future__ import annotations

from typing import Optional

from .config.settings import REPORT_FORMATS, AppSettings
from .core.errors import ConfigurationError
from .renderers import MarkdownSalaryReport, PdfSalaryReport, PlainTextSalaryReport, ReportRenderer
from .services.salary_report_service import SalaryReportService
from .sources import InMemorySalarySource, SalaryDataSource, sample_records


def build_renderer(report_format: str, settings: AppSettings) -> ReportRenderer:
    """依格式名稱建立對應的 renderer。"""

    normalized = report_format.strip().lower()
    if normalized == "text":
        return PlainTextSalaryReport(title=settings.report_title, currency=settings.report_currency)
    if normalized == "markdown":
        return MarkdownSalaryReport(title=settings.report_title, currency=settings.report_currency)
    if normalized == "pdf":
        return PdfSalaryReport(title=settings.report_title, currency=settings.report_currency)
    raise ConfigurationError(
        f"未知的報表格式：{report_format}（可用：{', '.join(REPORT_FORMATS)}）"
    )


def build_service(
    settings: AppSettings,
    source: Optional[SalaryDataSource] = None,
    report_format: Optional[str] = None,
) -> SalaryReportService:
    """組裝 SalaryReportService；未提供來源時使用示範資料。"""

    renderer = build_renderer(report_format or settings.report_format, settings)
    if source is None:
        source = InMemorySalarySource(sample_records())
    return SalaryReportService(renderer=renderer, source=source)
