from __future__ import annotations

import logging

from ..core.errors import ConfigurationError
from ..core.types import RenderedReport
from ..renderers.base import ReportRenderer
from ..sources.base import SalaryDataSource

logger = logging.getLogger(__name__)


class SalaryReportService:
    """取得薪資資料並交由注入的 renderer 產出報表。

    Both collaborators are supplied once through the constructor and are
    never replaced afterwards. Errors raised by either of them propagate to
    the caller unchanged.
    """

    def __init__(self, renderer: ReportRenderer, source: SalaryDataSource) -> None:
        if renderer is None:
            raise ConfigurationError("SalaryReportService 需要一個 ReportRenderer")
        if not isinstance(renderer, ReportRenderer):
            raise ConfigurationError(f"{type(renderer).__name__} 未實作 ReportRenderer 介面")
        if source is None:
            raise ConfigurationError("SalaryReportService 需要一個薪資資料來源")
        if not isinstance(source, SalaryDataSource):
            raise ConfigurationError(f"{type(source).__name__} 未實作 fetch_all()")
        self._renderer = renderer
        self._source = source

    @property
    def renderer(self) -> ReportRenderer:
        return self._renderer

    def generate_report(self) -> RenderedReport:
        """產出單次薪資報表。"""

        records = self._source.fetch_all()
        report = self._renderer.render(records)
        if logger.isEnabledFor(logging.INFO):
            logger.info(
                "salary_report_generated",
                extra={
                    "report_format": report.format,
                    "record_count": len(records),
                    "size_bytes": len(report.content),
                },
            )
        return report
