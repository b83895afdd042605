from __future__ import annotations

from typing import List, Sequence

from ..core.types import RenderedReport, SalaryRecord
from .base import format_amount, total_salary, validate_records


def _escape_cell(value: str) -> str:
    return value.replace("\\", "\\\\").replace("|", "\\|")


class MarkdownSalaryReport:
    """以 Markdown 表格輸出薪資報表。"""

    format = "markdown"
    media_type = "text/markdown"

    def __init__(self, title: str = "Employee Salaries", currency: str = "USD") -> None:
        self._title = title
        self._currency = currency

    def render(self, records: Sequence[SalaryRecord]) -> RenderedReport:
        rows = validate_records(records)
        lines: List[str] = [f"# {self._title}", ""]
        if rows:
            lines.append("| ID | Name | Salary |")
            lines.append("| --- | --- | ---: |")
            for row in rows:
                lines.append(
                    f"| {_escape_cell(row.employee_id)} | {_escape_cell(row.name)} "
                    f"| {format_amount(row.salary, self._currency)} |"
                )
        else:
            lines.append("尚無任何員工薪資資料。")
        lines.append("")
        lines.append(
            f"**Total ({len(rows)} employees):** {format_amount(total_salary(rows), self._currency)}"
        )
        content = "\n".join(lines) + "\n"
        return RenderedReport(format=self.format, media_type=self.media_type, content=content.encode("utf-8"))
