from __future__ import annotations

from typing import List, Sequence

from ..core.types import RenderedReport, SalaryRecord
from .base import format_amount, total_salary, validate_records


class PlainTextSalaryReport:
    """以對齊欄位的純文字輸出薪資報表。"""

    format = "text"
    media_type = "text/plain"

    def __init__(self, title: str = "Employee Salaries", currency: str = "USD") -> None:
        self._title = title
        self._currency = currency

    def render(self, records: Sequence[SalaryRecord]) -> RenderedReport:
        rows = validate_records(records)
        id_width = max([len("ID")] + [len(row.employee_id) for row in rows])
        name_width = max([len("Name")] + [len(row.name) for row in rows])

        lines: List[str] = [self._title, "=" * len(self._title)]
        lines.append(f"{'ID':<{id_width}}  {'Name':<{name_width}}  Salary")
        for row in rows:
            lines.append(
                f"{row.employee_id:<{id_width}}  {row.name:<{name_width}}  "
                f"{format_amount(row.salary, self._currency)}"
            )
        if not rows:
            lines.append("(no employees)")
        lines.append("")
        lines.append(
            f"Total ({len(rows)} employees): {format_amount(total_salary(rows), self._currency)}"
        )
        content = "\n".join(lines) + "\n"
        return RenderedReport(format=self.format, media_type=self.media_type, content=content.encode("utf-8"))
