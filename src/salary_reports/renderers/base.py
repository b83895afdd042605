"""Report renderer contract and the validation rules shared by bundled renderers."""

from __future__ import annotations

import unicodedata
from decimal import Decimal
from typing import List, Protocol, Sequence, runtime_checkable

from ..core.errors import RenderError
from ..core.types import RenderedReport, SalaryRecord

# Control characters plus line/paragraph separators; any of them would let a
# single field start a new report line.
_FORBIDDEN_CATEGORIES = frozenset({"Cc", "Zl", "Zp"})


@runtime_checkable
class ReportRenderer(Protocol):
    """將薪資紀錄轉為報表的能力。

    Implementations must not perform I/O, must accept an empty sequence and
    must return equal reports for equal input. Invalid records raise
    ``RenderError`` before any output is produced.
    """

    format: str
    media_type: str

    def render(self, records: Sequence[SalaryRecord]) -> RenderedReport:
        ...


def _has_control_characters(value: str) -> bool:
    return any(unicodedata.category(char) in _FORBIDDEN_CATEGORIES for char in value)


def validate_records(records: Sequence[SalaryRecord]) -> List[SalaryRecord]:
    """確認每筆紀錄可被輸出，回傳保留原順序的清單。"""

    validated: List[SalaryRecord] = []
    for index, record in enumerate(records, start=1):
        if not isinstance(record, SalaryRecord):
            raise RenderError(f"第 {index} 筆資料不是 SalaryRecord：{type(record).__name__}")
        if not record.employee_id.strip():
            raise RenderError(f"第 {index} 筆紀錄缺少 employee_id")
        if _has_control_characters(record.employee_id):
            raise RenderError(f"第 {index} 筆紀錄的 employee_id 含有控制字元：{record.employee_id!r}")
        if not record.name.strip():
            raise RenderError(f"第 {index} 筆紀錄（employee_id={record.employee_id!r}）缺少姓名")
        if _has_control_characters(record.name):
            raise RenderError(
                f"第 {index} 筆紀錄（employee_id={record.employee_id!r}）姓名含有控制字元"
            )
        if record.salary < 0:
            raise RenderError(
                f"第 {index} 筆紀錄（employee_id={record.employee_id!r}）薪資為負數：{record.salary}"
            )
        validated.append(record)
    return validated


def total_salary(records: Sequence[SalaryRecord]) -> Decimal:
    return sum((record.salary for record in records), Decimal("0"))


def format_amount(amount: Decimal, currency: str) -> str:
    return f"{amount:,.2f} {currency}"
