from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Sequence

from ..core.types import SalaryRecord


class InMemorySalarySource:
    """以固定清單提供薪資紀錄。"""

    def __init__(self, records: Iterable[SalaryRecord]) -> None:
        self._records = tuple(records)

    def fetch_all(self) -> Sequence[SalaryRecord]:
        return list(self._records)


def sample_records() -> List[SalaryRecord]:
    """CLI 未指定輸入檔時使用的示範資料。"""

    return [
        SalaryRecord(employee_id="1", name="Alice", salary=Decimal("50000")),
        SalaryRecord(employee_id="2", name="Bob", salary=Decimal("60000")),
        SalaryRecord(employee_id="3", name="Carol", salary=Decimal("72500.50")),
    ]
