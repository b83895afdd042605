from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..core.types import SalaryRecord


@runtime_checkable
class SalaryDataSource(Protocol):
    """提供薪資紀錄的外部來源。

    ``fetch_all`` returns the complete sequence or raises ``DataSourceError``;
    it never returns a partial result.
    """

    def fetch_all(self) -> Sequence[SalaryRecord]:
        ...
