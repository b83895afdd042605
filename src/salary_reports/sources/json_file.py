from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from ..core.errors import DataSourceError
from ..core.types import SalaryRecord

_RECORDS_ADAPTER = TypeAdapter(List[SalaryRecord])


class JsonFileSalarySource:
    """從 JSON 陣列檔案讀取薪資紀錄。

    Expected payload::

        [{"employee_id": "1", "name": "Alice", "salary": 50000}, ...]

    The file is read on every ``fetch_all`` call.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def fetch_all(self) -> Sequence[SalaryRecord]:
        try:
            raw_text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise DataSourceError(f"無法讀取薪資資料檔 {self._path}：{error}") from error

        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as error:
            raise DataSourceError(f"薪資資料檔 {self._path} 不是合法 JSON：{error}") from error

        if not isinstance(payload, list):
            raise DataSourceError(f"薪資資料檔 {self._path} 必須為 JSON 陣列")

        try:
            return _RECORDS_ADAPTER.validate_python(payload)
        except ValidationError as error:
            raise DataSourceError(f"薪資資料檔 {self._path} 含有無法解析的紀錄：{error}") from error
