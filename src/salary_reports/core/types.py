from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class SalaryRecord(BaseModel):
    """單一員工的薪資資料，建立後不可變更。"""

    model_config = ConfigDict(frozen=True)

    employee_id: str
    name: str
    salary: Decimal


class RenderedReport(BaseModel):
    """Renderer 產出的報表內容。"""

    model_config = ConfigDict(frozen=True)

    format: str
    media_type: str
    content: bytes

    @property
    def is_text(self) -> bool:
        return self.media_type.startswith("text/")

    @property
    def text(self) -> str:
        """以 UTF-8 解碼文字格式的報表內容。"""

        if not self.is_text:
            raise ValueError(f"{self.media_type} 報表不是文字格式")
        return self.content.decode("utf-8")

    def summarize(self) -> str:
        """回傳單行摘要。"""

        return f"{self.format} media_type={self.media_type} bytes={len(self.content)}"
