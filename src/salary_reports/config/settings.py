from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.logging import resolve_level

REPORT_FORMATS = ("text", "markdown", "pdf")


class AppSettings(BaseSettings):
    """應用程式環境設定，僅讀取環境變數。"""

    report_format: str = Field("text", alias="REPORT_FORMAT")
    report_title: str = Field("Employee Salaries", alias="REPORT_TITLE")
    report_currency: str = Field("USD", alias="REPORT_CURRENCY")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("report_format", mode="before")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        normalized = str(value).strip().lower()
        if normalized not in REPORT_FORMATS:
            raise ValueError(f"REPORT_FORMAT 必須為 {', '.join(REPORT_FORMATS)} 其中之一")
        return normalized

    @field_validator("report_currency", mode="before")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        normalized = str(value).strip().upper()
        if len(normalized) != 3 or not normalized.isalpha():
            raise ValueError("REPORT_CURRENCY 必須為三個英文字母的幣別代碼")
        return normalized

    @field_validator("report_title")
    @classmethod
    def _non_blank_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("REPORT_TITLE 不可為空白")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()

    @property
    def log_level_value(self) -> int:
        return resolve_level(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """載入並快取設定。"""

    return AppSettings()
