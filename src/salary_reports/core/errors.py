from __future__ import annotations


class ReportingError(Exception):
    """薪資報表流程的基底例外。"""


class ConfigurationError(ReportingError):
    """組裝或設定錯誤，例如缺少 renderer 或未知的報表格式。"""


class RenderError(ReportingError):
    """Renderer 無法將資料轉為合法報表。"""


class DataSourceError(ReportingError):
    """無法取得薪資資料。"""
