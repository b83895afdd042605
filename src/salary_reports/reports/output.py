from __future__ import annotations

from pathlib import Path

from ..core.types import RenderedReport


def write_report(report: RenderedReport, path: Path) -> Path:
    """將報表內容寫入指定路徑，必要時建立上層目錄。"""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(report.content)
    return target
