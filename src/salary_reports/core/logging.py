from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import structlog

HANDLER_NAME = "salary_reports"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """以 structlog 格式化 stdlib 日誌，輸出至 stderr。

    Calling this again replaces the handler installed by the previous call.
    Fields passed through ``extra=`` are rendered as key/value pairs.
    """

    target = stream if stream is not None else sys.stderr
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    handler = logging.StreamHandler(target)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=_is_tty(target)),
            ],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def resolve_level(name: str) -> int:
    """將 LOG_LEVEL 名稱轉為 logging 等級。"""

    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"未知的 LOG_LEVEL：{name}")
    return level


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
