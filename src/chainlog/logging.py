from __future__ import annotations

import sys
from typing import Any

from loguru import logger

DIAGNOSTIC_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_handler_id: int | None = None


def _normalize_level(level: str) -> str:
    level = (level or "").upper().strip()
    return level if level in {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "WARNING"


def configure_diagnostics(level: str = "WARNING", sink: Any = None) -> int:
    """
    Route chainlog's own warnings to a dedicated loguru handler.

    Only records emitted from the chainlog package pass the filter. Calling it
    again replaces the previous handler.
    """
    global _handler_id

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass

    colorize = sink is None
    _handler_id = logger.add(
        sys.stderr if sink is None else sink,
        format=DIAGNOSTIC_FORMAT,
        level=_normalize_level(level),
        filter="chainlog",
        colorize=colorize,
        backtrace=False,
        diagnose=False,
    )
    return _handler_id


__all__ = ["configure_diagnostics", "logger"]
