from chainlog.caller import UNKNOWN_CALLER, CallerInfo, resolve_caller
from chainlog.levels import FILE_LEVELS, InvalidLevel, Severity, parse_level, rank
from chainlog.logger import Logger
from chainlog.logging import configure_diagnostics
from chainlog.settings import (
    LogConfig,
    get_config,
    reset_config,
    set_file_logging,
    set_log_directory,
    set_log_level,
    set_stream,
)
from chainlog.sink import log_file_path
from chainlog.styles import LEVEL_STYLES, Style
from chainlog.timers import TimerRegistry
from chainlog.trace import TraceLink, render_trace

__all__ = [
    "CallerInfo",
    "FILE_LEVELS",
    "InvalidLevel",
    "LEVEL_STYLES",
    "LogConfig",
    "Logger",
    "Severity",
    "Style",
    "TimerRegistry",
    "TraceLink",
    "UNKNOWN_CALLER",
    "configure_diagnostics",
    "get_config",
    "log_file_path",
    "parse_level",
    "rank",
    "render_trace",
    "reset_config",
    "resolve_caller",
    "set_file_logging",
    "set_log_directory",
    "set_log_level",
    "set_stream",
]
