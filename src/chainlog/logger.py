from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from typing import Any, Iterable

from chainlog import settings
from chainlog.caller import CallerInfo, resolve_caller
from chainlog.levels import FILE_LEVELS, Severity, parse_level
from chainlog.logging import logger as diagnostics
from chainlog.sink import append_line
from chainlog.styles import (
    LEVEL_STYLES,
    PLAIN_STYLE,
    TIMER_MISSING_STYLE,
    TIMER_OK_STYLE,
    Style,
)
from chainlog.timers import TimerRegistry
from chainlog.trace import TraceLink, render_trace

LEVEL_WIDTH = 10


def _now() -> datetime:
    return datetime.now().astimezone()


def _iso_timestamp(when: datetime) -> str:
    utc = when.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


class Logger:
    """
    Console logger with caller context and optional creation trace.

    Every accepted call prints a colored block with the timestamp, level,
    calling file:line and function, and the prefix if one is set. ERROR and
    FATAL lines are also appended to the daily log file.

    Example::

        log = Logger("api")
        log.info("listening on", 8080)
        db = log.child("db", trace=True)
        db.error("connection refused")
    """

    COLORS = Style
    LEVELS = Severity

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = prefix or None
        self.creation_info: CallerInfo = resolve_caller()
        self.trace_link: TraceLink | None = None
        self._timers = TimerRegistry()

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, created={self.creation_info.location!r})"

    # global configuration shortcuts

    @staticmethod
    def set_log_level(level: Severity | str) -> None:
        settings.set_log_level(level)

    @staticmethod
    def set_log_directory(directory: str | os.PathLike[str]) -> None:
        settings.set_log_directory(directory)

    @staticmethod
    def set_file_logging(enable: bool) -> None:
        settings.set_file_logging(enable)

    def child(self, prefix: str | None = None, trace: bool = False) -> Logger:
        """
        Derive a logger whose prefix extends this one with `` -> prefix``.

        With ``trace=True`` the child remembers where this logger and the
        child were created, chained onto this logger's own trace. Tracing is
        per edge: an untraced child of a traced parent carries no trace.
        """
        child_created = resolve_caller()
        if self.prefix and prefix:
            new_prefix: str | None = f"{self.prefix} -> {prefix}"
        else:
            new_prefix = self.prefix or prefix

        new_logger = Logger(new_prefix)
        if trace:
            new_logger.trace_link = TraceLink(
                parent_prefix=self.prefix,
                parent_created=self.creation_info,
                child_created=child_created,
                inherited=self.trace_link,
            )
        return new_logger

    def log(self, level: Severity | str, *messages: Any) -> Logger:
        """Log at a caller-chosen level; unknown names raise InvalidLevel."""
        return self._emit(parse_level(level), messages, PLAIN_STYLE)

    def _emit(
        self,
        level: Severity,
        messages: Iterable[Any],
        style: tuple[Style, Style],
    ) -> Logger:
        config = settings.get_config()
        if level < config.min_level:
            return self

        now = _now()
        timestamp = _iso_timestamp(now)
        caller = resolve_caller()

        fragments = [_stringify(m) for m in messages]
        fragments.extend(render_trace(self.trace_link))

        fg, bg = style
        parts = [
            f"{bg.value}{fg.value}\n{timestamp} |",
            level.name.rjust(LEVEL_WIDTH),
            "\n|---",
            caller.location,
            "\n|---",
            caller.function,
        ]
        if self.prefix:
            parts.append(f"\n|--- {self.prefix}")
        parts.append(f"\n{Style.RESET.value}")
        parts.extend(fragments)
        parts.append("\n")

        stream = config.stream if config.stream is not None else sys.stdout
        try:
            stream.write(" ".join(parts) + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            diagnostics.warning("[console] write failed: {}", e)

        if level in FILE_LEVELS:
            prefix_part = f" | {self.prefix}" if self.prefix else ""
            line = (
                f"{timestamp} | {level.name} | {caller.location} | "
                f"{caller.function}{prefix_part} | {' '.join(fragments)}"
            )
            append_line(line, now)

        return self

    # severity shortcuts

    def silly(self, *messages: Any) -> Logger:
        return self._emit(Severity.SILLY, messages, LEVEL_STYLES[Severity.SILLY])

    def trace(self, *messages: Any) -> Logger:
        return self._emit(Severity.TRACE, messages, LEVEL_STYLES[Severity.TRACE])

    def debug(self, *messages: Any) -> Logger:
        return self._emit(Severity.DEBUG, messages, LEVEL_STYLES[Severity.DEBUG])

    def verbose(self, *messages: Any) -> Logger:
        return self._emit(Severity.VERBOSE, messages, LEVEL_STYLES[Severity.VERBOSE])

    def info(self, *messages: Any) -> Logger:
        return self._emit(Severity.INFO, messages, LEVEL_STYLES[Severity.INFO])

    def http(self, *messages: Any) -> Logger:
        return self._emit(Severity.HTTP, messages, LEVEL_STYLES[Severity.HTTP])

    def success(self, *messages: Any) -> Logger:
        return self._emit(Severity.SUCCESS, messages, LEVEL_STYLES[Severity.SUCCESS])

    def warn(self, *messages: Any) -> Logger:
        return self._emit(Severity.WARN, messages, LEVEL_STYLES[Severity.WARN])

    def error(self, *messages: Any) -> Logger:
        return self._emit(Severity.ERROR, messages, LEVEL_STYLES[Severity.ERROR])

    def fatal(self, *messages: Any) -> Logger:
        return self._emit(Severity.FATAL, messages, LEVEL_STYLES[Severity.FATAL])

    # timers

    def time_start(self, label: str) -> Logger:
        self._timers.start(label)
        return self

    def time_end(self, label: str) -> Logger:
        elapsed = self._timers.stop(label)
        if elapsed is None:
            self._emit(Severity.TIME, [f"{label}: -1ms"], TIMER_MISSING_STYLE)
        else:
            self._emit(Severity.TIME, [f"{label}: {elapsed}ms"], TIMER_OK_STYLE)
        return self


__all__ = ["LEVEL_WIDTH", "Logger"]
