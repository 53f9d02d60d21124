from __future__ import annotations

from enum import Enum


class InvalidLevel(ValueError):
    """Raised when a severity name is not in the registry."""

    def __init__(self, level: object) -> None:
        super().__init__(f"Invalid log level: {level}")
        self.level = level


class Severity(int, Enum):
    SILLY = 0
    TRACE = 1
    DEBUG = 2
    VERBOSE = 3
    INFO = 4
    TIME = 5
    HTTP = 6
    SUCCESS = 7
    WARN = 8
    ERROR = 9
    FATAL = 10


# severities mirrored to the daily log file
FILE_LEVELS = frozenset({Severity.ERROR, Severity.FATAL})


def parse_level(level: Severity | str) -> Severity:
    if isinstance(level, Severity):
        return level
    if not isinstance(level, str):
        raise InvalidLevel(level)

    key = level.strip().upper()
    try:
        return Severity[key]
    except KeyError:
        raise InvalidLevel(level) from None


def rank(level: Severity | str) -> int:
    return int(parse_level(level))


__all__ = ["FILE_LEVELS", "InvalidLevel", "Severity", "parse_level", "rank"]
