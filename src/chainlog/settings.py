"""
Process-wide configuration for every Logger in the interpreter.

The config is a single mutable object read on each log call. Mutations are
visible immediately; there is no locking, so change it at startup (or guard it
yourself) if several threads log concurrently.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from chainlog.levels import InvalidLevel, Severity, parse_level
from chainlog.logging import logger


def _read_env_file(root: Path) -> dict[str, str]:
    env_path = root / ".env"
    if not env_path.exists():
        return {}

    values: dict[str, str] = {}
    try:
        for raw in env_path.read_text(encoding="utf-8", errors="ignore").splitlines():
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            if k:
                values[k] = v.strip().strip("'\"")
    except OSError as e:
        logger.warning("[settings] failed to read {}: {}", env_path, e)
        return {}
    return values


def _getenv(name: str, file_values: dict[str, str], default: str = "") -> str:
    v = os.getenv(name)
    if v is not None:
        return v
    return file_values.get(name, default)


def _getenv_bool(name: str, file_values: dict[str, str], default: bool) -> bool:
    v = _getenv(name, file_values, "")
    if not v.strip():
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _getenv_level(name: str, file_values: dict[str, str], default: Severity) -> Severity:
    raw = _getenv(name, file_values, "")
    if not raw.strip():
        return default
    try:
        return parse_level(raw)
    except InvalidLevel:
        logger.warning("[settings] {}={!r} is not a log level, using {}", name, raw, default.name)
        return default


@dataclass
class LogConfig:
    min_level: Severity
    file_logging: bool
    log_directory: Path
    # None means "whatever sys.stdout is at write time"
    stream: IO[str] | None = None

    @classmethod
    def load(cls) -> "LogConfig":
        root = Path.cwd()
        file_values = _read_env_file(root)

        directory = _getenv("CHAINLOG_DIR", file_values, "").strip()
        return cls(
            min_level=_getenv_level("CHAINLOG_LEVEL", file_values, Severity.INFO),
            file_logging=_getenv_bool("CHAINLOG_FILE_LOGGING", file_values, True),
            log_directory=Path(directory) if directory else root / ".logs",
        )


_config = LogConfig.load()


def get_config() -> LogConfig:
    return _config


def reset_config() -> LogConfig:
    global _config
    _config = LogConfig.load()
    return _config


def set_log_level(level: Severity | str) -> None:
    # validate before touching the shared config
    _config.min_level = parse_level(level)


def set_log_directory(directory: str | os.PathLike[str]) -> None:
    _config.log_directory = Path(directory)


def set_file_logging(enable: bool) -> None:
    _config.file_logging = bool(enable)


def set_stream(stream: IO[str] | None) -> None:
    _config.stream = stream


__all__ = [
    "LogConfig",
    "get_config",
    "reset_config",
    "set_file_logging",
    "set_log_directory",
    "set_log_level",
    "set_stream",
]
