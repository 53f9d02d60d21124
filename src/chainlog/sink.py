from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from chainlog.logging import logger
from chainlog.settings import get_config

_write_lock = threading.Lock()


def log_file_path(directory: str | Path, when: datetime) -> Path:
    """<directory>/<YYYY>/<YYYY>-<MM>/<YYYY>-<MM>-<DD>.log"""
    year = f"{when.year:04d}"
    month = f"{year}-{when.month:02d}"
    return Path(directory) / year / month / f"{month}-{when.day:02d}.log"


def append_line(line: str, when: datetime) -> bool:
    config = get_config()
    if not config.file_logging:
        return False

    path = log_file_path(config.log_directory, when)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with _write_lock:
            with path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
    except OSError as e:
        logger.warning("[sink] could not append to {}: {}", path, e)
        return False
    return True


__all__ = ["append_line", "log_file_path"]
