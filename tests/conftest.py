from __future__ import annotations

from pathlib import Path

import pytest

from chainlog.logging import logger
from chainlog.settings import LogConfig, reset_config, set_log_directory

_ENV_KEYS = ("CHAINLOG_LEVEL", "CHAINLOG_DIR", "CHAINLOG_FILE_LOGGING")


@pytest.fixture(autouse=True)
def log_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> LogConfig:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    config = reset_config()
    set_log_directory(tmp_path / "logs")
    yield config
    reset_config()


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def diagnostics() -> list[str]:
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
