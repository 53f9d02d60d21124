from __future__ import annotations

import io
import re
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

from chainlog.levels import InvalidLevel, Severity
from chainlog.logger import Logger
from chainlog.settings import set_file_logging, set_log_directory, set_log_level, set_stream
from chainlog.styles import Style

SHORTCUTS = [
    ("SILLY", "silly"),
    ("TRACE", "trace"),
    ("DEBUG", "debug"),
    ("VERBOSE", "verbose"),
    ("INFO", "info"),
    ("HTTP", "http"),
    ("SUCCESS", "success"),
    ("WARN", "warn"),
    ("ERROR", "error"),
    ("FATAL", "fatal"),
]


def _log_lines(log_dir: Path) -> list[str]:
    lines: list[str] = []
    for path in sorted(log_dir.rglob("*.log")):
        lines.extend(path.read_text(encoding="utf-8").splitlines())
    return lines


@pytest.mark.parametrize("name,method", SHORTCUTS[:-1])
def test_levels_below_minimum_are_dropped(name: str, method: str, capsys, log_dir: Path) -> None:
    set_log_level("FATAL")

    getattr(Logger("p"), method)("dropped")

    assert capsys.readouterr().out == ""
    assert not log_dir.exists()


@pytest.mark.parametrize("name,method", SHORTCUTS)
def test_admitted_levels_print_one_block(name: str, method: str, capsys) -> None:
    set_log_level("SILLY")

    getattr(Logger("svc"), method)("first", 2, {"k": "v"})

    out = capsys.readouterr().out
    assert out.count(name.rjust(10)) == 1
    assert "|--- svc" in out
    assert "first 2 {'k': 'v'}" in out


def test_console_block_layout(capsys) -> None:
    Logger("svc").warn("careful")

    out = capsys.readouterr().out
    fg, bg = Style.FG_YELLOW.value, Style.BG_BLACK.value
    assert out.startswith(f"{bg}{fg}\n")
    assert re.search(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z \|       WARN \n\|--- ", out)
    assert "\n|--- test_console_block_layout" in out
    assert f"\n{Style.RESET.value} careful \n\n" in out


def test_block_without_prefix_has_no_prefix_line(capsys) -> None:
    Logger().info("plain")

    out = capsys.readouterr().out
    assert out.count("|---") == 2


def test_only_error_and_fatal_are_written_to_file(log_dir: Path) -> None:
    set_log_level("SILLY")
    log = Logger()
    for _, method in SHORTCUTS:
        getattr(log, method)(method)
    log.log("ERROR", "generic")

    lines = _log_lines(log_dir)
    assert len(lines) == 3
    assert " | ERROR | " in lines[0] and lines[0].endswith("| error")
    assert " | FATAL | " in lines[1] and lines[1].endswith("| fatal")
    assert lines[2].endswith("| generic")


def test_file_path_uses_dated_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "chainlog.logger._now",
        lambda: datetime(2024, 3, 7, 12, 0, tzinfo=timezone.utc),
    )
    set_log_directory(tmp_path / "custom")

    Logger("api").error("boom", 42)

    path = tmp_path / "custom" / "2024" / "2024-03" / "2024-03-07.log"
    content = path.read_text(encoding="utf-8")
    assert content.startswith("2024-03-07T12:00:00.000Z | ERROR | ")
    assert "test_logger.py:" in content
    assert "| test_file_path_uses_dated_directories | api | boom 42\n" in content


def test_file_logging_can_be_disabled(capsys, log_dir: Path) -> None:
    set_file_logging(False)

    Logger().fatal("down")

    assert "down" in capsys.readouterr().out
    assert not log_dir.exists()


def test_sink_failure_does_not_interrupt_caller(tmp_path: Path, capsys, diagnostics: list[str]) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    set_log_directory(blocker)

    result = Logger().error("still printed")

    assert isinstance(result, Logger)
    assert "still printed" in capsys.readouterr().out
    assert any(m.startswith("[sink] could not append") for m in diagnostics)


def test_methods_return_self_for_chaining(capsys) -> None:
    log = Logger()

    assert log.info("a").warn("b").success("c") is log
    assert log.time_start("t") is log
    assert log.time_end("t") is log


def test_generic_log_accepts_names_and_members(capsys) -> None:
    log = Logger()
    log.log("success", "by name")
    log.log(Severity.WARN, "by member")

    out = capsys.readouterr().out
    assert "SUCCESS" in out and "by name" in out
    assert "WARN" in out and "by member" in out


def test_generic_log_rejects_unknown_level(capsys) -> None:
    with pytest.raises(InvalidLevel):
        Logger().log("LOUD", "never")

    assert capsys.readouterr().out == ""


def test_generic_log_still_filters(capsys) -> None:
    set_log_level("ERROR")

    Logger().log("INFO", "quiet")

    assert capsys.readouterr().out == ""


def test_invalid_minimum_keeps_old_filter(capsys) -> None:
    set_log_level("WARN")
    with pytest.raises(InvalidLevel):
        Logger.set_log_level("LOUDEST")

    log = Logger()
    log.info("filtered")
    log.warn("shown")

    out = capsys.readouterr().out
    assert "filtered" not in out
    assert "shown" in out


def test_custom_stream_receives_output(capsys) -> None:
    buf = io.StringIO()
    set_stream(buf)

    Logger().info("to buffer")

    assert "to buffer" in buf.getvalue()
    assert capsys.readouterr().out == ""


def test_class_exposes_colors_and_levels() -> None:
    assert Logger.COLORS.FG_RED.value == "\x1b[31m"
    assert Logger.LEVELS.TIME == 5


def test_concurrent_error_appends_stay_intact(log_dir: Path) -> None:
    set_stream(io.StringIO())
    payload = "x" * 4096
    threads_count, per_thread = 8, 200

    def _worker(n: int) -> None:
        log = Logger(f"worker-{n}")
        for i in range(per_thread):
            log.error(f"w{n}-{i}-{payload}")

    threads = [threading.Thread(target=_worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = _log_lines(log_dir)
    assert len(lines) == threads_count * per_thread

    seen: set[str] = set()
    for line in lines:
        head, _, message = line.rpartition(" | ")
        assert " | ERROR | " in head
        n, i, body = message.split("-", 2)
        assert body == payload
        assert head.endswith(f" | worker-{n[1:]}")
        seen.add(f"{n}-{i}")
    assert len(seen) == threads_count * per_thread
