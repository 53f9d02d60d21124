from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from types import FrameType

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


@dataclass(frozen=True)
class CallerInfo:
    location: str
    function: str


UNKNOWN_CALLER = CallerInfo(location="unknown:-1", function="unknown")


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    return os.path.dirname(path) == _PACKAGE_DIR


def _relative(filename: str) -> str:
    try:
        return os.path.relpath(filename, os.getcwd())
    except ValueError:
        # different drive on Windows
        return filename


def _function_name(frame: FrameType) -> str:
    name = frame.f_code.co_name
    # <module>, <lambda>, <listcomp>...
    if not name or name.startswith("<"):
        return "anonymous"
    return name


def resolve_caller(skip: int = 2) -> CallerInfo:
    """
    Find the nearest frame outside the chainlog package.

    The walk starts ``skip`` frames above this function, which by default
    drops the resolver and the logging internal that called it. Returns
    UNKNOWN_CALLER when the stack runs out or cannot be inspected.
    """
    frame: FrameType | None = None
    try:
        frame = sys._getframe(skip)
        while frame is not None:
            filename = frame.f_code.co_filename
            if filename and not _is_internal(filename):
                return CallerInfo(
                    location=f"{_relative(filename)}:{frame.f_lineno}",
                    function=_function_name(frame),
                )
            frame = frame.f_back
    except Exception:
        return UNKNOWN_CALLER
    finally:
        del frame
    return UNKNOWN_CALLER


__all__ = ["CallerInfo", "UNKNOWN_CALLER", "resolve_caller"]
