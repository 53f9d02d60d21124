from __future__ import annotations

import time
from typing import Callable


class TimerRegistry:
    """Label -> start time map owned by a single Logger."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started: dict[str, float] = {}

    def start(self, label: str) -> None:
        # restarting an unstopped label overwrites it
        self._started[label] = self._clock()

    def stop(self, label: str) -> int | None:
        """Elapsed whole milliseconds, or None if ``label`` is not running."""
        started = self._started.pop(label, None)
        if started is None:
            return None
        elapsed = (self._clock() - started) * 1000.0
        return max(0, int(round(elapsed)))


__all__ = ["TimerRegistry"]
