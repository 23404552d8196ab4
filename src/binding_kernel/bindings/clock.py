from __future__ import annotations

import time
from datetime import timedelta
from threading import Lock
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def elapsed(self) -> timedelta:
        """Time since the clock started; never decreases."""
        raise NotImplementedError("Clock is a port; use MonotonicClock or a test double.")


class MonotonicClock:
    # Starts on construction; reads are lock-free.
    def __init__(self) -> None:
        self._started_at = time.perf_counter()

    def elapsed(self) -> timedelta:
        return timedelta(seconds=time.perf_counter() - self._started_at)


_process_clock: MonotonicClock | None = None
_process_clock_lock = Lock()


def process_clock() -> MonotonicClock:
    # Write-once: the first caller starts the shared clock.
    global _process_clock
    if _process_clock is None:
        with _process_clock_lock:
            if _process_clock is None:
                _process_clock = MonotonicClock()
    return _process_clock
