"""Clocks that hand out discovery timestamps.

After each saved update the pipeline calls :meth:`pause` so that updates found
in the same run never share a timestamp. :class:`SystemClock` waits in real
time, :class:`SyntheticClock` simply advances its own notion of "now".
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Protocol
import time


class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def pause(self) -> None:
        ...


class SystemClock:
    """Wall clock that sleeps between saves."""

    def __init__(self, *, pause_seconds: float = 1.0, sleep: Callable[[float], None] = time.sleep) -> None:
        self._pause_seconds = pause_seconds
        self._sleep = sleep

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def pause(self) -> None:
        if self._pause_seconds > 0:
            self._sleep(self._pause_seconds)


class SyntheticClock:
    """Clock for tests and batch runs: strictly increasing, never sleeps."""

    def __init__(self, start: Optional[datetime] = None, *, step: timedelta = timedelta(seconds=1)) -> None:
        if step <= timedelta(0):
            raise ValueError("step must be positive")
        self._current = start or datetime.now(timezone.utc)
        self._step = step

    def now(self) -> datetime:
        return self._current

    def pause(self) -> None:
        self._current += self._step


__all__ = ["Clock", "SyntheticClock", "SystemClock"]
