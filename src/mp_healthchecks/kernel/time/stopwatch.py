"""Kernel time – ValueStopwatch.

A stopwatch that is a single immutable integer: a positive value is the
``perf_counter_ns`` timestamp a running stopwatch was started at, a negative
value is the negated elapsed time of a stopped stopwatch.  Starting, reading
and stopping it never allocates anything beyond the value itself.
"""
from __future__ import annotations

import time
from datetime import timedelta

__all__ = ["ValueStopwatch"]


class ValueStopwatch:
    """High-resolution elapsed-time tracker."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value

    @classmethod
    def start_new(cls) -> "ValueStopwatch":
        """Return a new, running stopwatch."""
        return cls(time.perf_counter_ns())

    @property
    def is_running(self) -> bool:
        return self._value > 0

    @property
    def elapsed_ns(self) -> int:
        if self.is_running:
            return time.perf_counter_ns() - self._value
        return -self._value

    @property
    def elapsed(self) -> timedelta:
        return timedelta(microseconds=self.elapsed_ns / 1_000)

    def stop(self) -> "ValueStopwatch":
        """Return a stopped copy that keeps reporting the time elapsed so far."""
        if not self.is_running:
            return self
        return ValueStopwatch(-self.elapsed_ns)

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return f"ValueStopwatch({state}, elapsed={self.elapsed})"
