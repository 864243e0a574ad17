"""Unit tests for ValueStopwatch."""

from __future__ import annotations

import time
from datetime import timedelta

from mp_healthchecks.kernel.time import ValueStopwatch


class TestValueStopwatch:
    def test_start_new_is_running(self) -> None:
        assert ValueStopwatch.start_new().is_running is True

    def test_default_is_not_running_and_zero(self) -> None:
        sw = ValueStopwatch()
        assert sw.is_running is False
        assert sw.elapsed == timedelta(0)

    def test_elapsed_grows_while_running(self) -> None:
        sw = ValueStopwatch.start_new()
        time.sleep(0.01)
        first = sw.elapsed
        time.sleep(0.01)
        assert sw.elapsed > first >= timedelta(milliseconds=10)

    def test_stop_freezes_elapsed(self) -> None:
        sw = ValueStopwatch.start_new()
        time.sleep(0.005)
        stopped = sw.stop()
        assert stopped.is_running is False
        frozen = stopped.elapsed
        time.sleep(0.005)
        assert stopped.elapsed == frozen
        assert frozen >= timedelta(milliseconds=5)

    def test_stop_of_stopped_is_identity(self) -> None:
        stopped = ValueStopwatch.start_new().stop()
        assert stopped.stop() is stopped

    def test_elapsed_ns_is_non_negative(self) -> None:
        assert ValueStopwatch.start_new().elapsed_ns >= 0
