"""Kernel time – elapsed-time measurement."""
from mp_healthchecks.kernel.time.stopwatch import ValueStopwatch

__all__ = ["ValueStopwatch"]
