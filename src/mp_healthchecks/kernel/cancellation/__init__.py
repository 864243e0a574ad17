"""Kernel cancellation – cooperative cancellation token."""
from mp_healthchecks.kernel.cancellation.token import CancellationToken

__all__ = ["CancellationToken"]
