"""Cancellation error – the explicit cancellation signal."""

from __future__ import annotations

from typing import Any

from mp_healthchecks.kernel.errors.base import BaseError


class OperationCancelledError(BaseError):
    """Raised when a cancellation token has been signalled.

    Cancellation is not a failure: whoever runs health checks must let this
    error propagate instead of turning it into an unhealthy result.
    """

    default_code = "operation_cancelled"

    def __init__(self, message: str = "The operation was cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["OperationCancelledError"]
