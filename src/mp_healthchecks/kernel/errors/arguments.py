"""Argument errors – programming defects detected by guards.

Raised when a caller hands the engine, the builder or the trace emitter
something it can never work with: a missing collaborator, a blank name, a
negative duration, a status outside :class:`HealthStatus`.  These are never
health conditions and are never converted into report entries.
"""

from __future__ import annotations

from typing import Any

from mp_healthchecks.kernel.errors.base import BaseError


class InvalidArgumentError(BaseError, ValueError):
    """An argument is absent or does not satisfy its contract.

    ``argument`` names the offending parameter.
    """

    default_code = "invalid_argument"

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument
        if argument is not None:
            self.detail.setdefault("argument", argument)


class ArgumentOutOfRangeError(InvalidArgumentError):
    """An argument is present but outside the range of accepted values."""

    default_code = "argument_out_of_range"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        actual: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, argument=argument, **kwargs)
        self.actual = actual
        self.detail.setdefault("actual", repr(actual))


__all__ = ["ArgumentOutOfRangeError", "InvalidArgumentError"]
