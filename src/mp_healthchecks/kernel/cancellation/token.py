"""Kernel cancellation – cooperative cancellation token."""
from __future__ import annotations

from mp_healthchecks.kernel.errors import OperationCancelledError

__all__ = ["CancellationToken"]


class CancellationToken:
    """Cooperative cancellation signal shared between a caller and its callees.

    The caller keeps a reference and calls :meth:`cancel`; callees poll
    :attr:`is_cancellation_requested` or call
    :meth:`raise_if_cancellation_requested` at their suspension points.

    ``CancellationToken.none()`` returns a token that can never be cancelled,
    which is what a missing token means.
    """

    __slots__ = ("_cancelled", "_can_be_cancelled")

    def __init__(self, *, cancelled: bool = False, can_be_cancelled: bool = True) -> None:
        self._cancelled = cancelled
        self._can_be_cancelled = can_be_cancelled

    @classmethod
    def none(cls) -> "CancellationToken":
        return _NONE

    @property
    def can_be_cancelled(self) -> bool:
        return self._can_be_cancelled

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if not self._can_be_cancelled:
            raise RuntimeError("The empty cancellation token cannot be cancelled")
        self._cancelled = True

    def raise_if_cancellation_requested(self) -> None:
        """Raise :class:`OperationCancelledError` once :meth:`cancel` was called."""
        if self._cancelled:
            raise OperationCancelledError()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"


_NONE = CancellationToken(can_be_cancelled=False)
