"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── InvalidArgumentError      (arguments.py, also a ValueError)
    │   └── ArgumentOutOfRangeError
    └── OperationCancelledError   (cancellation.py)
"""

from mp_healthchecks.kernel.errors.arguments import ArgumentOutOfRangeError, InvalidArgumentError
from mp_healthchecks.kernel.errors.base import BaseError
from mp_healthchecks.kernel.errors.cancellation import OperationCancelledError

__all__ = [
    "ArgumentOutOfRangeError",
    "BaseError",
    "InvalidArgumentError",
    "OperationCancelledError",
]
