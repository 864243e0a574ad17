"""Health – probe capability, its result and the shared execution context."""
from __future__ import annotations

import abc
import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping

from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError

if TYPE_CHECKING:
    from mp_healthchecks.health.registration import HealthCheckRegistration
    from mp_healthchecks.kernel.cancellation import CancellationToken

__all__ = ["DelegateHealthCheck", "HealthCheck", "HealthCheckContext", "HealthCheckResult"]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclasses.dataclass(frozen=True)
class HealthCheckResult:
    """Outcome reported by a single probe."""

    status: HealthStatus
    description: str = ""
    exception: BaseException | None = None
    data: Mapping[str, Any] = _EMPTY

    def __post_init__(self) -> None:
        if not isinstance(self.status, HealthStatus):
            raise ArgumentOutOfRangeError(
                "Requires a health status within the bounds of the enumeration",
                argument="status",
                actual=self.status,
            )
        if self.data is not _EMPTY:
            object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def healthy(cls, description: str = "", data: Mapping[str, Any] | None = None) -> "HealthCheckResult":
        return cls(HealthStatus.HEALTHY, description, None, data or _EMPTY)

    @classmethod
    def degraded(
        cls,
        description: str = "",
        exception: BaseException | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> "HealthCheckResult":
        return cls(HealthStatus.DEGRADED, description, exception, data or _EMPTY)

    @classmethod
    def unhealthy(
        cls,
        description: str = "",
        exception: BaseException | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> "HealthCheckResult":
        return cls(HealthStatus.UNHEALTHY, description, exception, data or _EMPTY)


@dataclasses.dataclass
class HealthCheckContext:
    """Context shared by every probe run within one invocation.

    ``registration`` points at the registration currently being checked.
    """

    registration: "HealthCheckRegistration | None" = None


class HealthCheck(abc.ABC):
    """Base class for all probes.

    A probe either returns a :class:`HealthCheckResult`, raises a cancellation
    signal (:class:`~mp_healthchecks.kernel.errors.OperationCancelledError` or
    :class:`asyncio.CancelledError`), or raises any other error, which the
    engine reports as unhealthy.
    """

    @abc.abstractmethod
    async def check_health(
        self,
        context: HealthCheckContext,
        cancellation_token: "CancellationToken",
    ) -> HealthCheckResult: ...


class DelegateHealthCheck(HealthCheck):
    """Probe backed by an async callable, for ad-hoc checks and tests."""

    def __init__(
        self,
        fn: Callable[[HealthCheckContext, "CancellationToken"], Awaitable[HealthCheckResult]],
    ) -> None:
        self._fn = fn

    async def check_health(
        self,
        context: HealthCheckContext,
        cancellation_token: "CancellationToken",
    ) -> HealthCheckResult:
        return await self._fn(context, cancellation_token)
