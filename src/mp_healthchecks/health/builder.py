"""Health – fluent registration builder."""
from __future__ import annotations

from typing import Awaitable, Callable, Iterable

from mp_healthchecks.health.check import DelegateHealthCheck, HealthCheck, HealthCheckContext, HealthCheckResult
from mp_healthchecks.health.options import HealthCheckServiceOptions
from mp_healthchecks.health.registration import HealthCheckFactory, HealthCheckRegistration
from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.cancellation import CancellationToken
from mp_healthchecks.kernel.errors import InvalidArgumentError

__all__ = ["HealthChecksBuilder"]


class HealthChecksBuilder:
    """Appends registrations to a set of :class:`HealthCheckServiceOptions`.

    Does not deduplicate: duplicate names are reported when the engine is
    constructed, so registrations can be added from several modules in any
    order.

    Usage::

        builder = HealthChecksBuilder(options)
        builder.add_check("database", DatabaseCheck(pool), tags={"ready"})
        builder.add(HealthCheckRegistration("cache", lambda scope: scope.get("cache_check")))
    """

    def __init__(self, options: HealthCheckServiceOptions) -> None:
        if options is None:
            raise InvalidArgumentError(
                "Requires a set of options to add the health check registrations to", argument="options"
            )
        self._options = options

    @property
    def options(self) -> HealthCheckServiceOptions:
        return self._options

    def add(self, registration: HealthCheckRegistration) -> "HealthChecksBuilder":
        if registration is None:
            raise InvalidArgumentError(
                "Requires a health check registration instance containing a health check to add it to the options",
                argument="registration",
            )
        self._options.add_registration(registration)
        return self

    def add_check(
        self,
        name: str,
        check: HealthCheck | HealthCheckFactory,
        *,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
        tags: Iterable[str] = (),
    ) -> "HealthChecksBuilder":
        """Register a probe instance, or a factory resolving one from the scope."""
        if check is None:
            raise InvalidArgumentError("Requires a health check instance or factory", argument="check")
        if isinstance(check, HealthCheck):
            registration = HealthCheckRegistration.from_instance(
                name, check, failure_status=failure_status, tags=tags
            )
        else:
            registration = HealthCheckRegistration(name, check, failure_status, frozenset(tags))
        return self.add(registration)

    def add_async_check(
        self,
        name: str,
        fn: Callable[[HealthCheckContext, CancellationToken], Awaitable[HealthCheckResult]],
        *,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
        tags: Iterable[str] = (),
    ) -> "HealthChecksBuilder":
        """Register an async callable as a probe."""
        if fn is None:
            raise InvalidArgumentError("Requires a health check function", argument="fn")
        return self.add_check(name, DelegateHealthCheck(fn), failure_status=failure_status, tags=tags)
