"""Health – the aggregation engine.

``DefaultHealthCheckService`` validates a set of registrations once, at
construction, and then runs a (filtered) subset of them, one after the other,
every time :meth:`~HealthCheckService.check_health` is awaited.

Failure semantics per registration:

* the factory returns ``None``  -> unhealthy entry, invocation continues
* the probe raises any error    -> unhealthy entry carrying the error
* the probe raises cancellation -> propagates, no report is produced
"""
from __future__ import annotations

import abc
from collections import Counter
from typing import Any

from mp_healthchecks.health.check import HealthCheckContext, HealthCheckResult
from mp_healthchecks.health.logger import HealthCheckLogger, NullHealthCheckLogger
from mp_healthchecks.health.options import HealthCheckServiceOptions
from mp_healthchecks.health.registration import HealthCheckRegistration, RegistrationPredicate
from mp_healthchecks.health.report import HealthReport, HealthReportEntry
from mp_healthchecks.health.scope import ServiceScopeFactory
from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.cancellation import CancellationToken
from mp_healthchecks.kernel.errors import InvalidArgumentError, OperationCancelledError
from mp_healthchecks.kernel.time import ValueStopwatch

__all__ = ["DefaultHealthCheckService", "HealthCheckService", "NO_INSTANCE_DESCRIPTION"]

NO_INSTANCE_DESCRIPTION = "No health check instance was returned by the health registration factory, got 'None'"


class HealthCheckService(abc.ABC):
    """Port: run the registered health checks and aggregate their statuses."""

    @abc.abstractmethod
    async def check_health(
        self,
        predicate: RegistrationPredicate | None = None,
        cancellation_token: CancellationToken | None = None,
    ) -> HealthReport: ...


class DefaultHealthCheckService(HealthCheckService):
    """Runs registered probes sequentially within one execution scope.

    Parameters
    ----------
    scope_factory:
        Produces the execution scope every probe of an invocation is
        resolved from.
    options:
        The registrations to run.  Validated here and then frozen.
    logger:
        Trace emitter; a structlog or stdlib logger is wrapped, ``None``
        disables tracing.

    Raises
    ------
    InvalidArgumentError
        When the scope factory, the options or its registrations are absent,
        when a registration or its factory is absent, or when two
        registrations share a (case-insensitive) name.
    """

    def __init__(
        self,
        scope_factory: ServiceScopeFactory,
        options: HealthCheckServiceOptions,
        logger: HealthCheckLogger | Any = None,
    ) -> None:
        if scope_factory is None:
            raise InvalidArgumentError(
                "Requires a scope factory instance to resolve -and or create- health check instances "
                "for each health check registration",
                argument="scope_factory",
            )
        if options is None:
            raise InvalidArgumentError(
                "Requires a set of options to define all the health check registrations to be checked",
                argument="options",
            )
        if options.registrations is None:
            raise InvalidArgumentError(
                "Requires a set of health check registrations in the set of options", argument="options"
            )
        if any(registration is None for registration in options.registrations):
            raise InvalidArgumentError(
                "Requires a health check registration instance for each element in the health check options",
                argument="options",
            )
        if any(registration.factory is None for registration in options.registrations):
            raise InvalidArgumentError(
                "Requires a factory function to create health check instances for each health check "
                "registration in the health check options",
                argument="options",
            )

        duplicate_names = _duplicate_names(options.registrations)
        if duplicate_names:
            raise InvalidArgumentError(
                "Requires unique names for the health check registrations in the options, "
                f"but got duplicate name(s): {', '.join(duplicate_names)}",
                argument="options",
                detail={"duplicate_names": duplicate_names},
            )

        self._scope_factory = scope_factory
        self._registrations: tuple[HealthCheckRegistration, ...] = options.freeze()
        if logger is None:
            self._logger: HealthCheckLogger = NullHealthCheckLogger()
        elif isinstance(logger, HealthCheckLogger):
            self._logger = logger
        else:
            self._logger = HealthCheckLogger(logger)

    @property
    def registrations(self) -> tuple[HealthCheckRegistration, ...]:
        return self._registrations

    @property
    def logger(self) -> HealthCheckLogger:
        return self._logger

    async def check_health(
        self,
        predicate: RegistrationPredicate | None = None,
        cancellation_token: CancellationToken | None = None,
    ) -> HealthReport:
        """Run every registration accepted by *predicate* and aggregate the results.

        Raises
        ------
        OperationCancelledError
            When *cancellation_token* is cancelled before a registration runs,
            or a probe signals cancellation.  No partial report is returned.
        """
        token = cancellation_token or CancellationToken.none()
        async with self._scope_factory.create_scope() as scope:
            context = HealthCheckContext()
            entries: dict[str, HealthReportEntry] = {}

            total_time = ValueStopwatch.start_new()
            self._logger.log_processing_begin()

            for registration in self._registrations:
                if predicate is not None and not predicate(registration):
                    continue

                token.raise_if_cancellation_requested()
                context.registration = registration

                entries[registration.name] = await self._check_health_entry(registration, scope, context, token)

            total_elapsed = total_time.stop().elapsed
            report = HealthReport(entries, total_elapsed)
            self._logger.log_processing_end(report.status, total_elapsed)
            return report

    async def _check_health_entry(
        self,
        registration: HealthCheckRegistration,
        scope: Any,
        context: HealthCheckContext,
        cancellation_token: CancellationToken,
    ) -> HealthReportEntry:
        """Run one registration's probe and describe its outcome as an entry."""
        if registration is None:
            raise InvalidArgumentError(
                "Requires a health check registration to run the health check", argument="registration"
            )
        if scope is None:
            raise InvalidArgumentError(
                "Requires a service scope to resolve -and or create- an health check instance", argument="scope"
            )
        if context is None:
            raise InvalidArgumentError(
                "Requires a health check context to accumulate during each health check run", argument="context"
            )

        health_check = registration.factory(scope)
        stopwatch = ValueStopwatch.start_new()
        self._logger.log_check_begin(registration)

        if health_check is None:
            duration = stopwatch.stop().elapsed
            entry = HealthReportEntry(
                HealthStatus.UNHEALTHY,
                NO_INSTANCE_DESCRIPTION,
                duration,
                tags=registration.tags,
            )
            self._logger.log_check_end_failed(registration, entry, duration)
            return entry

        try:
            result = await health_check.check_health(context, cancellation_token)
            if not isinstance(result, HealthCheckResult):
                raise TypeError(
                    f"Health check {registration.name} returned {result!r} instead of a HealthCheckResult"
                )
        except OperationCancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            duration = stopwatch.stop().elapsed
            entry = HealthReportEntry(
                HealthStatus.UNHEALTHY,
                _error_message(exc),
                duration,
                exc,
                tags=registration.tags,
            )
            self._logger.log_check_error(registration, exc, duration)
            return entry

        duration = stopwatch.stop().elapsed
        entry = HealthReportEntry(
            result.status,
            result.description,
            duration,
            result.exception,
            result.data,
            registration.tags,
        )
        self._logger.log_check_end(registration, entry, duration)
        self._logger.log_check_data(registration, entry)
        return entry


def _duplicate_names(registrations: list[HealthCheckRegistration]) -> list[str]:
    """Names used more than once (case-insensitively), as first spelled."""
    counts = Counter(registration.name.casefold() for registration in registrations)
    seen: set[str] = set()
    duplicates: list[str] = []
    for registration in registrations:
        key = registration.name.casefold()
        if counts[key] > 1 and key not in seen:
            seen.add(key)
            duplicates.append(registration.name)
    return duplicates


def _error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc)
