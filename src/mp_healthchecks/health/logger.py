"""Health – HealthCheckLogger, the trace emitter of the health check process.

Every trace point is a pure function of its arguments: it validates them,
renders a stable message and writes it, together with structured fields,
through structlog.

=========================  =========  ========================================
Trace point                Level      Message
=========================  =========  ========================================
``log_processing_begin``   DEBUG      Running health checks
``log_processing_end``     DEBUG      ...completed after {ms}ms with combined status
``log_check_begin``        DEBUG      Running health check {name}
``log_check_end``          by status  healthy DEBUG, degraded WARNING, unhealthy ERROR
``log_check_end_failed``   ERROR      no probe instance could be resolved
``log_check_error``        ERROR      probe raised, exception attached
``log_check_data``         DEBUG      only for non-empty data when DEBUG is enabled
=========================  =========  ========================================
"""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError, InvalidArgumentError
from mp_healthchecks.observability.logging import EventId, EventIds, HealthCheckDataLogValue, get_logger

if TYPE_CHECKING:
    from mp_healthchecks.health.registration import HealthCheckRegistration
    from mp_healthchecks.health.report import HealthReportEntry

__all__ = ["HealthCheckLogger", "NullHealthCheckLogger"]

_CHECK_END_TEMPLATE = "Health check {name} completed after {ms}ms with status {status} and '{description}'"

_CHECK_END_LEVELS = {
    HealthStatus.HEALTHY: logging.DEBUG,
    HealthStatus.DEGRADED: logging.WARNING,
    HealthStatus.UNHEALTHY: logging.ERROR,
}


def _milliseconds(duration: timedelta) -> str:
    return f"{duration / timedelta(milliseconds=1):.4f}"


def _require_registration(registration: Any, purpose: str) -> None:
    if registration is None:
        raise InvalidArgumentError(
            f"Requires a health check registration that describes what {purpose}",
            argument="registration",
        )


def _require_entry(entry: Any, purpose: str) -> None:
    if entry is None or entry.is_default:
        raise InvalidArgumentError(
            f"Requires a non-default health report entry that {purpose}", argument="entry"
        )


def _require_status(status: Any, argument: str) -> None:
    if not isinstance(status, HealthStatus):
        raise ArgumentOutOfRangeError(
            "Requires a health status that is within the bounds of the enumeration",
            argument=argument,
            actual=status,
        )


def _require_duration(duration: Any, purpose: str) -> None:
    if not isinstance(duration, timedelta) or duration < timedelta(0):
        raise ArgumentOutOfRangeError(
            f"Requires a positive time range for {purpose}", argument="duration", actual=duration
        )


class HealthCheckLogger:
    """Writes the pre-defined health check trace points.

    Parameters
    ----------
    logger:
        Any structlog bound logger (stdlib-backed like :func:`get_logger`, or
        a filtering logger from ``structlog.get_logger()``) or a plain
        :class:`logging.Logger`, which gets wrapped.  Defaults to the
        ``mp_healthchecks.health`` logger.
    """

    def __init__(self, logger: Any = None) -> None:
        if logger is None:
            logger = get_logger("mp_healthchecks.health")
        elif isinstance(logger, logging.Logger):
            logger = get_logger(logger.name)
        self._log = logger

    def is_enabled_for(self, level: int) -> bool:
        """Whether a message at *level* would be written.

        Queried before building payloads that would otherwise be discarded.
        """
        # stdlib-backed loggers answer isEnabledFor, filtering loggers is_enabled_for
        enabled = getattr(self._log, "isEnabledFor", None) or self._log.is_enabled_for
        return bool(enabled(level))

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def log_processing_begin(self) -> None:
        self._write(logging.DEBUG, EventIds.HEALTH_CHECK_PROCESSING_BEGIN, "Running health checks")

    def log_processing_end(self, status: HealthStatus, duration: timedelta) -> None:
        _require_status(status, "status")
        _require_duration(duration, "the total duration of the health check process")
        ms = _milliseconds(duration)
        self._write(
            logging.DEBUG,
            EventIds.HEALTH_CHECK_PROCESSING_END,
            f"Health check processing completed after {ms}ms with combined status {status.value}",
            elapsed_milliseconds=float(ms),
            health_status=status.value,
        )

    # ------------------------------------------------------------------
    # Single health check
    # ------------------------------------------------------------------

    def log_check_begin(self, registration: "HealthCheckRegistration") -> None:
        _require_registration(registration, "should be verified during the health check")
        self._write(
            logging.DEBUG,
            EventIds.HEALTH_CHECK_BEGIN,
            f"Running health check {registration.name}",
            health_check_name=registration.name,
        )

    def log_check_end(
        self,
        registration: "HealthCheckRegistration",
        entry: "HealthReportEntry",
        duration: timedelta,
    ) -> None:
        """Write the end of a check at a level matching the entry's status."""
        _require_registration(registration, "was verified during the health check")
        _require_entry(entry, "describes the health of the single ended health check")
        _require_duration(duration, "the total duration it took to verify this single health check")
        _require_status(entry.status, "entry")
        self._write_check_end(_CHECK_END_LEVELS[entry.status], registration, entry, duration)

    def log_check_end_failed(
        self,
        registration: "HealthCheckRegistration",
        entry: "HealthReportEntry",
        duration: timedelta,
    ) -> None:
        """Write the end of a check that could not run; always at ERROR."""
        _require_registration(registration, "should have been verified during the health check")
        _require_entry(entry, "describes why the health of the health check failed")
        _require_duration(duration, "the total duration it took until the health check failed")
        _require_status(entry.status, "entry")
        self._write_check_end(logging.ERROR, registration, entry, duration)

    def log_check_error(
        self,
        registration: "HealthCheckRegistration",
        exception: BaseException,
        duration: timedelta,
    ) -> None:
        _require_registration(registration, "should have been verified during the health check")
        if exception is None:
            raise InvalidArgumentError(
                "Requires an exception that occurred during the health check", argument="exception"
            )
        _require_duration(duration, "the total duration it took until the exception happened")
        ms = _milliseconds(duration)
        self._write(
            logging.ERROR,
            EventIds.HEALTH_CHECK_ERROR,
            f"Health check {registration.name} threw an unhandled exception after {ms}ms",
            exc_info=exception,
            health_check_name=registration.name,
            elapsed_milliseconds=float(ms),
        )

    def log_check_data(self, registration: "HealthCheckRegistration", entry: "HealthReportEntry") -> None:
        _require_registration(registration, "should be verified during the health check")
        _require_entry(entry, "holds possible additional data for the health check")
        if not entry.data or not self.is_enabled_for(logging.DEBUG):
            return
        value = HealthCheckDataLogValue(registration.name, entry.data)
        self._write(
            logging.DEBUG,
            EventIds.HEALTH_CHECK_DATA,
            str(value),
            health_check_name=registration.name,
            health_check_data=value.as_dict(),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write_check_end(
        self,
        level: int,
        registration: "HealthCheckRegistration",
        entry: "HealthReportEntry",
        duration: timedelta,
    ) -> None:
        ms = _milliseconds(duration)
        status = entry.status.value  # type: ignore[union-attr]
        self._write(
            level,
            EventIds.HEALTH_CHECK_END,
            _CHECK_END_TEMPLATE.format(
                name=registration.name, ms=ms, status=status, description=entry.description
            ),
            health_check_name=registration.name,
            elapsed_milliseconds=float(ms),
            health_status=status,
            health_check_description=entry.description,
        )

    def _write(self, level: int, event_id: EventId, message: str, **fields: Any) -> None:
        self._log.log(level, message, event_id=event_id.id, event_name=event_id.name, **fields)


class NullHealthCheckLogger(HealthCheckLogger):
    """Validates trace point arguments like :class:`HealthCheckLogger` but writes nothing."""

    def __init__(self) -> None:
        self._log = None

    def is_enabled_for(self, level: int) -> bool:  # noqa: ARG002
        return False

    def _write(self, level: int, event_id: EventId, message: str, **fields: Any) -> None:  # noqa: ARG002
        return None
