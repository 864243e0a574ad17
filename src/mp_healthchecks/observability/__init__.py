"""Observability – structlog configuration and health check log payloads."""

from mp_healthchecks.observability.logging import (
    EventId,
    EventIds,
    HealthCheckDataLogValue,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "EventId",
    "EventIds",
    "HealthCheckDataLogValue",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
