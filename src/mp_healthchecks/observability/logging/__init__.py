"""Observability – structlog configuration and health check log payloads."""
from mp_healthchecks.observability.logging.data_log_value import HEALTH_CHECK_NAME_KEY, HealthCheckDataLogValue
from mp_healthchecks.observability.logging.event_ids import EventId, EventIds
from mp_healthchecks.observability.logging.factory import configure_logging, configure_logging_from_settings, get_logger

__all__ = [
    "HEALTH_CHECK_NAME_KEY",
    "EventId",
    "EventIds",
    "HealthCheckDataLogValue",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
