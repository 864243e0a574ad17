"""Observability – structlog configuration and ``get_logger`` helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_healthchecks.config.settings import HealthCheckSettings

__all__ = ["configure_logging", "configure_logging_from_settings", "get_logger"]


def configure_logging(level: int | str = logging.INFO, *, json: bool = True) -> None:
    """Route structlog through stdlib logging with a JSON (or console) renderer.

    Parameters
    ----------
    level:
        Root log level, as an int or a level name such as ``"DEBUG"``.
    json:
        Render JSON lines when ``True``; human-friendly console output otherwise.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging_from_settings(settings: HealthCheckSettings | None = None) -> None:
    """Configure logging from ``HEALTHCHECKS_LOG_LEVEL`` and ``HEALTHCHECKS_JSON_LOGS``.

    Usage::

        configure_logging_from_settings(EnvSettingsLoader().load(HealthCheckSettings))
    """
    settings = settings or HealthCheckSettings()
    configure_logging(settings.log_level, json=settings.json_logs)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog stdlib bound logger writing to ``logging.getLogger(name)``.

    The underlying stdlib logger decides which levels are enabled, so
    ``isEnabledFor`` answers consistently whatever structlog configuration
    is active.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger
