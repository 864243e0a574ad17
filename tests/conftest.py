"""Shared fixtures: structlog routed to stdlib logging, clean process-wide health state."""

from __future__ import annotations

import pytest
import structlog

from mp_healthchecks.health import reset_health_checks


@pytest.fixture(autouse=True)
def _structlog_to_stdlib():
    """Render structlog events as plain stdlib records so ``caplog`` sees the message text."""
    structlog.configure(
        processors=[structlog.stdlib.render_to_log_kwargs],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_health_checks():
    reset_health_checks()
    yield
    reset_health_checks()
