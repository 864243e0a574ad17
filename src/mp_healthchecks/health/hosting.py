"""Health – process-wide bootstrap helpers.

Bootstrap code in any module calls :func:`add_health_checks` to get a builder
over the same process-wide options; the host then calls
:func:`get_health_check_service` once the registrations are in place, which
validates and freezes them.

Usage::

    # db/bootstrap.py
    add_health_checks().add_check("database", DatabaseCheck(pool), tags={"ready"})

    # cache/bootstrap.py
    add_health_checks().add_check("cache", lambda scope: scope.get("cache_check"))

    # main.py
    service = get_health_check_service(container, logger=get_logger("health"))
"""
from __future__ import annotations

import threading
from typing import Any

from mp_healthchecks.health.builder import HealthChecksBuilder
from mp_healthchecks.health.options import HealthCheckServiceOptions
from mp_healthchecks.health.scope import ServiceScopeFactory
from mp_healthchecks.health.service import DefaultHealthCheckService, HealthCheckService
from mp_healthchecks.kernel.errors import InvalidArgumentError

__all__ = [
    "add_health_checks",
    "get_health_check_options",
    "get_health_check_service",
    "reset_health_checks",
]

_lock = threading.Lock()
_options: HealthCheckServiceOptions | None = None
_service: HealthCheckService | None = None


def get_health_check_options() -> HealthCheckServiceOptions:
    """Return the process-wide options, creating them on first use."""
    global _options
    with _lock:
        if _options is None:
            _options = HealthCheckServiceOptions()
        return _options


def add_health_checks() -> HealthChecksBuilder:
    """Return a builder over the process-wide options.

    Idempotent: every call appends to the same options, so it can be called
    from several places during bootstrap.
    """
    return HealthChecksBuilder(get_health_check_options())


def get_health_check_service(
    scope_factory: ServiceScopeFactory,
    logger: Any = None,
    service_cls: type[DefaultHealthCheckService] = DefaultHealthCheckService,
) -> HealthCheckService:
    """Return the process-wide service, constructing it on the first call.

    Later calls return the same instance and ignore their arguments.
    """
    global _service
    if scope_factory is None:
        raise InvalidArgumentError(
            "Requires a scope factory to resolve the health checks", argument="scope_factory"
        )
    options = get_health_check_options()
    with _lock:
        if _service is None:
            _service = service_cls(scope_factory, options, logger)
        return _service


def reset_health_checks() -> None:
    """Forget the process-wide options and service (tests and re-bootstrapping)."""
    global _options, _service
    with _lock:
        _options = None
        _service = None
