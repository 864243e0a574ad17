"""Health – probes, registrations and the aggregation engine.

Flow::

    bootstrap -> HealthChecksBuilder -> HealthCheckServiceOptions (mutable)
              -> DefaultHealthCheckService (validates, freezes)
              -> check_health() -> HealthReport
"""
from mp_healthchecks.health.builder import HealthChecksBuilder
from mp_healthchecks.health.check import DelegateHealthCheck, HealthCheck, HealthCheckContext, HealthCheckResult
from mp_healthchecks.health.hosting import (
    add_health_checks,
    get_health_check_options,
    get_health_check_service,
    reset_health_checks,
)
from mp_healthchecks.health.logger import HealthCheckLogger, NullHealthCheckLogger
from mp_healthchecks.health.options import HealthCheckServiceOptions
from mp_healthchecks.health.registration import (
    HealthCheckFactory,
    HealthCheckRegistration,
    RegistrationPredicate,
    by_name,
    with_tags,
)
from mp_healthchecks.health.report import HealthReport, HealthReportEntry
from mp_healthchecks.health.scope import ServiceContainer, ServiceScope, ServiceScopeFactory
from mp_healthchecks.health.service import NO_INSTANCE_DESCRIPTION, DefaultHealthCheckService, HealthCheckService
from mp_healthchecks.health.status import HealthStatus

__all__ = [
    "NO_INSTANCE_DESCRIPTION",
    "DefaultHealthCheckService",
    "DelegateHealthCheck",
    "HealthCheck",
    "HealthCheckContext",
    "HealthCheckFactory",
    "HealthCheckLogger",
    "HealthCheckRegistration",
    "HealthCheckResult",
    "HealthCheckService",
    "HealthCheckServiceOptions",
    "HealthChecksBuilder",
    "HealthReport",
    "HealthReportEntry",
    "HealthStatus",
    "NullHealthCheckLogger",
    "RegistrationPredicate",
    "ServiceContainer",
    "ServiceScope",
    "ServiceScopeFactory",
    "add_health_checks",
    "by_name",
    "get_health_check_options",
    "get_health_check_service",
    "reset_health_checks",
    "with_tags",
]
