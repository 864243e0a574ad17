"""
mp_healthchecks – Health-check aggregation engine.

Import path convention::

    from mp_healthchecks.health import DefaultHealthCheckService, HealthChecksBuilder
    from mp_healthchecks.health import HealthCheck, HealthCheckResult, HealthStatus
    from mp_healthchecks.kernel.errors import InvalidArgumentError
    from mp_healthchecks.adapters.fastapi import FastAPIHealthRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
