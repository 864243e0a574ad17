"""FastAPI adapter – health status endpoint."""
from __future__ import annotations

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mp_healthchecks.config.settings import HealthCheckSettings
from mp_healthchecks.health.registration import RegistrationPredicate, with_tags
from mp_healthchecks.health.service import HealthCheckService
from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.errors import InvalidArgumentError


def FastAPIHealthRouter(
    service: HealthCheckService,
    settings: HealthCheckSettings | None = None,
    predicate: RegistrationPredicate | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a router exposing the aggregated health report.

    ``GET {settings.path}`` answers 200 when the report is healthy and 503
    otherwise; the serialised report is the body either way.

    Parameters
    ----------
    service:
        The health check service to run on every request.
    settings:
        Path, tag filter and exception exposure.  Defaults to
        :class:`HealthCheckSettings` defaults.
    predicate:
        Explicit registration filter; takes precedence over ``settings.tags``.
    tags:
        OpenAPI tags for the generated route.
    """
    if service is None:
        raise InvalidArgumentError("Requires a health check service to expose", argument="service")
    settings = settings or HealthCheckSettings()
    if predicate is None and settings.tags:
        predicate = with_tags(*settings.tags)

    router = APIRouter(tags=tags or ["ops"])

    @router.get(settings.path)
    async def health() -> JSONResponse:
        """Run the registered health checks."""
        report = await service.check_health(predicate)
        status_code = 200 if report.status == HealthStatus.HEALTHY else 503
        body = report.to_dict(include_exceptions=settings.expose_exception_details)
        return JSONResponse(status_code=status_code, content=jsonable_encoder(body))

    return router


__all__ = ["FastAPIHealthRouter"]
