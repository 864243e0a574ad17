"""Unit tests for HealthCheckResult, HealthCheckContext and DelegateHealthCheck."""

from __future__ import annotations

import asyncio

import pytest

from mp_healthchecks.health import (
    DelegateHealthCheck,
    HealthCheckContext,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthStatus,
)
from mp_healthchecks.kernel.cancellation import CancellationToken
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError


class TestHealthCheckResult:
    def test_defaults(self) -> None:
        result = HealthCheckResult(HealthStatus.HEALTHY)
        assert result.description == ""
        assert result.exception is None
        assert dict(result.data) == {}

    def test_factories(self) -> None:
        err = RuntimeError("x")
        assert HealthCheckResult.healthy("ok").status is HealthStatus.HEALTHY
        degraded = HealthCheckResult.degraded("slow", data={"latency": 900})
        assert degraded.status is HealthStatus.DEGRADED
        assert degraded.data["latency"] == 900
        unhealthy = HealthCheckResult.unhealthy("down", exception=err)
        assert unhealthy.status is HealthStatus.UNHEALTHY
        assert unhealthy.exception is err

    def test_invalid_status_rejected(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            HealthCheckResult("sideways")  # type: ignore[arg-type]

    def test_data_is_read_only_copy(self) -> None:
        source = {"rows": 1}
        result = HealthCheckResult.healthy(data=source)
        source["rows"] = 2
        assert result.data["rows"] == 1
        with pytest.raises(TypeError):
            result.data["rows"] = 3  # type: ignore[index]


class TestHealthCheckContext:
    def test_registration_defaults_to_none(self) -> None:
        assert HealthCheckContext().registration is None

    def test_registration_is_assignable(self) -> None:
        ctx = HealthCheckContext()
        reg = HealthCheckRegistration("db", lambda scope: None)
        ctx.registration = reg
        assert ctx.registration is reg


class TestDelegateHealthCheck:
    def test_delegates_to_function(self) -> None:
        seen: list[object] = []

        async def probe(context: HealthCheckContext, token: CancellationToken) -> HealthCheckResult:
            seen.append((context, token))
            return HealthCheckResult.degraded("meh")

        ctx = HealthCheckContext()
        token = CancellationToken()
        result = asyncio.run(DelegateHealthCheck(probe).check_health(ctx, token))
        assert result.status is HealthStatus.DEGRADED
        assert seen == [(ctx, token)]
