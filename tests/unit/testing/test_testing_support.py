"""Unit tests for the testing fakes and generators."""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given

from mp_healthchecks.health import HealthCheckContext, HealthStatus
from mp_healthchecks.kernel.cancellation import CancellationToken
from mp_healthchecks.kernel.errors import OperationCancelledError
from mp_healthchecks.testing import (
    CancellingHealthCheck,
    RaisingHealthCheck,
    StaticHealthCheck,
    registration_name_gen,
    registrations_for,
)
from mp_healthchecks.testing.generators.strategies import registration_name_strategy


class TestFakes:
    def test_static_check_records_calls(self) -> None:
        check = StaticHealthCheck(HealthStatus.DEGRADED, "slow", data={"a": 1})
        ctx = HealthCheckContext()
        result = asyncio.run(check.check_health(ctx, CancellationToken.none()))
        assert (result.status, result.description, dict(result.data)) == (HealthStatus.DEGRADED, "slow", {"a": 1})
        assert check.calls == 1
        assert check.contexts == [ctx]

    def test_raising_check(self) -> None:
        check = RaisingHealthCheck(ValueError("nope"))
        with pytest.raises(ValueError, match="nope"):
            asyncio.run(check.check_health(HealthCheckContext(), CancellationToken.none()))
        assert check.calls == 1

    def test_cancelling_check_cancels_token(self) -> None:
        token = CancellationToken()
        with pytest.raises(OperationCancelledError):
            asyncio.run(CancellingHealthCheck().check_health(HealthCheckContext(), token))
        assert token.is_cancellation_requested is True

    def test_cancelling_check_with_none_token(self) -> None:
        with pytest.raises(OperationCancelledError):
            asyncio.run(CancellingHealthCheck().check_health(HealthCheckContext(), CancellationToken.none()))


class TestGenerators:
    def test_name_gen_is_unique(self) -> None:
        names = {registration_name_gen("db") for _ in range(50)}
        assert len(names) == 50
        assert all(n.startswith("db-") for n in names)

    def test_registrations_for(self) -> None:
        registrations = registrations_for(HealthStatus.UNHEALTHY, 3)
        assert len({r.name for r in registrations}) == 3
        check = registrations[0].factory(None)
        result = asyncio.run(check.check_health(HealthCheckContext(), CancellationToken.none()))
        assert result.status is HealthStatus.UNHEALTHY

    @given(registration_name_strategy())
    def test_name_strategy_is_never_blank(self, name: str) -> None:
        assert name.strip()
