"""Unit tests for HealthCheckRegistration and registration predicates."""

from __future__ import annotations

import pytest

from mp_healthchecks.health import HealthCheckRegistration, HealthStatus, by_name, with_tags
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError, InvalidArgumentError
from mp_healthchecks.testing import StaticHealthCheck


class TestHealthCheckRegistration:
    def test_defaults(self) -> None:
        reg = HealthCheckRegistration("db", lambda scope: None)
        assert reg.failure_status is HealthStatus.UNHEALTHY
        assert reg.tags == frozenset()

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name) -> None:
        with pytest.raises(InvalidArgumentError):
            HealthCheckRegistration(name, lambda scope: None)

    def test_invalid_failure_status_rejected(self) -> None:
        with pytest.raises(ArgumentOutOfRangeError):
            HealthCheckRegistration("db", lambda scope: None, "broken")  # type: ignore[arg-type]

    def test_tags_normalised(self) -> None:
        reg = HealthCheckRegistration("db", lambda scope: None, tags=["ready", "db"])  # type: ignore[arg-type]
        assert reg.tags == frozenset({"ready", "db"})
        assert reg.has_tag("ready")
        assert not reg.has_tag("live")

    def test_from_instance_reuses_instance(self) -> None:
        check = StaticHealthCheck()
        reg = HealthCheckRegistration.from_instance("db", check, tags={"ready"})
        assert reg.factory(object()) is check
        assert reg.factory(object()) is check
        assert reg.tags == frozenset({"ready"})

    def test_from_instance_requires_instance(self) -> None:
        with pytest.raises(InvalidArgumentError):
            HealthCheckRegistration.from_instance("db", None)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        reg = HealthCheckRegistration("db", lambda scope: None)
        with pytest.raises(AttributeError):
            reg.name = "other"  # type: ignore[misc]


class TestPredicates:
    def test_with_tags_matches_any(self) -> None:
        predicate = with_tags("ready", "live")
        assert predicate(HealthCheckRegistration("a", lambda s: None, tags=frozenset({"ready"})))
        assert not predicate(HealthCheckRegistration("b", lambda s: None, tags=frozenset({"db"})))
        assert not predicate(HealthCheckRegistration("c", lambda s: None))

    def test_by_name_is_case_insensitive(self) -> None:
        predicate = by_name("Database")
        assert predicate(HealthCheckRegistration("database", lambda s: None))
        assert not predicate(HealthCheckRegistration("cache", lambda s: None))

    def test_with_tags_goes_through_has_tag(self) -> None:
        class CaseInsensitiveRegistration(HealthCheckRegistration):
            def has_tag(self, tag: str) -> bool:
                return tag.casefold() in {t.casefold() for t in self.tags}

        registration = CaseInsensitiveRegistration("db", lambda s: None, tags=frozenset({"Ready"}))
        assert with_tags("ready")(registration)
        assert not with_tags("live")(registration)
