"""Health – registration records and registration predicates."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable

from mp_healthchecks.health.check import HealthCheck
from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError, InvalidArgumentError

__all__ = [
    "HealthCheckFactory",
    "HealthCheckRegistration",
    "RegistrationPredicate",
    "by_name",
    "with_tags",
]

HealthCheckFactory = Callable[[Any], HealthCheck | None]
"""Resolves a probe against the invocation's execution scope."""

RegistrationPredicate = Callable[["HealthCheckRegistration"], bool]


@dataclasses.dataclass(frozen=True)
class HealthCheckRegistration:
    """Immutable declaration of one probe.

    Attributes:
        name: Non-blank identifier, unique (case-insensitively) within a set
            of options.
        factory: Called once per invocation with the execution scope; returns
            the probe to run.  Never cached across invocations.
        failure_status: Status declared for the case the probe fails with an
            unhandled error.  Kept as metadata.
        tags: Labels used by registration predicates.
    """

    name: str
    factory: HealthCheckFactory
    failure_status: HealthStatus = HealthStatus.UNHEALTHY
    tags: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError(
                "Requires a non-blank name for the health check registration", argument="name"
            )
        if not isinstance(self.failure_status, HealthStatus):
            raise ArgumentOutOfRangeError(
                "Requires a failure status within the bounds of the enumeration",
                argument="failure_status",
                actual=self.failure_status,
            )
        object.__setattr__(self, "tags", frozenset(self.tags or ()))

    @classmethod
    def from_instance(
        cls,
        name: str,
        instance: HealthCheck,
        *,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
        tags: Iterable[str] = (),
    ) -> "HealthCheckRegistration":
        """Register an already constructed probe; every invocation reuses it."""
        if instance is None:
            raise InvalidArgumentError("Requires a health check instance", argument="instance")
        return cls(name, lambda _scope: instance, failure_status, frozenset(tags))

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


def with_tags(*tags: str) -> RegistrationPredicate:
    """Predicate selecting registrations that carry at least one of *tags*."""
    wanted = frozenset(tags)

    def predicate(registration: HealthCheckRegistration) -> bool:
        return any(registration.has_tag(tag) for tag in wanted)

    return predicate


def by_name(*names: str) -> RegistrationPredicate:
    """Predicate selecting registrations by (case-insensitive) name."""
    wanted = frozenset(n.casefold() for n in names)

    def predicate(registration: HealthCheckRegistration) -> bool:
        return registration.name.casefold() in wanted

    return predicate
