"""Health – registration options (mutable until frozen)."""
from __future__ import annotations

from mp_healthchecks.config.validation import ConfigError
from mp_healthchecks.health.registration import HealthCheckRegistration

__all__ = ["HealthCheckServiceOptions"]


class HealthCheckServiceOptions:
    """Accumulates registrations during bootstrap.

    Bootstrap code appends through a :class:`HealthChecksBuilder`; the engine
    validates the accumulated set and calls :meth:`freeze`, after which the
    options refuse further registrations.
    """

    def __init__(self) -> None:
        self.registrations: list[HealthCheckRegistration] = []
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def add_registration(self, registration: HealthCheckRegistration) -> None:
        if self._frozen:
            raise ConfigError(
                f"Cannot add health check registration '{registration.name}': "
                "the options were already consumed by a health check service"
            )
        self.registrations.append(registration)

    def freeze(self) -> tuple[HealthCheckRegistration, ...]:
        """Stop accepting registrations and return them in insertion order."""
        self._frozen = True
        return tuple(self.registrations)

    def __len__(self) -> int:
        return len(self.registrations)

    def __repr__(self) -> str:
        return f"HealthCheckServiceOptions(registrations={len(self.registrations)}, frozen={self._frozen})"
