"""Health – report entry and aggregate report."""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from mp_healthchecks.health.status import HealthStatus
from mp_healthchecks.kernel.errors import ArgumentOutOfRangeError, InvalidArgumentError

__all__ = ["HealthReport", "HealthReportEntry"]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclasses.dataclass(frozen=True)
class HealthReportEntry:
    """Outcome of one registration within a :class:`HealthReport`.

    ``HealthReportEntry()``, an entry without a status, is the default
    sentinel.  It never describes a health condition; every consumer that
    accepts an entry rejects it (see :attr:`is_default`).
    """

    status: HealthStatus | None = None
    description: str = ""
    duration: timedelta = timedelta(0)
    exception: BaseException | None = None
    data: Mapping[str, Any] = _EMPTY
    tags: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.status is None:
            return
        if not isinstance(self.status, HealthStatus):
            raise ArgumentOutOfRangeError(
                "Requires a health status within the bounds of the enumeration",
                argument="status",
                actual=self.status,
            )
        if self.duration < timedelta(0):
            raise ArgumentOutOfRangeError(
                "Requires a positive time range for the health check duration",
                argument="duration",
                actual=self.duration,
            )
        object.__setattr__(self, "description", self.description or "")
        if self.data is not _EMPTY:
            object.__setattr__(self, "data", MappingProxyType(dict(self.data or {})))
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def is_default(self) -> bool:
        return self.status is None

    def to_dict(self, *, include_exception: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": self.status.value if self.status is not None else None,
            "description": self.description,
            "duration_ms": round(self.duration / timedelta(milliseconds=1), 2),
            "data": dict(self.data),
            "tags": sorted(self.tags),
        }
        if include_exception and self.exception is not None:
            payload["exception"] = f"{type(self.exception).__name__}: {self.exception}"
        return payload


class HealthReport:
    """Aggregate outcome of one ``check_health`` invocation.

    ``status`` is the most severe status among the entries; a report without
    entries is healthy.
    """

    def __init__(self, entries: Mapping[str, HealthReportEntry], total_duration: timedelta) -> None:
        if entries is None:
            raise InvalidArgumentError("Requires a set of health report entries", argument="entries")
        if total_duration < timedelta(0):
            raise ArgumentOutOfRangeError(
                "Requires a positive time range for the total health check duration",
                argument="total_duration",
                actual=total_duration,
            )
        defaults = [name for name, entry in entries.items() if entry is None or entry.is_default]
        if defaults:
            raise InvalidArgumentError(
                f"Requires non-default health report entries, but got default entries for: {', '.join(defaults)}",
                argument="entries",
            )
        self._entries: Mapping[str, HealthReportEntry] = MappingProxyType(dict(entries))
        self._total_duration = total_duration
        self._status = HealthStatus.aggregate(e.status for e in self._entries.values())  # type: ignore[misc]

    @property
    def entries(self) -> Mapping[str, HealthReportEntry]:
        return self._entries

    @property
    def total_duration(self) -> timedelta:
        return self._total_duration

    @property
    def status(self) -> HealthStatus:
        return self._status

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return (
            f"HealthReport(status={self._status.value!r}, entries={len(self._entries)}, "
            f"total_duration={self._total_duration})"
        )

    def to_dict(self, *, include_exceptions: bool = False) -> dict[str, Any]:
        """Serialise for a status endpoint response body."""
        return {
            "status": self._status.value,
            "total_duration_ms": round(self._total_duration / timedelta(milliseconds=1), 2),
            "entries": {
                name: entry.to_dict(include_exception=include_exceptions)
                for name, entry in self._entries.items()
            },
        }
