"""Observability – HealthCheckDataLogValue.

Collects the data a probe reported, plus the name of its registration, into
a read-only sequence that renders lazily to text the first time it is
formatted.
"""
from __future__ import annotations

import functools
from typing import Any, Iterator, Mapping, Sequence, overload

from mp_healthchecks.kernel.errors import InvalidArgumentError

__all__ = ["HEALTH_CHECK_NAME_KEY", "HealthCheckDataLogValue"]

HEALTH_CHECK_NAME_KEY = "health_check_name"


class HealthCheckDataLogValue(Sequence[tuple[str, Any]]):
    """Key/value items of a probe's data, formatted for a log message.

    The registration name is appended as a ``health_check_name`` item so that
    data events can be filtered by check, like every other trace point.
    """

    def __init__(self, registration_name: str, data: Mapping[str, Any]) -> None:
        if not isinstance(registration_name, str) or not registration_name.strip():
            raise InvalidArgumentError(
                "Requires a non-blank name for the health check registration name",
                argument="registration_name",
            )
        if data is None:
            raise InvalidArgumentError(
                "Requires a set of health check data to format into a logging format", argument="data"
            )
        self._registration_name = registration_name
        self._items: list[tuple[str, Any]] = list(data.items())
        self._items.append((HEALTH_CHECK_NAME_KEY, registration_name))

    @functools.cached_property
    def _formatted(self) -> str:
        lines = [f"Health check data for {self._registration_name}:"]
        lines.extend(f"    {key}: {'' if value is None else value}" for key, value in self._items)
        return "\n".join(lines) + "\n"

    @overload
    def __getitem__(self, index: int) -> tuple[str, Any]: ...

    @overload
    def __getitem__(self, index: slice) -> list[tuple[str, Any]]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._items)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._items)

    def __str__(self) -> str:
        return self._formatted
