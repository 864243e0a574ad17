"""Health – per-invocation execution scope.

The engine acquires exactly one scope per ``check_health`` invocation,
resolves every probe against it and releases it when the invocation ends,
whatever the outcome.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping, Protocol, Self

__all__ = ["ServiceContainer", "ServiceScope", "ServiceScopeFactory"]


class ServiceScopeFactory(Protocol):
    """Port: produce an isolated execution scope.

    ``create_scope()`` returns an async context manager yielding the scope.
    """

    def create_scope(self) -> Any: ...


class ServiceScope:
    """Resolves named services once per scope and releases them on exit.

    Instances exposing ``aclose()`` are awaited, instances exposing
    ``close()`` are called, in reverse resolution order.
    """

    def __init__(self, providers: Mapping[str, Callable[["ServiceScope"], Any]]) -> None:
        self._providers = providers
        self._instances: dict[str, Any] = {}
        self._released = False

    @property
    def is_released(self) -> bool:
        return self._released

    def get(self, key: str) -> Any:
        if self._released:
            raise RuntimeError(f"Cannot resolve '{key}': the service scope was already released")
        if key not in self._instances:
            try:
                provider = self._providers[key]
            except KeyError:
                raise KeyError(f"No service registered under '{key}'") from None
            self._instances[key] = provider(self)
        return self._instances[key]

    async def aclose(self) -> None:
        if self._released:
            return
        self._released = True
        instances = list(self._instances.values())
        self._instances.clear()
        for instance in reversed(instances):
            closer = getattr(instance, "aclose", None) or getattr(instance, "close", None)
            if closer is None:
                continue
            result = closer()
            if inspect.isawaitable(result):
                await result

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class ServiceContainer:
    """Minimal :class:`ServiceScopeFactory` keyed by service name.

    Usage::

        container = ServiceContainer()
        container.register("db_check", lambda scope: DatabaseCheck(pool))
        async with container.create_scope() as scope:
            check = scope.get("db_check")
    """

    def __init__(self, providers: Mapping[str, Callable[[ServiceScope], Any]] | None = None) -> None:
        self._providers: dict[str, Callable[[ServiceScope], Any]] = dict(providers or {})

    def register(self, key: str, provider: Callable[[ServiceScope], Any]) -> "ServiceContainer":
        self._providers[key] = provider
        return self

    def create_scope(self) -> ServiceScope:
        return ServiceScope(dict(self._providers))
