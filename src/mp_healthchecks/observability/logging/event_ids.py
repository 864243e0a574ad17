"""Observability – event ids of the health check trace points."""
from __future__ import annotations

import dataclasses

__all__ = ["EventId", "EventIds"]


@dataclasses.dataclass(frozen=True)
class EventId:
    id: int
    name: str


class EventIds:
    """All event ids written while checking health."""

    HEALTH_CHECK_PROCESSING_BEGIN = EventId(100, "HealthCheckProcessingBegin")
    HEALTH_CHECK_PROCESSING_END = EventId(101, "HealthCheckProcessingEnd")
    HEALTH_CHECK_BEGIN = EventId(102, "HealthCheckBegin")
    HEALTH_CHECK_END = EventId(103, "HealthCheckEnd")
    HEALTH_CHECK_ERROR = EventId(104, "HealthCheckError")
    HEALTH_CHECK_DATA = EventId(105, "HealthCheckData")
