"""Config settings – HealthCheckSettings.

Environment variables (prefix ``HEALTHCHECKS``)::

    HEALTHCHECKS_PATH=/health
    HEALTHCHECKS_TAGS=ready,db
    HEALTHCHECKS_LOG_LEVEL=INFO
    HEALTHCHECKS_JSON_LOGS=true
    HEALTHCHECKS_EXPOSE_EXCEPTION_DETAILS=false
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_healthchecks.config.settings.base import Settings
from mp_healthchecks.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class HealthCheckSettings(Settings):
    """Settings for exposing the health check report."""

    _prefix: ClassVar[str] = "HEALTHCHECKS"

    path: str = "/health"
    tags: list[str] = dataclasses.field(default_factory=list)
    log_level: str = "INFO"
    json_logs: bool = True
    expose_exception_details: bool = False

    def _validate(self) -> None:
        if not self.path.startswith("/"):
            raise InvalidSettingValueError("path", self.path, "must start with '/'")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )


__all__ = ["HealthCheckSettings"]
