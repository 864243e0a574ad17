"""Unit tests for HealthCheckSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest

from mp_healthchecks.config import (
    ConfigError,
    EnvSettingsLoader,
    HealthCheckSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)


@dataclasses.dataclass
class _ProbeSettings(Settings):
    _prefix: ClassVar[str] = "PROBE"

    endpoint: str
    retries: int = 3
    timeout: float = 1.5


class TestHealthCheckSettings:
    def test_defaults(self) -> None:
        settings = HealthCheckSettings()
        assert settings.path == "/health"
        assert settings.tags == []
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.expose_exception_details is False

    def test_log_level_is_normalised(self) -> None:
        assert HealthCheckSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HealthCheckSettings(log_level="chatty")

    def test_path_must_be_absolute(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HealthCheckSettings(path="health")


class TestEnvSettingsLoader:
    def test_loads_health_settings_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("HEALTHCHECKS_PATH", "/ready")
        monkeypatch.setenv("HEALTHCHECKS_TAGS", "ready, db")
        monkeypatch.setenv("HEALTHCHECKS_JSON_LOGS", "false")
        monkeypatch.setenv("HEALTHCHECKS_EXPOSE_EXCEPTION_DETAILS", "yes")
        settings = EnvSettingsLoader().load(HealthCheckSettings)
        assert settings.path == "/ready"
        assert settings.tags == ["ready", "db"]
        assert settings.json_logs is False
        assert settings.expose_exception_details is True

    def test_missing_required(self, monkeypatch) -> None:
        monkeypatch.delenv("PROBE_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError):
            EnvSettingsLoader().load(_ProbeSettings)

    def test_numeric_coercion(self, monkeypatch) -> None:
        monkeypatch.setenv("PROBE_ENDPOINT", "http://db")
        monkeypatch.setenv("PROBE_RETRIES", "5")
        monkeypatch.setenv("PROBE_TIMEOUT", "0.25")
        settings = EnvSettingsLoader().load(_ProbeSettings)
        assert (settings.retries, settings.timeout) == (5, 0.25)

    def test_invalid_integer(self, monkeypatch) -> None:
        monkeypatch.setenv("PROBE_ENDPOINT", "http://db")
        monkeypatch.setenv("PROBE_RETRIES", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(_ProbeSettings)
        assert exc_info.value.setting_name == "PROBE_RETRIES"

    def test_validation_error_propagates(self, monkeypatch) -> None:
        monkeypatch.setenv("HEALTHCHECKS_LOG_LEVEL", "loud")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(HealthCheckSettings)

