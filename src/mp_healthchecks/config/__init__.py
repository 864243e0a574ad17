"""Config – 12-factor settings and configuration errors."""

from mp_healthchecks.config.settings import (
    EnvSettingsLoader,
    HealthCheckSettings,
    Settings,
    SettingsLoader,
)
from mp_healthchecks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HealthCheckSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
