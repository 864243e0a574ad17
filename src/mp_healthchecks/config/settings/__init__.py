"""Config settings – 12-factor env-based configuration."""
from mp_healthchecks.config.settings.base import Settings
from mp_healthchecks.config.settings.health import HealthCheckSettings
from mp_healthchecks.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "HealthCheckSettings", "Settings", "SettingsLoader"]
