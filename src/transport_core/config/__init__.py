"""Config – 12-factor settings and loaders."""

from transport_core.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from transport_core.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
