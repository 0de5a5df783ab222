"""Config settings – 12-factor env-based configuration."""
from transport_core.config.settings.base import Settings
from transport_core.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
