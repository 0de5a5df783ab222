"""Config validation errors."""
from transport_core.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
