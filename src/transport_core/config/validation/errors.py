"""Errors raised while loading or validating settings such as ``LOG_*``."""
from transport_core.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded, or a loaded value is unusable."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable behind it.

    *setting_name* is the environment key that was looked up, e.g.
    ``LOG_TRANSPORT_CODE``.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} is not set and has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot be used.

    Raised both when an environment string cannot be coerced to the
    field's type and when validation rejects the value (an unknown level
    name, a negative body limit, an empty transport code).
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
