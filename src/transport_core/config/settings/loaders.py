"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from transport_core.config.settings.base import Settings
from transport_core.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each dataclass field ``name`` is read from ``<PREFIX>_<NAME>``; fields
    without an environment value keep their declared default.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.strip().lower() in _TRUTHY
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
