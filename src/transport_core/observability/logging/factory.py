"""Observability – LoggerSettings and LoggerFactory."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, TextIO

from transport_core.config.settings import EnvSettingsLoader, Settings
from transport_core.config.validation import InvalidSettingValueError
from transport_core.observability.logging.fields import DEFAULT_MAX_BODY_LENGTH
from transport_core.observability.logging.formatters import (
    DefaultLogFormatter,
    JsonRecordFormatter,
)
from transport_core.observability.logging.levels import Level
from transport_core.observability.logging.logger import Logger, new_logger


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Logger configuration, read from ``LOG_*`` environment variables."""

    _prefix: ClassVar[str] = "LOG"

    transport_code: str = "transport"
    level: str = "DEBUG"
    json_output: bool = False
    exclusive: bool = False
    max_body_length: int = DEFAULT_MAX_BODY_LENGTH

    def _validate(self) -> None:
        try:
            Level.parse(self.level)
        except ValueError as exc:
            raise InvalidSettingValueError("level", self.level, str(exc)) from exc
        if self.max_body_length < 0:
            raise InvalidSettingValueError(
                "max_body_length", self.max_body_length, "must be >= 0"
            )
        if not self.transport_code:
            raise InvalidSettingValueError("transport_code", self.transport_code, "must not be empty")


class LoggerFactory:
    """Build configured :class:`Logger` instances from :class:`LoggerSettings`."""

    @staticmethod
    def from_settings(settings: LoggerSettings, stream: TextIO | None = None) -> Logger:
        formatter = JsonRecordFormatter() if settings.json_output else DefaultLogFormatter()
        logger = new_logger(settings.transport_code, settings.level, formatter, stream)
        if settings.exclusive:
            logger.exclusive()
        return logger

    @staticmethod
    def from_env(stream: TextIO | None = None) -> Logger:
        """Shortcut for ``from_settings(EnvSettingsLoader().load(LoggerSettings))``."""
        return LoggerFactory.from_settings(EnvSettingsLoader().load(LoggerSettings), stream)


__all__ = ["LoggerFactory", "LoggerSettings"]
