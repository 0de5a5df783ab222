"""Observability – leveled structured logging."""

from transport_core.observability.logging import (
    DefaultLogFormatter,
    JsonRecordFormatter,
    Level,
    Logger,
    LoggerFactory,
    LoggerInterface,
    LoggerSettings,
    SensitiveFieldsFilter,
    new_logger,
)

__all__ = [
    "DefaultLogFormatter",
    "JsonRecordFormatter",
    "Level",
    "Logger",
    "LoggerFactory",
    "LoggerInterface",
    "LoggerSettings",
    "SensitiveFieldsFilter",
    "new_logger",
]
