"""Observability – leveled structured logging façade and helpers."""
from transport_core.observability.logging.factory import LoggerFactory, LoggerSettings
from transport_core.observability.logging.fields import body_value
from transport_core.observability.logging.filters import SensitiveFieldsFilter
from transport_core.observability.logging.formatters import (
    DefaultLogFormatter,
    JsonRecordFormatter,
    RecordShapeProcessor,
)
from transport_core.observability.logging.levels import NOTICE, Level
from transport_core.observability.logging.logger import Logger, new_logger, sprintf
from transport_core.observability.logging.protocol import LoggerInterface

__all__ = [
    "NOTICE",
    "DefaultLogFormatter",
    "JsonRecordFormatter",
    "Level",
    "Logger",
    "LoggerFactory",
    "LoggerInterface",
    "LoggerSettings",
    "RecordShapeProcessor",
    "SensitiveFieldsFilter",
    "body_value",
    "new_logger",
    "sprintf",
]
