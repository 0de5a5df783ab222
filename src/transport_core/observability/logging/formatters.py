"""Observability – line formatters.

Two renderings of the same :class:`logging.LogRecord`:

* :class:`DefaultLogFormatter` – the human-readable line
  ``2006-01-02 15:04:05.000 INFO => message``.
* :class:`JsonRecordFormatter` – one JSON object per line, in the shape
  :class:`~transport_core.testing.JSONRecordScanner` decodes.
"""
from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import structlog

from transport_core.observability.logging.fields import (
    ACCOUNT_ATTR,
    CONNECTION_ATTR,
    FIELDS_ATTR,
    HANDLER_ATTR,
)

_TAG_ATTRS = (HANDLER_ATTR, CONNECTION_ATTR, ACCOUNT_ATTR)


class DefaultLogFormatter(logging.Formatter):
    """Render ``<timestamp ms> <4-char level> => <message>``.

    Structured fields, when a line carries any, follow the message as
    ``key=value`` pairs.
    """

    FORMAT = "%(asctime)s.%(msecs)03d %(levelname).4s => %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self) -> None:
        super().__init__(fmt=self.FORMAT, datefmt=self.DATE_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        line = super().formatMessage(record)
        fields: dict[str, Any] = getattr(record, FIELDS_ATTR, None) or {}
        if fields:
            line += " " + " ".join(f"{k}={v!r}" for k, v in fields.items())
        return line


class RecordShapeProcessor:
    """structlog processor turning a foreign stdlib record into the log-record shape.

    Output keys: ``level_name``, ``datetime``, ``caller``, ``message``, then
    ``handler`` / ``connection`` / ``account`` when present among the fields,
    and every remaining field under ``context``.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        record: logging.LogRecord = event_dict["_record"]
        fields = dict(getattr(record, FIELDS_ATTR, None) or {})

        shaped: dict[str, Any] = {
            "level_name": record.levelname,
            "datetime": datetime.fromtimestamp(record.created, tz=UTC).isoformat(
                timespec="milliseconds"
            ),
            "caller": f"{record.filename}:{record.lineno}",
            "message": event_dict.get("event", ""),
        }
        for tag in _TAG_ATTRS:
            if tag in fields:
                shaped[tag] = str(fields.pop(tag))
        if fields:
            shaped["context"] = fields
        return shaped


class JsonRecordFormatter(structlog.stdlib.ProcessorFormatter):
    """Render each record as a single JSON object via structlog."""

    def __init__(self, **dumps_kw: Any) -> None:
        dumps_kw.setdefault("ensure_ascii", False)
        super().__init__(
            processors=[
                RecordShapeProcessor(),
                structlog.processors.JSONRenderer(**dumps_kw),
            ],
        )


__all__ = ["DefaultLogFormatter", "JsonRecordFormatter", "RecordShapeProcessor"]
