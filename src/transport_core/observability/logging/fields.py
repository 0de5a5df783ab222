"""Observability – well-known structured field names and value helpers."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from transport_core.observability.logging.filters import SensitiveFieldsFilter

HANDLER_ATTR = "handler"
CONNECTION_ATTR = "connection"
ACCOUNT_ATTR = "account"
HTTP_METHOD_ATTR = "method"
STREAM_ID_ATTR = "streamId"
BODY_ATTR = "body"

# LogRecord attribute carrying the structured fields of one line.
FIELDS_ATTR = "structured_fields"

DEFAULT_MAX_BODY_LENGTH = 4096
TRUNCATED_SUFFIX = "...(truncated)"

_default_filter = SensitiveFieldsFilter()


def body_value(
    value: Any,
    max_length: int = DEFAULT_MAX_BODY_LENGTH,
    sensitive_filter: SensitiveFieldsFilter | None = None,
) -> Any:
    """Return a log-safe representation of a request/response body.

    Raw bytes are decoded as UTF-8, JSON documents are decoded so that
    sensitive keys can be redacted, and anything whose rendering exceeds
    *max_length* characters is cut down (``0`` disables the limit).
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, str):
        decoded = _decode_json(value)
        if decoded is None:
            return _truncate(value, max_length)
        value = decoded
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if isinstance(value, bool | int | float):
        return value
    if isinstance(value, Mapping | list | tuple):
        redacted = _redact(value, sensitive_filter or _default_filter)
        rendered = json.dumps(redacted, ensure_ascii=False, default=str)
        if max_length and len(rendered) > max_length:
            return _truncate(rendered, max_length)
        return redacted
    return _truncate(str(value), max_length)


def _decode_json(text: str) -> Any:
    stripped = text.strip()
    if not stripped or stripped[0] not in "{[":
        return None
    try:
        return json.loads(stripped)
    except ValueError:
        return None


def _redact(value: Any, sensitive_filter: SensitiveFieldsFilter) -> Any:
    if isinstance(value, Mapping):
        return sensitive_filter.redact_deep(dict(value))
    if isinstance(value, list | tuple):
        return [_redact(item, sensitive_filter) for item in value]
    return value


def _truncate(text: str, max_length: int) -> str:
    if max_length and len(text) > max_length:
        return text[:max_length] + TRUNCATED_SUFFIX
    return text


__all__ = [
    "ACCOUNT_ATTR",
    "BODY_ATTR",
    "CONNECTION_ATTR",
    "DEFAULT_MAX_BODY_LENGTH",
    "FIELDS_ATTR",
    "HANDLER_ATTR",
    "HTTP_METHOD_ATTR",
    "STREAM_ID_ATTR",
    "TRUNCATED_SUFFIX",
    "body_value",
]
