"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "access_token", "refresh_token", "x-transport-token",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts, including dicts inside lists."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if isinstance(k, str) and k.lower() in self._fields:
                result[k] = self.REDACTED
            else:
                result[k] = self._redact_value(v)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
