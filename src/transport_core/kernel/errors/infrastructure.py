"""Infrastructure errors – I/O and payload decoding failures."""

from __future__ import annotations

from typing import Any

from transport_core.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class RecordDecodeError(SerializationError):
    """A structured log line could not be decoded into a record."""

    default_code = "record_decode_error"

    def __init__(self, line_number: int, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot decode log record on line {line_number}: {reason}",
            payload_type="LogRecord",
            detail={"line": line_number},
            **kwargs,
        )
        self.line_number = line_number
        self.reason = reason


__all__ = [
    "InfrastructureError",
    "RecordDecodeError",
    "SerializationError",
]
