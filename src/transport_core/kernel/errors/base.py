"""Root error class for transport_core.

Every error the library raises carries a stable ``code`` slug and a
``detail`` mapping, so it can be written as structured fields by the same
logger that reports it.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the transport_core error hierarchy.

    Args:
        message: What went wrong, as written to the log line.
        code: Stable slug for matching in log queries; ``default_code``
            of the concrete class when omitted.
        detail: Structured context (line number, setting name, fields of
            the panicking call).  Must be JSON-serialisable.
        cause: Underlying exception; also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """One JSON object on one line, fit for a JSON log sink."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail``, plus ``cause`` when chained."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
