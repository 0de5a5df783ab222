"""MG transport adapter – route the MG Transport API client's debug output into the logger.

The client reports its traffic through two printf-style hooks, ``printf``
and ``debugf``, with a handful of fixed format strings.  The adapter
recognises those formats and turns the positional arguments into
structured fields; everything else is formatted and logged as plain text.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, runtime_checkable

from transport_core.observability.logging.fields import (
    BODY_ATTR,
    DEFAULT_MAX_BODY_LENGTH,
    HTTP_METHOD_ATTR,
    body_value,
)
from transport_core.observability.logging.logger import Logger, sprintf

MG_DEBUG_LOG_REQ = "MG TRANSPORT API Request: %s %s %s %s"
MG_DEBUG_LOG_REQ_FILE = "MG TRANSPORT API Request: %s %s %s [file data]"
MG_DEBUG_LOG_RESP = "MG TRANSPORT API Response: %s"

REQUEST_MESSAGE = "MG TRANSPORT API Request"
RESPONSE_MESSAGE = "MG TRANSPORT API Response"
FILE_BODY_PLACEHOLDER = "[file data]"


@runtime_checkable
class BasicLogger(Protocol):
    """Client hook for general messages."""

    def printf(self, fmt: str, *args: Any) -> None: ...


@runtime_checkable
class DebugLogger(Protocol):
    """Client hook for request/response tracing."""

    def debugf(self, fmt: str, *args: Any) -> None: ...


@dataclasses.dataclass(frozen=True)
class RequestEvent:
    method: str = ""
    url: str = ""
    token: str = ""
    body: Any = None


@dataclasses.dataclass(frozen=True)
class ResponseEvent:
    body: Any = None


@dataclasses.dataclass(frozen=True)
class RawEvent:
    message: str


ClientCallEvent = RequestEvent | ResponseEvent | RawEvent


def _positional(args: tuple[Any, ...], index: int) -> str:
    return str(args[index]) if len(args) > index else ""


def classify(fmt: str, args: tuple[Any, ...]) -> ClientCallEvent:
    """Map one client call onto a :data:`ClientCallEvent`.

    Missing positional arguments are left at their defaults.
    """
    if fmt in (MG_DEBUG_LOG_REQ, MG_DEBUG_LOG_REQ_FILE):
        method, url, token = (_positional(args, i) for i in range(3))
        if fmt == MG_DEBUG_LOG_REQ_FILE:
            body: Any = FILE_BODY_PLACEHOLDER
        else:
            body = args[3] if len(args) > 3 else None  # noqa: PLR2004
        return RequestEvent(method=method, url=url, token=token, body=body)
    if fmt == MG_DEBUG_LOG_RESP:
        return ResponseEvent(body=args[0] if args else None)
    return RawEvent(message=sprintf(fmt, args))


class MGTransportClientAdapter:
    """Implements both :class:`BasicLogger` and :class:`DebugLogger` on top of a :class:`Logger`.

    Usage::

        client = MGClient(url, token, logger=MGTransportClientAdapter(log))
    """

    def __init__(self, log: Logger, max_body_length: int = DEFAULT_MAX_BODY_LENGTH) -> None:
        self._log = log
        self._max_body_length = max_body_length

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log one client call at DEBUG."""
        self.emit(classify(fmt, args))

    def printf(self, fmt: str, *args: Any) -> None:
        """Same as :meth:`debugf`."""
        self.debugf(fmt, *args)

    def emit(self, event: ClientCallEvent) -> None:
        if isinstance(event, RequestEvent):
            self._log.debug(
                REQUEST_MESSAGE,
                **{
                    HTTP_METHOD_ATTR: event.method,
                    "url": event.url,
                    "token": event.token,
                    BODY_ATTR: self._body(event.body),
                },
            )
        elif isinstance(event, ResponseEvent):
            self._log.debug(RESPONSE_MESSAGE, **{BODY_ATTR: self._body(event.body)})
        else:
            self._log.debug(event.message)

    def _body(self, value: Any) -> Any:
        return body_value(value, self._max_body_length)


__all__ = [
    "FILE_BODY_PLACEHOLDER",
    "MG_DEBUG_LOG_REQ",
    "MG_DEBUG_LOG_REQ_FILE",
    "MG_DEBUG_LOG_RESP",
    "REQUEST_MESSAGE",
    "RESPONSE_MESSAGE",
    "BasicLogger",
    "ClientCallEvent",
    "DebugLogger",
    "MGTransportClientAdapter",
    "RawEvent",
    "RequestEvent",
    "ResponseEvent",
    "classify",
]
