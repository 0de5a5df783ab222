"""FastAPI adapter – request logging middleware.

Every HTTP request gets a fresh stream id and a logger derived from the
base one with that id bound as a field.  The derived logger is stored in
the request scope state, so handlers write through it::

    app.add_middleware(RequestLoggingMiddleware, logger=log)

    @app.get("/ping")
    async def ping(request: Request) -> dict[str, str]:
        must_get(request).info("pong")
        return {"pong": "true"}

When the handler finishes, one ``request`` line is written at INFO with
timing, client address, method, path and response size.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from transport_core.kernel.errors import LoggerNotInstalledError
from transport_core.observability.logging.fields import (
    HANDLER_ATTR,
    HTTP_METHOD_ATTR,
    STREAM_ID_ATTR,
)
from transport_core.observability.logging.logger import Logger

try:
    from starlette.requests import Request
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Install 'transport-core[fastapi]' to use the FastAPI adapter"
    ) from exc

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

LOGGER_KEY = "logger"
HANDLER_TAG = "ASGI"

_MILLISECOND = timedelta(milliseconds=1)


def generate_stream_id() -> str:
    """Return a new random stream (correlation) id."""
    return uuid4().hex


def latency_ms(start: datetime, end: datetime) -> int:
    """Whole milliseconds between *start* and *end*, truncated toward zero."""
    return int((end - start) / _MILLISECOND)


def request_path(path: str, raw_query: str) -> str:
    """Join *path* and *raw_query* with ``?``, omitting it for an empty query."""
    return f"{path}?{raw_query}" if raw_query else path


class RequestLoggingMiddleware:
    """Bind a per-request logger into scope state and log a request summary.

    Parameters
    ----------
    app:
        The inner ASGI application.
    logger:
        Base logger; each request gets ``logger.with_fields(streamId=...)``.
    trust_forwarded_for:
        When ``True`` the first ``X-Forwarded-For`` hop is reported as the
        remote address instead of the socket peer.
    """

    def __init__(
        self,
        app: "ASGIApp",
        logger: Logger,
        trust_forwarded_for: bool = False,
    ) -> None:
        self.app = app
        self._logger = logger
        self._trust_forwarded_for = trust_forwarded_for

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = datetime.now(UTC)
        stream_id = generate_stream_id()
        log = self._logger.with_fields(**{STREAM_ID_ATTR: stream_id})
        state = scope.setdefault("state", {})
        state[STREAM_ID_ATTR] = stream_id
        state[LOGGER_KEY] = log

        body_size = [0]

        async def send_counting(message: "Message") -> None:
            if message["type"] == "http.response.body":
                body_size[0] += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_counting)
        finally:
            end = datetime.now(UTC)
            log.info(
                "request",
                **{
                    HANDLER_ATTR: HANDLER_TAG,
                    "startTime": start.isoformat(timespec="seconds"),
                    "endTime": end.isoformat(timespec="seconds"),
                    "latency": latency_ms(start, end),
                    "remoteAddress": self._remote_address(scope),
                    HTTP_METHOD_ATTR: scope.get("method", ""),
                    "path": request_path(
                        scope.get("path", ""),
                        scope.get("query_string", b"").decode("latin-1"),
                    ),
                    "bodySize": body_size[0],
                },
            )

    def _remote_address(self, scope: "Scope") -> str:
        if self._trust_forwarded_for:
            headers = dict(scope.get("headers", []))
            forwarded = headers.get(b"x-forwarded-for", b"").decode("latin-1")
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop
        client = scope.get("client")
        if client:
            return str(client[0])
        return ""


def must_get(request: Any) -> Logger:
    """Return the request logger stored by :class:`RequestLoggingMiddleware`.

    *request* is anything exposing the ASGI ``scope`` (a Starlette
    ``Request`` or ``WebSocket``).

    Raises
    ------
    LoggerNotInstalledError
        When the middleware did not run for this request.
    """
    state = request.scope.get("state") or {}
    log = state.get(LOGGER_KEY)
    if not isinstance(log, Logger):
        raise LoggerNotInstalledError(key=LOGGER_KEY)
    return log


def get_request_logger(request: Request) -> Logger:
    """FastAPI dependency: ``log: Logger = Depends(get_request_logger)``."""
    return must_get(request)


__all__ = [
    "HANDLER_TAG",
    "LOGGER_KEY",
    "RequestLoggingMiddleware",
    "generate_stream_id",
    "get_request_logger",
    "latency_ms",
    "must_get",
    "request_path",
]
