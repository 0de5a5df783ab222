"""FastAPI adapter – request-scoped logging middleware and dependency."""
from transport_core.adapters.fastapi.middleware import (
    HANDLER_TAG,
    LOGGER_KEY,
    RequestLoggingMiddleware,
    generate_stream_id,
    get_request_logger,
    latency_ms,
    must_get,
    request_path,
)

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
