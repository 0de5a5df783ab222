"""MG transport adapter – structured logging for the MG Transport API client."""
from transport_core.adapters.mg_transport.adapter import (
    FILE_BODY_PLACEHOLDER,
    MG_DEBUG_LOG_REQ,
    MG_DEBUG_LOG_REQ_FILE,
    MG_DEBUG_LOG_RESP,
    BasicLogger,
    ClientCallEvent,
    DebugLogger,
    MGTransportClientAdapter,
    RawEvent,
    RequestEvent,
    ResponseEvent,
    classify,
)

__all__ = [
    "FILE_BODY_PLACEHOLDER",
    "MG_DEBUG_LOG_REQ",
    "MG_DEBUG_LOG_REQ_FILE",
    "MG_DEBUG_LOG_RESP",
    "BasicLogger",
    "ClientCallEvent",
    "DebugLogger",
    "MGTransportClientAdapter",
    "RawEvent",
    "RequestEvent",
    "ResponseEvent",
    "classify",
]
