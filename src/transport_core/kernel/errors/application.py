"""Application-layer errors – misuse of the logging façade."""

from __future__ import annotations

from typing import Any

from transport_core.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class LoggerPanicError(ApplicationError):
    """Raised after a panic-level line has been written.

    Meant to be caught by an outer supervisory boundary (for example the
    HTTP framework's own error handler), never by the logger itself.
    """

    default_code = "logger_panic"


class LoggerNotInstalledError(ApplicationError):
    """A request-scoped logger was requested but the middleware never stored one."""

    default_code = "logger_not_installed"

    def __init__(
        self,
        message: str = "No request logger in scope state; is RequestLoggingMiddleware installed?",
        *,
        key: str = "logger",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key


__all__ = [
    "ApplicationError",
    "LoggerNotInstalledError",
    "LoggerPanicError",
]
