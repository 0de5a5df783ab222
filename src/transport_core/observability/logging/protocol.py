"""Observability – LoggerInterface protocol."""
from __future__ import annotations

from typing import Any, NoReturn, Protocol, runtime_checkable


@runtime_checkable
class LoggerInterface(Protocol):
    """Methods every leveled logger implementation exposes.

    Each severity comes in a variadic form and a printf form.  The
    ``fatal`` and ``panic`` families never return to the caller.
    """

    def fatal(self, *args: Any, **fields: Any) -> NoReturn: ...
    def fatalf(self, fmt: str, *args: Any, **fields: Any) -> NoReturn: ...
    def panic(self, *args: Any, **fields: Any) -> NoReturn: ...
    def panicf(self, fmt: str, *args: Any, **fields: Any) -> NoReturn: ...
    def critical(self, *args: Any, **fields: Any) -> None: ...
    def criticalf(self, fmt: str, *args: Any, **fields: Any) -> None: ...
    def error(self, *args: Any, **fields: Any) -> None: ...
    def errorf(self, fmt: str, *args: Any, **fields: Any) -> None: ...
    def warning(self, *args: Any, **fields: Any) -> None: ...
    def warningf(self, fmt: str, *args: Any, **fields: Any) -> None: ...
    def notice(self, *args: Any, **fields: Any) -> None: ...
    def noticef(self, fmt: str, *args: Any, **fields: Any) -> None: ...
    def info(self, *args: Any, **fields: Any) -> None: ...
    def infof(self, fmt: str, *args: Any, **fields: Any) -> None: ...
    def debug(self, *args: Any, **fields: Any) -> None: ...
    def debugf(self, fmt: str, *args: Any, **fields: Any) -> None: ...


__all__ = ["LoggerInterface"]
