"""Observability – Logger, the leveled logging façade.

Wraps a stdlib :class:`logging.Logger` and optionally serialises every
write through a per-instance lock.

Exclusive mode is an opt-in: without it concurrent writes through the
same instance may interleave at the sink, which is the caller's tradeoff
to make (single-threaded code, or writers already synchronised elsewhere).
Two distinct :class:`Logger` instances never share a lock unless one was
derived from the other with :meth:`Logger.with_fields`.

Usage::

    log = new_logger("telegram", Level.ERROR, DefaultLogFormatter()).exclusive()
    log.errorf("cannot deliver message %s", message_id, connection="42")
"""
from __future__ import annotations

import contextlib
import logging
import sys
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NoReturn, TextIO

from transport_core.kernel.errors import LoggerPanicError
from transport_core.observability.logging.fields import FIELDS_ATTR
from transport_core.observability.logging.formatters import DefaultLogFormatter
from transport_core.observability.logging.levels import Level

# logging.Logger.log -> Logger._log -> public level method -> user code
_CALLER_STACKLEVEL = 3


def _sprint(args: tuple[Any, ...]) -> str:
    return " ".join(str(a) for a in args)


def sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    """printf-style formatting that never raises.

    On a format/argument mismatch the format is returned followed by the
    stringified arguments, so the line still reaches the sink.
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return " ".join([fmt, *(str(a) for a in args)])


class Logger:
    """Leveled logger with optional mutual exclusion around writes.

    Parameters
    ----------
    backend:
        The stdlib logger that owns level filtering and handlers.
    fields:
        Structured fields attached to every line written through this instance.
    guard:
        Lock to acquire around each write.  ``None`` means unsynchronised;
        see :meth:`exclusive`.
    """

    def __init__(
        self,
        backend: logging.Logger,
        *,
        fields: Mapping[str, Any] | None = None,
        guard: threading.Lock | None = None,
    ) -> None:
        self._backend = backend
        self._fields: dict[str, Any] = dict(fields or {})
        self._guard = guard

    def __repr__(self) -> str:
        return (
            f"Logger(name={self._backend.name!r}, exclusive={self.is_exclusive}, "
            f"fields={self._fields!r})"
        )

    @property
    def backend(self) -> logging.Logger:
        return self._backend

    @property
    def fields(self) -> Mapping[str, Any]:
        return MappingProxyType(self._fields)

    @property
    def is_exclusive(self) -> bool:
        return self._guard is not None

    def exclusive(self) -> "Logger":
        """Install the write lock if absent and return ``self``.

        Idempotent.  Call it during initialisation, before the logger is
        shared between threads; it is not itself synchronised.
        """
        if self._guard is None:
            self._guard = threading.Lock()
        return self

    def with_fields(self, **fields: Any) -> "Logger":
        """Derive a logger carrying *fields* on every line.

        The derived logger writes to the same backend and shares the lock
        this instance holds at derivation time.
        """
        return Logger(self._backend, fields={**self._fields, **fields}, guard=self._guard)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _locked(self) -> contextlib.AbstractContextManager[Any]:
        return self._guard if self._guard is not None else contextlib.nullcontext()

    def _log(self, level: int, msg: str, fields: dict[str, Any]) -> None:
        self._backend.log(
            level,
            msg,
            extra={FIELDS_ATTR: {**self._fields, **fields}},
            stacklevel=_CALLER_STACKLEVEL,
        )

    # ------------------------------------------------------------------
    # Terminating levels
    # ------------------------------------------------------------------

    def fatal(self, *args: Any, **fields: Any) -> NoReturn:
        """Log at CRITICAL, then exit the process with status 1."""
        with self._locked():
            self._log(Level.CRITICAL, _sprint(args), fields)
            sys.exit(1)

    def fatalf(self, fmt: str, *args: Any, **fields: Any) -> NoReturn:
        """Printf form of :meth:`fatal`."""
        with self._locked():
            self._log(Level.CRITICAL, sprintf(fmt, args), fields)
            sys.exit(1)

    def panic(self, *args: Any, **fields: Any) -> NoReturn:
        """Log at CRITICAL, then raise :class:`LoggerPanicError`."""
        message = _sprint(args)
        with self._locked():
            self._log(Level.CRITICAL, message, fields)
            raise LoggerPanicError(message, detail=dict(fields))

    def panicf(self, fmt: str, *args: Any, **fields: Any) -> NoReturn:
        """Printf form of :meth:`panic`."""
        message = sprintf(fmt, args)
        with self._locked():
            self._log(Level.CRITICAL, message, fields)
            raise LoggerPanicError(message, detail=dict(fields))

    # ------------------------------------------------------------------
    # Plain levels
    # ------------------------------------------------------------------

    def critical(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.CRITICAL, _sprint(args), fields)

    def criticalf(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.CRITICAL, sprintf(fmt, args), fields)

    def error(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.ERROR, _sprint(args), fields)

    def errorf(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.ERROR, sprintf(fmt, args), fields)

    def warning(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.WARNING, _sprint(args), fields)

    def warningf(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.WARNING, sprintf(fmt, args), fields)

    # common alias
    warn = warning

    def notice(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.NOTICE, _sprint(args), fields)

    def noticef(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.NOTICE, sprintf(fmt, args), fields)

    def info(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.INFO, _sprint(args), fields)

    def infof(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.INFO, sprintf(fmt, args), fields)

    def debug(self, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.DEBUG, _sprint(args), fields)

    def debugf(self, fmt: str, *args: Any, **fields: Any) -> None:
        with self._locked():
            self._log(Level.DEBUG, sprintf(fmt, args), fields)


def new_logger(
    transport_code: str,
    level: Level | int | str = Level.DEBUG,
    formatter: logging.Formatter | None = None,
    stream: TextIO | None = None,
) -> Logger:
    """Create a :class:`Logger` writing to *stream* (stdout by default).

    The backend is the stdlib logger named *transport_code*.  Any handlers
    it already had are replaced, so calling this twice with the same code
    does not duplicate lines.
    """
    backend = logging.getLogger(transport_code)
    for old in list(backend.handlers):
        backend.removeHandler(old)
        old.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(formatter or DefaultLogFormatter())
    backend.addHandler(handler)
    backend.setLevel(Level.parse(level))
    backend.propagate = False
    return Logger(backend)


__all__ = ["Logger", "new_logger", "sprintf"]
