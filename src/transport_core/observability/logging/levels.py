"""Observability – severity levels.

The stdlib has no NOTICE level; it is registered here between INFO and
WARNING so that ``%(levelname)s`` renders it like any built-in level.
"""
from __future__ import annotations

import logging
from enum import IntEnum

NOTICE = 25

logging.addLevelName(NOTICE, "NOTICE")


class Level(IntEnum):
    """Severity levels understood by :class:`~transport_core.observability.logging.Logger`."""

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    NOTICE = NOTICE
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @property
    def code(self) -> str:
        """Four-character code used by the default line format (``CRIT``, ``NOTI``…)."""
        return self.name[:4]

    @classmethod
    def parse(cls, value: int | str) -> "Level":
        """Resolve a level from its name (case-insensitive) or numeric value."""
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARN":
                name = "WARNING"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level {value!r}") from None
        return cls(value)


__all__ = ["NOTICE", "Level"]
