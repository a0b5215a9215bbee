"""Facade log levels bridged onto syslog severities.

Purpose
-------
Describe the levels of the generic logging facade (:mod:`logging`, extended
with ``TRACE``) and how each collapses onto a syslog :class:`Severity`.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* ``_SEVERITY_TABLE`` constant mapping levels to severities.

System Role
-----------
Used by :class:`~lib_log_syslog.adapters.logging_handler.SyslogHandler` to
filter records against the process-wide maximum level and to choose the
dispatcher method for each record.
"""

from __future__ import annotations

import logging
from enum import Enum

from .severity import Severity

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LogLevel(Enum):
    """Enumerated facade levels, ordered by increasing importance."""

    TRACE = TRACE
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> Severity:
        """Return the syslog severity this level is delivered with."""

        return _SEVERITY_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib level into the nearest :class:`LogLevel` at or below it.

        Custom levels registered by applications (e.g. ``25``) fall back to the
        next lower standard level; anything below ``TRACE`` becomes ``TRACE``.

        Examples
        --------
        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(1) is LogLevel.TRACE
        True
        """
        candidates = [member for member in cls if member.value <= level]
        if not candidates:
            return cls.TRACE
        return max(candidates, key=lambda member: member.value)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_SEVERITY_TABLE = {
    LogLevel.TRACE: Severity.DEBUG,
    LogLevel.DEBUG: Severity.DEBUG,
    LogLevel.INFO: Severity.INFO,
    LogLevel.WARNING: Severity.WARNING,
    LogLevel.ERROR: Severity.ERR,
    LogLevel.CRITICAL: Severity.CRIT,
}
# The facade has no notice/alert/emerg equivalents; TRACE collapses onto DEBUG.


__all__ = ["LogLevel", "TRACE"]
