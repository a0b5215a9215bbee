"""Syslog facility codes.

Purpose
-------
Represent the originating subsystem of a message as the closed set of 24
integer codes defined by RFC 5424 section 6.2.1.

Contents
--------
* :class:`Facility` enum with a forgiving name parser.

System Role
-----------
Chosen once per :class:`~lib_log_syslog.domain.config.FormatterConfig` and
combined with a :class:`~lib_log_syslog.domain.severity.Severity` into the
priority value of every rendered header.
"""

from __future__ import annotations

from enum import IntEnum


class Facility(IntEnum):
    """Facility codes 0-23; names follow :mod:`logging.handlers.SysLogHandler`."""

    KERN = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CRON = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    SECURITY = 13
    CONSOLE = 14
    SOLCRON = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        """Resolve ``name`` case-insensitively; a ``LOG_`` prefix is accepted.

        Examples
        --------
        >>> Facility.from_name("local0") is Facility.LOCAL0
        True
        >>> Facility.from_name("LOG_USER") is Facility.USER
        True
        """
        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog facility: {name!r}") from exc


__all__ = ["Facility"]
