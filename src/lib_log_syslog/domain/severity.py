"""Syslog severities and priority encoding.

Purpose
-------
Model the eight RFC 5424 severities and compute the ``PRI`` value shared by
both wire formats.

Contents
--------
* :class:`Severity` enum (``EMERG`` = 0 .. ``DEBUG`` = 7).
* :func:`encode_priority` - ``facility * 8 + severity``.
"""

from __future__ import annotations

from enum import IntEnum

from .facility import Facility


class Severity(IntEnum):
    """Urgency of a message; lower values are more severe."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def keyword(self) -> str:
        """Return the lowercase keyword used by syslog tooling (``err``, ``crit`` ...)."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Resolve ``name`` case-insensitively, accepting common long spellings.

        Examples
        --------
        >>> Severity.from_name("error") is Severity.ERR
        True
        >>> Severity.from_name("LOG_NOTICE") is Severity.NOTICE
        True
        """
        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog severity: {name!r}") from exc


_ALIASES = {
    "EMERGENCY": "EMERG",
    "CRITICAL": "CRIT",
    "ERROR": "ERR",
    "WARN": "WARNING",
    "INFORMATIONAL": "INFO",
}


def encode_priority(facility: Facility, severity: Severity) -> int:
    """Return the ``PRI`` value for ``facility`` and ``severity``.

    Examples
    --------
    >>> encode_priority(Facility.USER, Severity.ERR)
    11
    >>> encode_priority(Facility.LOCAL7, Severity.DEBUG)
    191
    """

    return int(facility) * 8 + int(severity)


__all__ = ["Severity", "encode_priority"]
