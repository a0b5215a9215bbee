"""Rendering helpers shared by the RFC 3164 and RFC 5424 formatters.

Why
---
Both formatters stamp timestamps and must keep control characters out of the
frame so a streaming collector never sees a stray line break. Keeping those
rules in one place guarantees both layouts escape identically.

Contents
--------
* :func:`rfc3164_timestamp` - ``Mmm dd hh:mm:ss`` with a space-padded day.
* :func:`rfc5424_timestamp` - RFC 3339 timestamp with UTC offset.
* :func:`escape_control_characters` - ``#ooo`` octal escapes (rsyslog style).
* :func:`encode_frame` - UTF-8 encoding that never raises.
* :func:`header_token` - space-free, length-capped header fields.
* :func:`escape_param_value` - structured-data value escaping.
* :func:`validate_sd_name` - structured-data name check.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_SD_NAME_RE = re.compile(r'^[!#-~]+$')
_SD_FORBIDDEN = frozenset('= ]"')


def rfc3164_timestamp(ts: datetime) -> str:
    """Render ``ts`` as the fixed-width RFC 3164 timestamp.

    Examples
    --------
    >>> rfc3164_timestamp(datetime(2024, 3, 5, 7, 8, 9))
    'Mar  5 07:08:09'
    >>> rfc3164_timestamp(datetime(2024, 11, 25, 23, 0, 0))
    'Nov 25 23:00:00'
    """

    return f"{_MONTHS[ts.month - 1]} {ts.day:>2} {ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"


def rfc5424_timestamp(ts: datetime) -> str:
    """Render the timezone-aware ``ts`` as an RFC 5424 ``TIMESTAMP``.

    Examples
    --------
    >>> from datetime import timezone
    >>> rfc5424_timestamp(datetime(2024, 3, 5, 7, 8, 9, 120, tzinfo=timezone.utc))
    '2024-03-05T07:08:09.000120+00:00'
    """

    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.isoformat(timespec="microseconds")


def escape_control_characters(text: str) -> str:
    """Replace ASCII control characters with ``#`` plus three octal digits.

    Examples
    --------
    >>> escape_control_characters("line one\\nline two")
    'line one#012line two'
    """

    return _CONTROL_RE.sub(lambda match: f"#{ord(match.group()):03o}", text)


def encode_frame(text: str) -> bytes:
    """Encode a rendered frame as UTF-8, backslash-escaping unencodable code points.

    Lone surrogates (as produced by :func:`os.fsdecode` on non-UTF-8 names)
    become ``\\udcXX`` text instead of failing the write.

    Examples
    --------
    >>> encode_frame("caf\\udce9")
    b'caf\\\\udce9'
    >>> encode_frame("café")
    b'caf\\xc3\\xa9'
    """

    return text.encode("utf-8", errors="backslashreplace")


def header_token(text: str, limit: int) -> str:
    """Make ``text`` a single header token of at most ``limit`` characters.

    Control characters are escaped and spaces become ``_`` so the field
    cannot shift the fields after it.

    Examples
    --------
    >>> header_token("my app", 48)
    'my_app'
    >>> header_token("x" * 40, 32) == "x" * 32
    True
    """

    return escape_control_characters(text).replace(" ", "_")[:limit]


def escape_param_value(value: Any) -> str:
    """Escape ``\\``, ``"`` and ``]`` in a structured-data parameter value.

    Examples
    --------
    >>> escape_param_value('say "hi" [ok]')
    'say \\\\"hi\\\\" [ok\\\\]'
    """

    text = str(value).replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")
    return escape_control_characters(text)


def validate_sd_name(name: str) -> str:
    """Return ``name`` unchanged when it is a legal SD-ID / PARAM-NAME."""

    if not _SD_NAME_RE.match(name) or _SD_FORBIDDEN.intersection(name):
        raise ValueError(f"Invalid structured-data name: {name!r}")
    return name


__all__ = [
    "encode_frame",
    "escape_control_characters",
    "escape_param_value",
    "header_token",
    "rfc3164_timestamp",
    "rfc5424_timestamp",
    "validate_sd_name",
]
