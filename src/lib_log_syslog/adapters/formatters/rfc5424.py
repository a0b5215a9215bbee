"""Structured syslog formatter (RFC 5424).

Purpose
-------
Render ``<PRI>1 TIMESTAMP HOSTNAME APP-NAME PROCID MSGID STRUCTURED-DATA MSG``
frames, including escaped structured-data elements.

Contents
--------
* :data:`NILVALUE` - the RFC's ``-`` placeholder.
* :class:`Formatter5424` - concrete :class:`FormatterPort`.
* :func:`format_structured_data` - element rendering in insertion order.
"""

from __future__ import annotations

from typing import Any

from lib_log_syslog.application.ports.formatter import FormatterPort
from lib_log_syslog.application.ports.time import ClockPort
from lib_log_syslog.domain.config import FormatterConfig
from lib_log_syslog.domain.payload import StructuredData, coerce_payload
from lib_log_syslog.domain.severity import Severity, encode_priority

from .._formatting import (
    encode_frame,
    escape_control_characters,
    escape_param_value,
    header_token,
    rfc5424_timestamp,
    validate_sd_name,
)
from ..clock import SystemClock

NILVALUE = "-"
VERSION = 1

# Header field lengths from RFC 5424 section 6.
HOSTNAME_MAX = 255
APP_NAME_MAX = 48
PROCID_MAX = 128
MSGID_MAX = 32


def format_structured_data(data: StructuredData) -> str:
    """Render ``data`` as ``[name key="value" ...]`` elements, or ``-`` when empty.

    Examples
    --------
    >>> format_structured_data({})
    '-'
    >>> format_structured_data({"exampleSDID@32473": {"iut": 3, "eventSource": "Application"}})
    '[exampleSDID@32473 iut="3" eventSource="Application"]'
    """

    if not data:
        return NILVALUE
    elements: list[str] = []
    for name, params in data.items():
        parts = [validate_sd_name(str(name))]
        for key, value in params.items():
            parts.append(f'{validate_sd_name(str(key))}="{escape_param_value(value)}"')
        elements.append("[" + " ".join(parts) + "]")
    return "".join(elements)


def _header_field(value: Any, limit: int) -> str:
    text = "" if value is None else str(value)
    return header_token(text, limit) if text else NILVALUE


class Formatter5424(FormatterPort):
    """Render messages in the RFC 5424 layout.

    ``render`` accepts plain text (no message id, no structured data), a
    ``(msg_id, structured_data, text)`` triple, or a
    :class:`~lib_log_syslog.domain.payload.StructuredPayload`.

    Header fields never contain spaces (they become ``_``) and are cut to
    the RFC length limits.
    """

    def __init__(self, config: FormatterConfig, *, clock: ClockPort | None = None) -> None:
        self.config = config
        self._clock = clock or SystemClock()

    def render(self, severity: Severity, message: Any) -> bytes:
        payload = coerce_payload(message)
        config = self.config
        fields = (
            f"<{encode_priority(config.facility, severity)}>{VERSION}",
            rfc5424_timestamp(self._clock.now()),
            _header_field(config.hostname, HOSTNAME_MAX),
            _header_field(config.process, APP_NAME_MAX),
            _header_field(config.pid, PROCID_MAX),
            _header_field(payload.msg_id, MSGID_MAX),
            format_structured_data(payload.structured_data),
            escape_control_characters(payload.message),
        )
        return encode_frame(" ".join(fields))


__all__ = ["Formatter5424", "NILVALUE", "VERSION", "format_structured_data"]
