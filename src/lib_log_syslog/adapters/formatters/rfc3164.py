"""Legacy BSD syslog formatter (RFC 3164).

Purpose
-------
Render ``<PRI>Mmm dd hh:mm:ss hostname process[pid]: message`` frames.

Contents
--------
* :data:`FALLBACK_HOSTNAME` - token used when no hostname is configured.
* :class:`Formatter3164` - concrete :class:`FormatterPort`.

System Role
-----------
Default formatter of the process-wide handler installed by
:func:`lib_log_syslog.init_udp` / :func:`lib_log_syslog.init_tcp`.
"""

from __future__ import annotations

from typing import Any

from lib_log_syslog.application.ports.formatter import FormatterPort
from lib_log_syslog.application.ports.time import ClockPort
from lib_log_syslog.domain.config import FormatterConfig
from lib_log_syslog.domain.severity import Severity, encode_priority

from .._formatting import encode_frame, escape_control_characters, header_token, rfc3164_timestamp
from ..clock import SystemClock

FALLBACK_HOSTNAME = "localhost"
HOSTNAME_MAX = 255


class Formatter3164(FormatterPort):
    """Render messages in the RFC 3164 layout."""

    def __init__(self, config: FormatterConfig, *, clock: ClockPort | None = None) -> None:
        self.config = config
        self._clock = clock or SystemClock()

    def render(self, severity: Severity, message: Any) -> bytes:
        """Return the frame for ``message``; any value convertible with :class:`str` is accepted.

        Examples
        --------
        >>> from datetime import datetime
        >>> from lib_log_syslog.domain.facility import Facility
        >>> class FixedClock:
        ...     def now(self):
        ...         return datetime(2024, 3, 5, 7, 8, 9)
        >>> formatter = Formatter3164(FormatterConfig(Facility.USER, None, "myprogram", 0), clock=FixedClock())
        >>> formatter.render(Severity.ERR, "hello world")
        b'<11>Mar  5 07:08:09 localhost myprogram[0]: hello world'
        """
        config = self.config
        header = "<{pri}>{ts} {host} {process}[{pid}]: ".format(
            pri=encode_priority(config.facility, severity),
            ts=rfc3164_timestamp(self._clock.now()),
            host=header_token(config.hostname, HOSTNAME_MAX) if config.hostname else FALLBACK_HOSTNAME,
            process=escape_control_characters(config.process),
            pid=config.pid,
        )
        return encode_frame(header + escape_control_characters(str(message)))


__all__ = ["FALLBACK_HOSTNAME", "Formatter3164"]
