"""Public package surface of the syslog client.

Build a :class:`Logger` with :func:`udp` or :func:`tcp` and call its
severity methods directly, or install the process-wide :mod:`logging` bridge
once with :func:`init`, :func:`init_udp`, or :func:`init_tcp`.
"""

from __future__ import annotations

from .adapters.formatters import Formatter3164, Formatter5424
from .adapters.logging_handler import SyslogHandler
from .adapters.transports import Framing, TcpTransport, UdpTransport
from .application.logger import Logger
from .domain import Facility, FormatterConfig, LogLevel, Severity, StructuredPayload, encode_priority
from .errors import InitializationError, LockPoisonedError, SyslogError
from .runtime import current_handler, init, init_tcp, init_udp, is_registered, max_level, tcp, udp

__all__ = [
    "Facility",
    "Formatter3164",
    "Formatter5424",
    "FormatterConfig",
    "Framing",
    "InitializationError",
    "LockPoisonedError",
    "LogLevel",
    "Logger",
    "Severity",
    "StructuredPayload",
    "SyslogError",
    "SyslogHandler",
    "TcpTransport",
    "UdpTransport",
    "current_handler",
    "encode_priority",
    "init",
    "init_tcp",
    "init_udp",
    "is_registered",
    "max_level",
    "tcp",
    "udp",
]
