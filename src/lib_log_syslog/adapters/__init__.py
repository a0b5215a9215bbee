"""Concrete adapters: formatters, transports, the logging bridge, console output."""

from __future__ import annotations

from .clock import SystemClock
from .console import RichFrameConsole
from .formatters import Formatter3164, Formatter5424
from .logging_handler import DiagnosticHook, SyslogHandler
from .transports import Framing, TcpTransport, UdpTransport, connect_tcp, connect_udp

__all__ = [
    "DiagnosticHook",
    "Formatter3164",
    "Formatter5424",
    "Framing",
    "RichFrameConsole",
    "SyslogHandler",
    "SystemClock",
    "TcpTransport",
    "UdpTransport",
    "connect_tcp",
    "connect_udp",
]
