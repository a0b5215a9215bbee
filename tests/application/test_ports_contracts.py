from __future__ import annotations

import socket

from lib_log_syslog.adapters.clock import SystemClock
from lib_log_syslog.adapters.formatters import Formatter3164, Formatter5424
from lib_log_syslog.adapters.transports import TcpTransport, UdpTransport
from lib_log_syslog.application.ports import ClockPort, FormatterPort, TransportPort
from lib_log_syslog.domain.config import FormatterConfig


def test_formatters_satisfy_the_formatter_port() -> None:
    config = FormatterConfig()
    assert isinstance(Formatter3164(config), FormatterPort)
    assert isinstance(Formatter5424(config), FormatterPort)


def test_transports_satisfy_the_transport_port() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        assert isinstance(UdpTransport(sock, ("127.0.0.1", 514)), TransportPort)
        assert isinstance(TcpTransport(sock), TransportPort)


def test_system_clock_is_timezone_aware() -> None:
    clock = SystemClock()
    assert isinstance(clock, ClockPort)
    assert clock.now().tzinfo is not None
