"""Datagram and stream transports."""

from __future__ import annotations

from ._resolve import Address, parse_address
from .tcp import DEFAULT_BUFFER_SIZE, Framing, TcpTransport, connect_tcp
from .udp import UdpTransport, connect_udp

__all__ = [
    "Address",
    "DEFAULT_BUFFER_SIZE",
    "Framing",
    "TcpTransport",
    "UdpTransport",
    "connect_tcp",
    "connect_udp",
    "parse_address",
]
