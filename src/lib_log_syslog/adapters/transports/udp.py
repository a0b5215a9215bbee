"""Connectionless transport sending one datagram per message.

Purpose
-------
Deliver frames to a fixed collector address over UDP.

Contents
--------
* :class:`UdpTransport` - :class:`TransportPort` over a bound datagram socket.
* :func:`connect_udp` - resolve, bind, and build the transport.

System Role
-----------
``flush`` never performs I/O; every ``write`` is a single best-effort
``sendto`` whose failure surfaces as :class:`OSError`.
"""

from __future__ import annotations

import logging
import socket
from typing import Any

from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.errors import InitializationError

from ._resolve import Address, resolve_all, resolve_first

logger = logging.getLogger(__name__)


class UdpTransport(TransportPort):
    """Send each write as one datagram to ``peer``."""

    def __init__(self, sock: socket.socket, peer: Any) -> None:
        self._socket = sock
        self.peer = peer

    def write(self, data: bytes) -> int:
        """Send ``data`` as a single datagram.

        Raises
        ------
        OSError
            When the kernel rejects the datagram or accepts only part of it.
        """
        sent = self._socket.sendto(data, self.peer)
        if sent != len(data):
            raise OSError(f"partial datagram: sent {sent} of {len(data)} bytes")
        return sent

    def flush(self) -> None:
        """Nothing is buffered; always succeeds."""
        return None

    def close(self) -> None:
        self._socket.close()

    def __repr__(self) -> str:
        return f"UdpTransport(peer={self.peer!r})"


def connect_udp(local: Address, server: Address) -> UdpTransport:
    """Bind a datagram socket to ``local`` and target the first ``server`` address of the same family.

    The local address decides the family, so a wildcard IPv4 bind still
    reaches a collector whose name resolves to IPv6 first.

    Raises
    ------
    InitializationError
        When ``server`` has no address in the family of ``local`` or ``local``
        cannot be bound.
    """

    family, local_addr = resolve_first(local, socket.SOCK_DGRAM, passive=True)
    peer = next((addr for peer_family, addr in resolve_all(server, socket.SOCK_DGRAM) if peer_family == family), None)
    if peer is None:
        raise InitializationError(f"No address of {socket.AddressFamily(family).name} for {server!r}")
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.bind(local_addr)
    except OSError as exc:
        sock.close()
        raise InitializationError(f"Could not bind UDP socket to {local_addr!r}: {exc}") from exc
    logger.debug("UDP syslog transport bound to %s, peer %s", sock.getsockname(), peer)
    return UdpTransport(sock, peer)


__all__ = ["UdpTransport", "connect_udp"]
