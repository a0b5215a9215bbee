"""Transport port describing the shared write/flush contract.

Purpose
-------
Let the dispatcher write rendered frames without knowing whether they travel
as datagrams or over a buffered stream.

Contents
--------
* :class:`TransportPort` - runtime-checkable protocol.

System Role
-----------
Implemented by :class:`~lib_log_syslog.adapters.transports.udp.UdpTransport`
and :class:`~lib_log_syslog.adapters.transports.tcp.TcpTransport`. Every
method may raise :class:`OSError`; nothing is retried.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Deliver rendered frames to the remote collector."""

    def write(self, data: bytes) -> int:
        """Accept ``data`` as one message and return the number of bytes taken."""

    def flush(self) -> None:
        """Push buffered bytes to the peer (no-op for unbuffered transports)."""

    def close(self) -> None:
        """Release the underlying socket."""


__all__ = ["TransportPort"]
