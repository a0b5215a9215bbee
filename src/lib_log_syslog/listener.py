"""Minimal collector loops behind ``lib_log_syslog listen``.

Purpose
-------
Receive frames on a bound socket and hand each one to a
:class:`~lib_log_syslog.adapters.console.RichFrameConsole`, so senders can be
checked end to end without a real syslog daemon.

Contents
--------
* :func:`serve_udp` - one frame per datagram.
* :func:`serve_tcp` - accept connections sequentially and split frames with
  the configured :class:`Framing`.
"""

from __future__ import annotations

import logging
import socket

from lib_log_syslog.adapters.console import RichFrameConsole
from lib_log_syslog.adapters.transports import Framing

logger = logging.getLogger(__name__)

_RECV_SIZE = 65535


def serve_udp(sock: socket.socket, console: RichFrameConsole, *, count: int = 0) -> int:
    """Print datagrams received on ``sock``; stop after ``count`` frames (``0`` = forever).

    Returns the number of frames printed.
    """

    received = 0
    while count == 0 or received < count:
        data, peer = sock.recvfrom(_RECV_SIZE)
        console.emit(data, source=f"{peer[0]}:{peer[1]}")
        received += 1
    return received


def serve_tcp(
    sock: socket.socket,
    console: RichFrameConsole,
    *,
    count: int = 0,
    framing: Framing = Framing.NONE,
) -> int:
    """Accept connections on the listening ``sock`` and print every frame they carry."""

    received = 0
    while count == 0 or received < count:
        conn, peer = sock.accept()
        source = f"{peer[0]}:{peer[1]}"
        logger.debug("accepted syslog connection from %s", source)
        with conn:
            pending = b""
            while count == 0 or received < count:
                chunk = conn.recv(_RECV_SIZE)
                if not chunk:
                    break
                frames, pending = framing.split(pending + chunk)
                for frame in frames:
                    console.emit(frame, source=source)
                    received += 1
            if pending and (count == 0 or received < count):
                console.emit(pending, source=source)
                received += 1
    return received


__all__ = ["serve_tcp", "serve_udp"]
