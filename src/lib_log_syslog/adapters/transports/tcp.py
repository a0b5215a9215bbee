"""Connection-oriented transport with application-level buffering.

Purpose
-------
Deliver frames over a TCP stream. Writes accumulate in a bounded buffer and
reach the collector only when it overflows, on :meth:`TcpTransport.flush`,
or on :meth:`TcpTransport.close`.

Contents
--------
* :class:`Framing` - optional RFC 6587 framing of each frame.
* :class:`TcpTransport` - buffered :class:`TransportPort`.
* :func:`connect_tcp` - resolve, connect, and build the transport.

System Role
-----------
Teardown is explicit: ``close`` flushes before closing the socket, but an
unclosed transport that is garbage-collected does not flush.
"""

from __future__ import annotations

import logging
import socket
from enum import Enum

from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.errors import InitializationError

from ._resolve import Address, resolve_first

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 8192


class Framing(Enum):
    """How frames are delimited on the stream (RFC 6587)."""

    NONE = "none"
    OCTET_COUNTING = "octet-counting"
    NEWLINE = "newline"

    def apply(self, data: bytes) -> bytes:
        """Return ``data`` wrapped according to this framing.

        Examples
        --------
        >>> Framing.OCTET_COUNTING.apply(b"<11>hi")
        b'6 <11>hi'
        >>> Framing.NEWLINE.apply(b"<11>hi")
        b'<11>hi\\n'
        """
        if self is Framing.OCTET_COUNTING:
            return str(len(data)).encode("ascii") + b" " + data
        if self is Framing.NEWLINE:
            return data + b"\n"
        return data

    def split(self, buffer: bytes) -> tuple[list[bytes], bytes]:
        """Cut complete frames off the front of ``buffer``; return them and the remainder.

        Without framing every chunk is one frame.

        Examples
        --------
        >>> Framing.OCTET_COUNTING.split(b"3 abc2 de4 fg")
        ([b'abc', b'de'], b'4 fg')
        >>> Framing.NEWLINE.split(b"one\\ntwo\\nthr")
        ([b'one', b'two'], b'thr')
        """
        if self is Framing.NEWLINE:
            *complete, rest = buffer.split(b"\n")
            return [frame for frame in complete if frame], rest
        if self is Framing.OCTET_COUNTING:
            frames: list[bytes] = []
            while True:
                length, sep, tail = buffer.partition(b" ")
                if not sep or not length.isdigit() or len(tail) < int(length):
                    return frames, buffer
                size = int(length)
                frames.append(tail[:size])
                buffer = tail[size:]
        return ([buffer] if buffer else []), b""

    @classmethod
    def from_name(cls, name: str) -> "Framing":
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown framing: {name!r}") from exc


class TcpTransport(TransportPort):
    """Buffer writes and push them to a connected stream on flush."""

    def __init__(
        self,
        sock: socket.socket,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        framing: Framing = Framing.NONE,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._socket = sock
        self._buffer = bytearray()
        self._buffer_size = buffer_size
        self._closed = False
        self.framing = framing

    @property
    def pending(self) -> int:
        """Number of bytes accepted but not yet handed to the socket."""
        return len(self._buffer)

    def write(self, data: bytes) -> int:
        """Buffer ``data`` as one frame, flushing first when it would overflow.

        Frames at least as large as the buffer bypass it after the pending
        bytes are flushed, keeping frame order intact.
        """
        if self._closed:
            raise OSError("write to closed TCP transport")
        frame = self.framing.apply(data)
        if len(self._buffer) + len(frame) > self._buffer_size:
            self._flush_buffer()
        if len(frame) >= self._buffer_size:
            self._socket.sendall(frame)
        else:
            self._buffer.extend(frame)
        return len(data)

    def flush(self) -> None:
        """Send all buffered bytes; the first socket error is raised.

        Bytes taken from the buffer for a failed send are dropped, not retried.
        """
        if self._closed:
            return
        self._flush_buffer()

    def close(self) -> None:
        """Flush pending bytes, then close the socket even if the flush fails."""
        if self._closed:
            return
        try:
            self._flush_buffer()
        finally:
            self._closed = True
            self._socket.close()

    def _flush_buffer(self) -> None:
        if not self._buffer:
            return
        data = bytes(self._buffer)
        self._buffer.clear()
        self._socket.sendall(data)

    def __repr__(self) -> str:
        return f"TcpTransport(framing={self.framing.value!r}, pending={self.pending})"


def connect_tcp(
    server: Address,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    framing: Framing = Framing.NONE,
) -> TcpTransport:
    """Connect to the first resolved address of ``server``.

    Raises
    ------
    InitializationError
        When ``server`` does not resolve or the connection is refused.
    """

    family, peer = resolve_first(server, socket.SOCK_STREAM)
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.connect(peer)
    except OSError as exc:
        sock.close()
        raise InitializationError(f"Could not connect to syslog collector {peer!r}: {exc}") from exc
    logger.debug("TCP syslog transport connected to %s", peer)
    return TcpTransport(sock, buffer_size=buffer_size, framing=framing)


__all__ = ["DEFAULT_BUFFER_SIZE", "Framing", "TcpTransport", "connect_tcp"]
