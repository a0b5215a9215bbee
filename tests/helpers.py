"""Shared test doubles: clocks, in-memory ports and loopback collectors."""

from __future__ import annotations

import socket
import threading
import time
from datetime import datetime

from lib_log_syslog.domain.config import FormatterConfig
from lib_log_syslog.domain.severity import Severity


class FixedClock:
    """Clock returning a constant timestamp."""

    def __init__(self, ts: datetime) -> None:
        self.ts = ts

    def now(self) -> datetime:
        return self.ts


class TcpCollector:
    """Loopback TCP peer recording everything it receives."""

    def __init__(self) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(1)
        self.port = self._sock.getsockname()[1]
        self.chunks: list[bytes] = []
        self.closed = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    @property
    def address(self) -> tuple[str, int]:
        return "127.0.0.1", self.port

    @property
    def data(self) -> bytes:
        return b"".join(self.chunks)

    def _run(self) -> None:
        try:
            conn, _ = self._sock.accept()
        except OSError:
            self.closed.set()
            return
        with conn:
            while True:
                chunk = conn.recv(65535)
                if not chunk:
                    break
                self.chunks.append(chunk)
        self.closed.set()

    def wait_closed(self, timeout: float = 5.0) -> bytes:
        assert self.closed.wait(timeout), "peer did not observe connection close"
        return self.data

    def close(self) -> None:
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()
        self._thread.join(timeout=1)

    def wait_for(self, size: int, timeout: float = 5.0) -> bytes:
        """Block until at least ``size`` bytes arrived."""
        deadline = time.monotonic() + timeout
        while len(self.data) < size:
            assert time.monotonic() < deadline, f"received only {self.data!r}"
            time.sleep(0.01)
        return self.data


class RecordingTransport:
    """In-memory transport; ``fail_with`` makes every call raise."""

    def __init__(self, fail_with: BaseException | None = None) -> None:
        self.frames: list[bytes] = []
        self.flushes = 0
        self.closed = False
        self.fail_with = fail_with

    def write(self, data: bytes) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self.frames.append(data)
        return len(data)

    def flush(self) -> None:
        self.flushes += 1
        if self.fail_with is not None:
            raise self.fail_with

    def close(self) -> None:
        self.closed = True
        if self.fail_with is not None:
            raise self.fail_with


class EchoFormatter:
    """Render ``SEVERITY:message`` so tests can see which method ran."""

    def __init__(self) -> None:
        self.config = FormatterConfig()

    def render(self, severity: Severity, message: object) -> bytes:
        return f"{severity.name}:{message}".encode()
