from __future__ import annotations

import socket
import threading
from io import StringIO

from rich.console import Console

from lib_log_syslog.adapters.console import RichFrameConsole
from lib_log_syslog.adapters.transports import Framing
from lib_log_syslog.listener import serve_tcp, serve_udp


def _console() -> tuple[RichFrameConsole, Console]:
    console = Console(file=StringIO(), record=True, width=200)
    return RichFrameConsole(console=console, no_color=True), console


def test_serve_udp_prints_each_datagram(udp_collector: socket.socket) -> None:
    frames, console = _console()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        sender.sendto(b"<11>first", udp_collector.getsockname())
        sender.sendto(b"<12>second", udp_collector.getsockname())

    assert serve_udp(udp_collector, frames, count=2) == 2
    text = console.export_text()
    assert "user.err" in text and "<11>first" in text
    assert "user.warning" in text and "<12>second" in text


def test_serve_tcp_splits_octet_counted_frames() -> None:
    frames, console = _console()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen(1)

        def send() -> None:
            with socket.create_connection(server.getsockname()) as client:
                client.sendall(Framing.OCTET_COUNTING.apply(b"<14>one") + Framing.OCTET_COUNTING.apply(b"<15>two"))

        thread = threading.Thread(target=send)
        thread.start()
        received = serve_tcp(server, frames, count=2, framing=Framing.OCTET_COUNTING)
        thread.join(timeout=5)

    assert received == 2
    text = console.export_text()
    assert "user.info" in text and "<14>one" in text
    assert "user.debug" in text and "<15>two" in text


def test_serve_tcp_prints_trailing_unframed_bytes() -> None:
    frames, console = _console()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen(1)

        def send() -> None:
            with socket.create_connection(server.getsockname()) as client:
                client.sendall(b"<13>a\n<13>tail")

        thread = threading.Thread(target=send)
        thread.start()
        received = serve_tcp(server, frames, count=2, framing=Framing.NEWLINE)
        thread.join(timeout=5)

    assert received == 2
    assert "<13>tail" in console.export_text()
