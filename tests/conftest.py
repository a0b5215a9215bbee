from __future__ import annotations

import logging
import socket
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_syslog.runtime import _state

from tests.helpers import FixedClock, TcpCollector


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 5, 7, 8, 9, 250000, tzinfo=timezone(timedelta(hours=2))))


@pytest.fixture
def isolated_registration() -> Iterator[None]:
    """Reset the process-wide slot and the root logger around a test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    _state._reset_for_testing()
    try:
        yield
    finally:
        previous = _state._reset_for_testing()
        if previous is not None:
            root.removeHandler(previous.handler)
            previous.handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def tcp_collector() -> Iterator[TcpCollector]:
    collector = TcpCollector()
    try:
        yield collector
    finally:
        collector.close()


@pytest.fixture
def udp_collector() -> Iterator[socket.socket]:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    try:
        yield sock
    finally:
        sock.close()
