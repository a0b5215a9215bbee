from __future__ import annotations

import logging
import socket
import threading
import time
from collections.abc import Iterator
from typing import Any

import pytest

from lib_log_syslog.adapters.formatters import Formatter3164
from lib_log_syslog.adapters.logging_handler import SyslogHandler
from lib_log_syslog.adapters.transports import connect_udp
from lib_log_syslog.application.logger import Logger
from lib_log_syslog.domain.config import FormatterConfig
from lib_log_syslog.domain.facility import Facility
from lib_log_syslog.domain.levels import TRACE, LogLevel
from lib_log_syslog.domain.severity import Severity
from lib_log_syslog.errors import LockPoisonedError
from tests.helpers import EchoFormatter, RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def events() -> list[tuple[str, dict[str, Any]]]:
    return []


@pytest.fixture
def handler(transport: RecordingTransport, events: list[tuple[str, dict[str, Any]]]) -> SyslogHandler:
    return SyslogHandler(
        Logger(transport, EchoFormatter()),
        max_level=lambda: LogLevel.TRACE,
        diagnostic=lambda event, payload: events.append((event, payload)),
    )


@pytest.fixture
def app_logger(handler: SyslogHandler) -> Iterator[logging.Logger]:
    log = logging.getLogger("tests.syslog_handler")
    log.propagate = False
    log.setLevel(TRACE)
    log.addHandler(handler)
    try:
        yield log
    finally:
        log.removeHandler(handler)


@pytest.mark.parametrize(
    ("python_level", "severity"),
    [
        (TRACE, Severity.DEBUG),
        (logging.DEBUG, Severity.DEBUG),
        (logging.INFO, Severity.INFO),
        (logging.WARNING, Severity.WARNING),
        (logging.ERROR, Severity.ERR),
        (logging.CRITICAL, Severity.CRIT),
    ],
)
def test_facade_levels_map_to_severities(
    app_logger: logging.Logger,
    transport: RecordingTransport,
    python_level: int,
    severity: Severity,
) -> None:
    app_logger.log(python_level, "payload")
    assert transport.frames == [f"{severity.name}:payload".encode()]


def test_records_are_formatted_with_the_handler_formatter(
    app_logger: logging.Logger, handler: SyslogHandler, transport: RecordingTransport
) -> None:
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))
    app_logger.info("user %s logged in", "ada")
    assert transport.frames == [b"INFO:tests.syslog_handler user ada logged in"]


def test_enabled_compares_against_the_process_maximum() -> None:
    threshold = [LogLevel.WARNING]
    handler = SyslogHandler(Logger(RecordingTransport(), EchoFormatter()), max_level=lambda: threshold[0])

    assert not handler.enabled(LogLevel.INFO)
    assert handler.enabled(LogLevel.WARNING)
    assert handler.enabled(logging.ERROR)
    threshold[0] = LogLevel.TRACE
    assert handler.enabled(LogLevel.TRACE)


def test_default_maximum_follows_the_root_logger(isolated_registration: None) -> None:
    handler = SyslogHandler(Logger(RecordingTransport(), EchoFormatter()))
    logging.getLogger().setLevel(logging.ERROR)
    assert not handler.enabled(LogLevel.WARNING)
    assert handler.enabled(LogLevel.CRITICAL)


def test_records_below_the_maximum_are_dropped(transport: RecordingTransport) -> None:
    handler = SyslogHandler(Logger(transport, EchoFormatter()), max_level=lambda: LogLevel.ERROR)
    handler.handle(logging.makeLogRecord({"levelno": logging.INFO, "msg": "quiet"}))
    assert transport.frames == []


def test_write_errors_are_discarded_and_reported(
    app_logger: logging.Logger,
    transport: RecordingTransport,
    handler: SyslogHandler,
    events: list[tuple[str, dict[str, Any]]],
) -> None:
    transport.fail_with = ConnectionRefusedError("collector down")

    app_logger.error("first")
    app_logger.error("second")

    assert [event for event, _ in events] == ["write_failed", "write_failed"]
    assert events[0][1]["level"] == "ERROR"
    assert "collector down" in events[0][1]["error"]
    assert not handler.poisoned


def test_flush_is_attempted_and_its_outcome_discarded(
    handler: SyslogHandler, transport: RecordingTransport, events: list[tuple[str, dict[str, Any]]]
) -> None:
    handler.flush()
    transport.fail_with = BrokenPipeError("gone")
    handler.flush()

    assert transport.flushes == 2
    assert [event for event, _ in events] == ["flush_failed"]


def test_close_closes_the_transport(handler: SyslogHandler, transport: RecordingTransport) -> None:
    handler.close()
    assert transport.closed


def test_non_io_failure_poisons_the_handler(transport: RecordingTransport) -> None:
    class ExplodingFormatter(EchoFormatter):
        def render(self, severity: Severity, message: object) -> bytes:
            raise ZeroDivisionError("formatter bug")

    handler = SyslogHandler(Logger(transport, ExplodingFormatter()), max_level=lambda: LogLevel.TRACE)
    record = logging.makeLogRecord({"levelno": logging.ERROR, "msg": "boom"})

    with pytest.raises(ZeroDivisionError):
        handler.emit(record)
    assert handler.poisoned

    with pytest.raises(LockPoisonedError):
        handler.emit(record)
    with pytest.raises(LockPoisonedError):
        handler.flush()


def test_poisoning_is_fatal_for_other_threads(transport: RecordingTransport) -> None:
    transport.fail_with = KeyError("corrupt")
    handler = SyslogHandler(Logger(transport, EchoFormatter()), max_level=lambda: LogLevel.TRACE)
    record = logging.makeLogRecord({"levelno": logging.WARNING, "msg": "x"})
    with pytest.raises(KeyError):
        handler.emit(record)

    errors: list[BaseException] = []

    def worker() -> None:
        try:
            handler.emit(record)
        except BaseException as exc:
            errors.append(exc)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join(timeout=5)
    assert len(errors) == 1
    assert isinstance(errors[0], LockPoisonedError)


def test_concurrent_records_are_written_one_at_a_time() -> None:
    class SlowTransport(RecordingTransport):
        def __init__(self) -> None:
            super().__init__()
            self.active = 0
            self.peak = 0
            self._guard = threading.Lock()

        def write(self, data: bytes) -> int:
            with self._guard:
                self.active += 1
                self.peak = max(self.peak, self.active)
            time.sleep(0.001)
            with self._guard:
                self.active -= 1
            return super().write(data)

    transport = SlowTransport()
    handler = SyslogHandler(Logger(transport, EchoFormatter()), max_level=lambda: LogLevel.TRACE)

    def worker(index: int) -> None:
        for count in range(20):
            handler.emit(logging.makeLogRecord({"levelno": logging.INFO, "msg": f"{index}-{count}"}))

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert len(transport.frames) == 80
    assert transport.peak == 1


def test_surrogate_text_is_sent_without_poisoning(udp_collector: socket.socket) -> None:
    formatter = Formatter3164(FormatterConfig(Facility.USER, None, "app", 0))
    transport = connect_udp(("127.0.0.1", 0), udp_collector.getsockname())
    handler = SyslogHandler(Logger(transport, formatter), max_level=lambda: LogLevel.TRACE)
    try:
        handler.emit(logging.makeLogRecord({"levelno": logging.ERROR, "msg": "file %s", "args": ("caf\udce9",)}))
        handler.emit(logging.makeLogRecord({"levelno": logging.INFO, "msg": "next"}))
    finally:
        handler.close()

    assert not handler.poisoned
    assert udp_collector.recv(1024).endswith(b"app[0]: file caf\\udce9")
    assert udp_collector.recv(1024).endswith(b"app[0]: next")
