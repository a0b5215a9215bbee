from __future__ import annotations

import logging

import pytest

from lib_log_syslog.domain.levels import TRACE, LogLevel
from lib_log_syslog.domain.severity import Severity


@pytest.mark.parametrize(
    "level, severity",
    [
        (LogLevel.ERROR, Severity.ERR),
        (LogLevel.WARNING, Severity.WARNING),
        (LogLevel.INFO, Severity.INFO),
        (LogLevel.DEBUG, Severity.DEBUG),
        (LogLevel.TRACE, Severity.DEBUG),
        (LogLevel.CRITICAL, Severity.CRIT),
    ],
)
def test_level_maps_to_severity(level: LogLevel, severity: Severity) -> None:
    assert level.severity is severity


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", LogLevel.TRACE),
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize(
    "number, expected",
    [
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (25, LogLevel.INFO),
        (logging.ERROR, LogLevel.ERROR),
        (99, LogLevel.CRITICAL),
        (TRACE, LogLevel.TRACE),
        (1, LogLevel.TRACE),
    ],
)
def test_from_python_level_rounds_down(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(number) is expected


@pytest.mark.parametrize("number", [0, 15, 45])
def test_from_numeric_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(number)


def test_trace_level_is_registered_with_logging() -> None:
    assert logging.getLevelName(TRACE) == "TRACE"
    assert LogLevel.TRACE.to_python_level() == TRACE
