"""Process-wide registration slot for the :mod:`logging` bridge.

The slot is written exactly once; a second registration raises
:class:`InitializationError` instead of replacing the first handler. There is
no public teardown path.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from lib_log_syslog.adapters.logging_handler import SyslogHandler
from lib_log_syslog.domain import LogLevel
from lib_log_syslog.errors import InitializationError


@dataclass(slots=True, frozen=True)
class Registration:
    """The installed handler and the maximum level configured with it."""

    handler: SyslogHandler
    level: LogLevel


_STATE: Registration | None = None
_STATE_LOCK = RLock()


def register(registration: Registration) -> None:
    """Install ``registration`` as the process-wide sink."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise InitializationError("a syslog handler is already registered for this process")
        _STATE = registration


def current_registration() -> Registration:
    """Return the active registration or raise when none exists."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_syslog.init() must be called before using the registered handler")
        return _STATE


def is_registered() -> bool:
    """Return ``True`` once a process-wide handler has been installed."""

    with _STATE_LOCK:
        return _STATE is not None


def _reset_for_testing() -> Registration | None:
    """Clear the slot and return the previous registration (test suites only)."""

    with _STATE_LOCK:
        global _STATE
        previous, _STATE = _STATE, None
        return previous


__all__ = ["Registration", "current_registration", "is_registered", "register"]
