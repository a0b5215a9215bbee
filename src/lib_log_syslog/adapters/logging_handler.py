"""Bridge from :mod:`logging` into a syslog :class:`Logger`.

Purpose
-------
Let any code that logs through the standard library deliver its records to a
syslog collector, with all threads sharing one transport.

Contents
--------
* :data:`DiagnosticHook` - optional callback receiving discarded failures.
* :class:`SyslogHandler` - :class:`logging.Handler` wrapping one dispatcher.

System Role
-----------
The only component designed for concurrent use. Every write and flush runs
under one mutex, so at most one frame is in flight. The :mod:`logging`
contract has no error channel, so transport :class:`OSError`s are discarded
(after being offered to the diagnostic hook). Any other exception raised
while the mutex is held poisons the handler: it propagates to that caller and
every later caller receives :class:`LockPoisonedError`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Optional

from lib_log_syslog.application.logger import Logger
from lib_log_syslog.domain.levels import LogLevel
from lib_log_syslog.errors import LockPoisonedError

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


def _process_max_level() -> LogLevel:
    """Return the process-wide threshold: the root logger's effective level."""

    return LogLevel.from_python_level(logging.getLogger().getEffectiveLevel())


class SyslogHandler(logging.Handler):
    """Serialise :mod:`logging` records into one shared syslog :class:`Logger`."""

    def __init__(
        self,
        logger: Logger[Any, Any],
        *,
        max_level: Callable[[], LogLevel] = _process_max_level,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        """Wrap ``logger``; ``max_level`` supplies the threshold used by :meth:`enabled`."""
        super().__init__()
        self._logger = logger
        self._mutex = threading.Lock()
        self._poisoned = False
        self._max_level = max_level
        self._diagnostic = diagnostic

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def enabled(self, level: LogLevel | int) -> bool:
        """Return ``True`` when ``level`` is at or above the process-wide maximum level.

        Examples
        --------
        >>> handler = SyslogHandler(None, max_level=lambda: LogLevel.INFO)  # type: ignore[arg-type]
        >>> handler.enabled(LogLevel.DEBUG), handler.enabled(LogLevel.INFO), handler.enabled(LogLevel.ERROR)
        (False, True, True)
        """
        resolved = level if isinstance(level, LogLevel) else LogLevel.from_python_level(level)
        return resolved.value >= self._max_level().value

    def emit(self, record: logging.LogRecord) -> None:
        """Format ``record`` and send it with the severity mapped from its level."""
        level = LogLevel.from_python_level(record.levelno)
        if not self.enabled(level):
            return
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        failure: OSError | None = None
        with self._exclusive() as logger:
            try:
                logger.log(level.severity, message)
            except OSError as exc:
                failure = exc
        if failure is not None:
            self._report("write_failed", {"level": level.name, "logger": record.name, "error": repr(failure)})

    def flush(self) -> None:
        """Attempt a transport flush; its outcome is not reported to the caller."""
        failure: OSError | None = None
        with self._exclusive() as logger:
            try:
                logger.flush()
            except OSError as exc:
                failure = exc
        if failure is not None:
            self._report("flush_failed", {"error": repr(failure)})

    def close(self) -> None:
        """Flush and close the wrapped transport, then deregister the handler."""
        failure: OSError | None = None
        try:
            with self._exclusive() as logger:
                try:
                    logger.close()
                except OSError as exc:
                    failure = exc
        finally:
            super().close()
        if failure is not None:
            self._report("close_failed", {"error": repr(failure)})

    @contextmanager
    def _exclusive(self) -> Iterator[Logger[Any, Any]]:
        with self._mutex:
            if self._poisoned:
                raise LockPoisonedError("syslog handler lock poisoned by an earlier failure")
            try:
                yield self._logger
            except OSError:
                raise
            except BaseException:
                self._poisoned = True
                raise

    def _report(self, event: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is None:
            return
        self._diagnostic(event, payload)


__all__ = ["DiagnosticHook", "SyslogHandler"]
