"""Severity dispatcher pairing one formatter with one transport.

Purpose
-------
Expose one method per syslog severity. Each call renders the message through
the configured formatter and writes the frame through the owned transport.

Contents
--------
* :class:`Logger` - the dispatcher.

System Role
-----------
The direct, error-propagating API of the package. It performs no locking;
share it between threads only through
:class:`~lib_log_syslog.adapters.logging_handler.SyslogHandler`, which
serialises access.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Generic, TypeVar

from lib_log_syslog.application.ports import FormatterPort, TransportPort
from lib_log_syslog.domain.severity import Severity

TransportT = TypeVar("TransportT", bound=TransportPort)
FormatterT = TypeVar("FormatterT", bound=FormatterPort)


class Logger(Generic[TransportT, FormatterT]):
    """Route severity-tagged calls to ``formatter`` and write through ``transport``.

    Write failures are raised as the transport's :class:`OSError`; the
    message is not retried or repaired.
    """

    def __init__(self, transport: TransportT, formatter: FormatterT) -> None:
        self.transport = transport
        self.formatter = formatter

    def log(self, severity: Severity, message: Any) -> None:
        """Render ``message`` at ``severity`` and write it as a single frame.

        Parameters
        ----------
        severity:
            Syslog severity combined with the formatter's facility.
        message:
            Any value the formatter accepts; both formatters take anything
            convertible with :class:`str`, and the RFC 5424 formatter also
            takes ``(msg_id, structured_data, text)`` triples.

        Raises
        ------
        OSError
            When the transport rejects the write.
        """
        frame = self.formatter.render(Severity(severity), message)
        self.transport.write(frame)

    def emerg(self, message: Any) -> None:
        """Send ``message`` with severity ``emerg`` (system is unusable)."""
        self.log(Severity.EMERG, message)

    def alert(self, message: Any) -> None:
        """Send ``message`` with severity ``alert`` (action must be taken immediately)."""
        self.log(Severity.ALERT, message)

    def crit(self, message: Any) -> None:
        """Send ``message`` with severity ``crit``."""
        self.log(Severity.CRIT, message)

    def err(self, message: Any) -> None:
        """Send ``message`` with severity ``err``."""
        self.log(Severity.ERR, message)

    def warning(self, message: Any) -> None:
        """Send ``message`` with severity ``warning``."""
        self.log(Severity.WARNING, message)

    def notice(self, message: Any) -> None:
        """Send ``message`` with severity ``notice`` (normal but significant)."""
        self.log(Severity.NOTICE, message)

    def info(self, message: Any) -> None:
        """Send ``message`` with severity ``info``."""
        self.log(Severity.INFO, message)

    def debug(self, message: Any) -> None:
        """Send ``message`` with severity ``debug``."""
        self.log(Severity.DEBUG, message)

    emergency = emerg
    critical = crit
    error = err

    def flush(self) -> None:
        """Flush the transport, raising :class:`OSError` on failure."""
        self.transport.flush()

    def close(self) -> None:
        """Flush and close the transport; see :meth:`TcpTransport.close`."""
        self.transport.close()

    def __enter__(self) -> "Logger[TransportT, FormatterT]":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["Logger"]
