"""Runtime façade: logger constructors and process-wide registration.

Purpose
-------
Expose the entry points host applications use (``udp``, ``tcp``, ``init``,
``init_udp``, ``init_tcp``) instead of wiring adapters by hand.

Contents
--------
* ``udp`` / ``tcp`` - build a :class:`Logger` over a freshly opened transport.
* ``init`` - register a :class:`SyslogHandler` on the root logger, once.
* ``init_udp`` / ``init_tcp`` - one-call setup with an RFC 3164 formatter.
* ``max_level`` / ``current_handler`` - inspect the registration.

System Role
-----------
Outer shell of the package. Initialization failures (resolution, bind,
connect, double registration) surface here as
:class:`~lib_log_syslog.errors.InitializationError`.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from lib_log_syslog.adapters.formatters import Formatter3164, Formatter5424
from lib_log_syslog.adapters.logging_handler import DiagnosticHook, SyslogHandler
from lib_log_syslog.adapters.transports import (
    DEFAULT_BUFFER_SIZE,
    Address,
    Framing,
    TcpTransport,
    UdpTransport,
    connect_tcp,
    connect_udp,
)
from lib_log_syslog.application.logger import Logger
from lib_log_syslog.application.ports import FormatterPort
from lib_log_syslog.config import SyslogSettings
from lib_log_syslog.domain import Facility, FormatterConfig, LogLevel
from lib_log_syslog.errors import InitializationError

from ._state import Registration, current_registration, is_registered, register

__all__ = [
    "build_logger",
    "coerce_level",
    "current_handler",
    "init",
    "init_from_settings",
    "init_tcp",
    "init_udp",
    "is_registered",
    "max_level",
    "tcp",
    "udp",
]


def udp(formatter: FormatterPort, local: Address, server: Address) -> Logger[UdpTransport, Any]:
    """Return a :class:`Logger` sending datagrams from ``local`` to ``server``.

    Raises
    ------
    InitializationError
        When ``server`` does not resolve or ``local`` cannot be bound.
    """

    return Logger(connect_udp(local, server), formatter)


def tcp(
    formatter: FormatterPort,
    server: Address,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    framing: Framing = Framing.NONE,
) -> Logger[TcpTransport, Any]:
    """Return a :class:`Logger` writing to a buffered TCP connection to ``server``.

    Callers must invoke :meth:`Logger.flush` (or :meth:`Logger.close`) for
    buffered frames to be sent.

    Raises
    ------
    InitializationError
        When ``server`` does not resolve or refuses the connection.
    """

    return Logger(connect_tcp(server, buffer_size=buffer_size, framing=framing), formatter)


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise level inputs (enum, name, or stdlib integer) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warn") is LogLevel.WARNING
    True
    >>> coerce_level(10) is LogLevel.DEBUG
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int):
        return LogLevel.from_python_level(level)
    return LogLevel.from_name(level)


def init(
    logger: Logger[Any, Any],
    level: str | int | LogLevel = LogLevel.INFO,
    *,
    diagnostic: DiagnosticHook = None,
) -> SyslogHandler:
    """Register ``logger`` as the process-wide :mod:`logging` sink.

    Why
    ---
    Library code keeps logging through :mod:`logging`; installing one
    :class:`SyslogHandler` on the root logger routes every record to the
    collector through a single, lock-guarded transport.

    Inputs
    ------
    logger:
        Dispatcher whose transport all threads will share.
    level:
        Maximum enabled level. It becomes the root logger level, which is what
        :meth:`SyslogHandler.enabled` consults.
    diagnostic:
        Optional hook receiving write/flush failures the handler discards.

    Side Effects
    ------------
    Adds a handler to the root logger and sets its level. Raises
    :class:`InitializationError` if a handler is already registered; the
    rejected ``logger`` is left open for the caller to close.
    """

    resolved = coerce_level(level)
    handler = SyslogHandler(logger, diagnostic=diagnostic)
    register(Registration(handler=handler, level=resolved))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(resolved.to_python_level())
    return handler


def init_udp(
    local: Address,
    server: Address,
    *,
    hostname: str | None = None,
    facility: Facility | str = Facility.USER,
    log_level: str | int | LogLevel = LogLevel.INFO,
    process: str | None = None,
    pid: int | None = None,
    diagnostic: DiagnosticHook = None,
) -> SyslogHandler:
    """Send :mod:`logging` records as RFC 3164 datagrams from ``local`` to ``server``."""

    _ensure_unregistered()
    formatter = Formatter3164(_build_config(hostname, facility, process, pid))
    logger = udp(formatter, local, server)
    return _install(logger, log_level, diagnostic)


def init_tcp(
    server: Address,
    *,
    hostname: str | None = None,
    facility: Facility | str = Facility.USER,
    log_level: str | int | LogLevel = LogLevel.INFO,
    process: str | None = None,
    pid: int | None = None,
    framing: Framing = Framing.NONE,
    diagnostic: DiagnosticHook = None,
) -> SyslogHandler:
    """Send :mod:`logging` records as RFC 3164 frames over TCP to ``server``."""

    _ensure_unregistered()
    formatter = Formatter3164(_build_config(hostname, facility, process, pid))
    logger = tcp(formatter, server, framing=framing)
    return _install(logger, log_level, diagnostic)


def build_logger(settings: SyslogSettings, *, pid: int | None = None) -> Logger[Any, Any]:
    """Open the transport and formatter described by ``settings``.

    Examples
    --------
    >>> from lib_log_syslog.config import SyslogSettings
    >>> logger = build_logger(SyslogSettings(host="127.0.0.1", port=5514, rfc="5424"), pid=0)
    >>> type(logger.formatter).__name__, type(logger.transport).__name__
    ('Formatter5424', 'UdpTransport')
    >>> logger.close()
    """

    config = _build_config(settings.hostname, settings.facility, settings.process, pid)
    formatter: FormatterPort = Formatter5424(config) if settings.rfc == "5424" else Formatter3164(config)
    if settings.protocol == "tcp":
        return tcp(formatter, settings.server, framing=settings.framing)
    return udp(formatter, settings.local, settings.server)


def init_from_settings(settings: SyslogSettings | None = None, *, diagnostic: DiagnosticHook = None) -> SyslogHandler:
    """Register a handler built from ``settings`` (default: :meth:`SyslogSettings.from_env`)."""

    _ensure_unregistered()
    resolved = settings if settings is not None else SyslogSettings.from_env()
    return _install(build_logger(resolved), resolved.level, diagnostic)


def max_level() -> LogLevel:
    """Return the maximum level configured at registration."""

    return current_registration().level


def current_handler() -> SyslogHandler:
    """Return the registered handler or raise :class:`RuntimeError`."""

    return current_registration().handler


def _ensure_unregistered() -> None:
    # Checked before opening sockets so a second call does not leak one.
    if is_registered():
        raise InitializationError("a syslog handler is already registered for this process")


def _install(logger: Logger[Any, Any], level: str | int | LogLevel, diagnostic: DiagnosticHook) -> SyslogHandler:
    try:
        return init(logger, level, diagnostic=diagnostic)
    except InitializationError:
        logger.close()
        raise


def _build_config(hostname: str | None, facility: Facility | str, process: str | None, pid: int | None) -> FormatterConfig:
    resolved_facility = facility if isinstance(facility, Facility) else Facility.from_name(facility)
    return FormatterConfig(
        facility=resolved_facility,
        hostname=hostname,
        process=process if process is not None else _default_process_name(),
        pid=pid if pid is not None else os.getpid(),
    )


def _default_process_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "python"
