"""Error taxonomy for the syslog client.

Purpose
-------
Name the failure kinds callers can act on without leaking socket details.

Contents
--------
* :class:`SyslogError` - common base class.
* :class:`InitializationError` - resolve/bind/connect failures and double
  registration of the process-wide handler.
* :class:`LockPoisonedError` - a previous holder of the facade lock failed
  mid-write; every later caller sees this error.

System Role
-----------
Write failures are deliberately *not* wrapped: :class:`~lib_log_syslog.application.logger.Logger`
lets the transport's :class:`OSError` propagate unchanged, while
:class:`~lib_log_syslog.adapters.logging_handler.SyslogHandler` discards it
because the :mod:`logging` contract has no error channel.
"""

from __future__ import annotations


class SyslogError(Exception):
    """Base class for all errors raised by :mod:`lib_log_syslog`."""


class InitializationError(SyslogError, RuntimeError):
    """Raised when a transport or the process-wide registration cannot be set up."""


class LockPoisonedError(SyslogError, RuntimeError):
    """Raised when the facade lock was poisoned by a failed holder."""


__all__ = ["InitializationError", "LockPoisonedError", "SyslogError"]
