"""Formatter port rendering one message into wire bytes."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_log_syslog.domain.config import FormatterConfig
from lib_log_syslog.domain.severity import Severity


@runtime_checkable
class FormatterPort(Protocol):
    """Render ``message`` at ``severity`` into the exact byte layout of one RFC."""

    config: FormatterConfig

    def render(self, severity: Severity, message: Any) -> bytes:
        """Return the complete frame for ``message``."""


__all__ = ["FormatterPort"]
