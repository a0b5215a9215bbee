"""System clock adapter implementing :class:`ClockPort`."""

from __future__ import annotations

from datetime import datetime

from lib_log_syslog.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Return the current wall-clock time in the host's local timezone."""

    def now(self) -> datetime:
        """Return a timezone-aware local timestamp."""
        return datetime.now().astimezone()


__all__ = ["SystemClock"]
