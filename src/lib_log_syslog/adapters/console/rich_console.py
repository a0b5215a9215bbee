"""Rich-powered console renderer for received syslog frames.

Purpose
-------
Show frames captured by ``lib_log_syslog listen`` with a colour per severity,
so operators can eyeball what a collector would receive.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :func:`parse_priority` - extract facility and severity from a frame.
* :class:`RichFrameConsole` - prints frames through a Rich console.
"""

from __future__ import annotations

import re
from typing import Mapping, MutableMapping

from rich.console import Console

from lib_log_syslog.domain.facility import Facility
from lib_log_syslog.domain.severity import Severity

#: Default Rich styles keyed by :class:`Severity`.
_STYLE_MAP: Mapping[Severity, str] = {
    Severity.EMERG: "bold white on red",
    Severity.ALERT: "bold red",
    Severity.CRIT: "bold red",
    Severity.ERR: "red",
    Severity.WARNING: "yellow",
    Severity.NOTICE: "green",
    Severity.INFO: "cyan",
    Severity.DEBUG: "dim",
}

_PRI_RE = re.compile(rb"^(?:\d+ )?<(\d{1,3})>")


def parse_priority(frame: bytes) -> tuple[Facility, Severity] | None:
    """Return ``(facility, severity)`` encoded in ``frame`` or ``None`` if absent.

    An RFC 6587 octet count in front of the ``PRI`` is skipped.

    Examples
    --------
    >>> parse_priority(b"<11>Mar  5 07:08:09 localhost app[0]: hi")
    (<Facility.USER: 1>, <Severity.ERR: 3>)
    >>> parse_priority(b"no header") is None
    True
    """

    match = _PRI_RE.match(frame)
    if match is None:
        return None
    value = int(match.group(1))
    if value > 191:
        return None
    return Facility(value // 8), Severity(value % 8)


class RichFrameConsole:
    """Render raw frames with severity-based styling."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        no_color: bool = False,
        styles: MutableMapping[Severity | str, str] | None = None,
    ) -> None:
        self._console = console if console is not None else Console(no_color=no_color, highlight=False)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            severity = Severity.from_name(key) if isinstance(key, str) else key
            merged[severity] = value
        self._style_map = merged

    def emit(self, frame: bytes, *, source: str = "") -> None:
        """Print ``frame`` decoded as UTF-8, styled by its severity.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichFrameConsole(console=console).emit(b"<14>Mar  5 07:08:09 localhost app[0]: hi")
        >>> "user.info" in console.export_text()
        True
        """
        priority = parse_priority(frame)
        text = frame.decode("utf-8", errors="replace")
        if priority is None:
            label = "?"
            style = ""
        else:
            facility, severity = priority
            label = f"{facility.name.lower()}.{severity.keyword}"
            style = "" if self._no_color else self._style_map.get(severity, "")
        prefix = f"{source} " if source else ""
        self._console.print(f"{prefix}{label:<14} {text}", style=style, highlight=False, markup=False)


__all__ = ["RichFrameConsole", "parse_priority"]
