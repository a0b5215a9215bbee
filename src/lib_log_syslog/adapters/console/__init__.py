"""Terminal renderers."""

from __future__ import annotations

from .rich_console import RichFrameConsole, parse_priority

__all__ = ["RichFrameConsole", "parse_priority"]
