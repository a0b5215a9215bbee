"""Application layer: ports and the severity dispatcher."""

from __future__ import annotations

from .logger import Logger

__all__ = ["Logger"]
