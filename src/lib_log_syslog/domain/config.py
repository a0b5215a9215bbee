"""Formatter configuration shared by both wire formats."""

from __future__ import annotations

from dataclasses import dataclass

from .facility import Facility


@dataclass(slots=True, frozen=True)
class FormatterConfig:
    """Identity fields stamped into every rendered header.

    Attributes
    ----------
    facility:
        :class:`Facility` combined with the per-call severity into ``PRI``.
    hostname:
        Originating host; ``None`` makes each formatter emit its own
        placeholder (``localhost`` for RFC 3164, ``-`` for RFC 5424).
    process:
        Process or application name; may be empty.
    pid:
        Process identifier, rendered literally (``0`` included).
    """

    facility: Facility = Facility.USER
    hostname: str | None = None
    process: str = ""
    pid: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "facility", Facility(self.facility))
        if self.pid < 0:
            raise ValueError("pid must not be negative")


__all__ = ["FormatterConfig"]
