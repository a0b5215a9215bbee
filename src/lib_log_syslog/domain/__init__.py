"""Domain value objects: facilities, severities, facade levels, payloads."""

from __future__ import annotations

from .config import FormatterConfig
from .facility import Facility
from .levels import TRACE, LogLevel
from .payload import StructuredData, StructuredPayload, coerce_payload
from .severity import Severity, encode_priority

__all__ = [
    "Facility",
    "FormatterConfig",
    "LogLevel",
    "Severity",
    "StructuredData",
    "StructuredPayload",
    "TRACE",
    "coerce_payload",
    "encode_priority",
]
