"""Wire-format renderers for RFC 3164 and RFC 5424."""

from __future__ import annotations

from .rfc3164 import FALLBACK_HOSTNAME, Formatter3164
from .rfc5424 import NILVALUE, Formatter5424, format_structured_data

__all__ = ["FALLBACK_HOSTNAME", "Formatter3164", "Formatter5424", "NILVALUE", "format_structured_data"]
