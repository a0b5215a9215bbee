"""Message payloads accepted by the structured (RFC 5424) formatter.

Purpose
-------
Normalise the shapes callers may pass (plain text or a
``(msg_id, structured_data, text)`` triple) into one immutable value.

Contents
--------
* :data:`StructuredData` - element name to parameter mapping alias.
* :class:`StructuredPayload` dataclass.
* :func:`coerce_payload` - shape normalisation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

StructuredData = Mapping[str, Mapping[str, Any]]


@dataclass(slots=True, frozen=True)
class StructuredPayload:
    """Message id, structured-data elements, and free text of one message.

    ``structured_data`` keeps the caller's insertion order; rendering iterates
    it as-is so identical input always produces identical bytes.
    """

    msg_id: int | None = None
    structured_data: dict[str, dict[str, Any]] = field(default_factory=dict)
    message: str = ""

    def __post_init__(self) -> None:
        copied = {str(name): dict(params) for name, params in self.structured_data.items()}
        object.__setattr__(self, "structured_data", copied)
        object.__setattr__(self, "message", str(self.message))


def coerce_payload(message: Any) -> StructuredPayload:
    """Return ``message`` as a :class:`StructuredPayload`.

    Examples
    --------
    >>> coerce_payload("boot").message
    'boot'
    >>> coerce_payload((7, {"origin": {"ip": "10.0.0.1"}}, "up")).msg_id
    7
    >>> coerce_payload(42).message
    '42'
    >>> coerce_payload(("a", "b", "c")).message
    "('a', 'b', 'c')"
    """

    if isinstance(message, StructuredPayload):
        return message
    if _is_triple(message):
        msg_id, data, text = message
        return StructuredPayload(msg_id=msg_id, structured_data=data or {}, message=text)
    return StructuredPayload(message=str(message))


def _is_triple(message: Any) -> bool:
    # Any other 3-tuple is ordinary text.
    if not isinstance(message, tuple) or len(message) != 3:
        return False
    msg_id, data, _text = message
    return (msg_id is None or isinstance(msg_id, int)) and (data is None or isinstance(data, Mapping))


__all__ = ["StructuredData", "StructuredPayload", "coerce_payload"]
