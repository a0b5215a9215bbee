"""Address parsing and resolution shared by both transports."""

from __future__ import annotations

import socket
from typing import Any, Union

from lib_log_syslog.errors import InitializationError

Address = Union[tuple[str, int], str]
"""``(host, port)`` tuple or ``"host:port"`` / ``"[v6]:port"`` string."""


def parse_address(address: Address) -> tuple[str, int]:
    """Split ``address`` into ``(host, port)``.

    Examples
    --------
    >>> parse_address("collector.local:514")
    ('collector.local', 514)
    >>> parse_address("[::1]:6514")
    ('::1', 6514)
    >>> parse_address(("127.0.0.1", 601))
    ('127.0.0.1', 601)
    """

    if isinstance(address, tuple):
        host, port = address
        return str(host), int(port)
    host, _, port_str = address.rpartition(":")
    host = host.strip("[]")
    if not host or not port_str.isdigit():
        raise InitializationError(f"Invalid address {address!r}; expected host:port")
    return host, int(port_str)


def resolve_all(
    address: Address,
    socktype: int,
    *,
    family: int = socket.AF_UNSPEC,
    passive: bool = False,
) -> list[tuple[int, Any]]:
    """Resolve ``address`` into ``(family, sockaddr)`` pairs in resolver order.

    Raises
    ------
    InitializationError
        When the name does not resolve or yields no addresses.
    """

    host, port = parse_address(address)
    flags = socket.AI_PASSIVE if passive else 0
    try:
        results = socket.getaddrinfo(host, port, family, socktype, 0, flags)
    except OSError as exc:
        raise InitializationError(f"Could not resolve {host}:{port}: {exc}") from exc
    if not results:
        raise InitializationError(f"No addresses found for {host}:{port}")
    return [(resolved_family, sockaddr) for resolved_family, _type, _proto, _canonname, sockaddr in results]


def resolve_first(
    address: Address,
    socktype: int,
    *,
    family: int = socket.AF_UNSPEC,
    passive: bool = False,
) -> tuple[int, Any]:
    """Resolve ``address`` and return ``(family, sockaddr)`` of the first result."""

    return resolve_all(address, socktype, family=family, passive=passive)[0]


__all__ = ["Address", "parse_address", "resolve_all", "resolve_first"]
