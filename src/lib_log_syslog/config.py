"""Environment-driven configuration and optional ``.env`` loading.

Purpose
-------
Resolve collector settings from ``LOG_SYSLOG_*`` environment variables so the
CLI and host applications share one set of rules, and optionally populate the
environment from the nearest ``.env`` file via :mod:`dotenv`.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle variable for ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` helpers.
* :class:`SyslogSettings` - resolved settings with :meth:`SyslogSettings.from_env`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_syslog.adapters.transports import Framing, parse_address
from lib_log_syslog.domain import Facility, LogLevel

DOTENV_ENV_VAR = "LIB_LOG_SYSLOG_USE_DOTENV"
ENV_PREFIX = "LOG_SYSLOG_"
_TRUTHY = {"1", "true", "yes", "on"}
_PROTOCOLS = ("udp", "tcp")
_FORMATS = ("3164", "5424")

_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested; an explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory without overriding set variables.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Repeated calls reuse the first result.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    load_dotenv(found, override=False)
    _DOTENV_LOADED = Path(found).resolve()
    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


@dataclass(slots=True, frozen=True)
class SyslogSettings:
    """Collector settings after defaults and environment overrides."""

    host: str = "127.0.0.1"
    port: int = 514
    protocol: str = "udp"
    rfc: str = "3164"
    facility: Facility = Facility.USER
    level: LogLevel = LogLevel.INFO
    hostname: str | None = None
    process: str = "lib_log_syslog"
    local: str = "0.0.0.0:0"
    framing: Framing = Framing.NONE

    def __post_init__(self) -> None:
        if self.protocol not in _PROTOCOLS:
            raise ValueError(f"Unsupported protocol {self.protocol!r}; expected one of {_PROTOCOLS}")
        if self.rfc not in _FORMATS:
            raise ValueError(f"Unsupported format {self.rfc!r}; expected one of {_FORMATS}")
        if not 0 < self.port < 65536:
            raise ValueError(f"Port out of range: {self.port}")

    @property
    def server(self) -> tuple[str, int]:
        return self.host, self.port

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "SyslogSettings":
        """Build settings from ``LOG_SYSLOG_*`` variables, then apply ``overrides``.

        ``None`` overrides are ignored so CLI options left unset fall through to
        the environment.

        Examples
        --------
        >>> settings = SyslogSettings.from_env({"LOG_SYSLOG_HOST": "logs:6514", "LOG_SYSLOG_PROTOCOL": "TCP"})
        >>> settings.server, settings.protocol
        (('logs', 6514), 'tcp')
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        def read(name: str) -> str | None:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or not raw.strip():
                return None
            return raw.strip()

        host = read("HOST")
        if host is not None:
            if ":" in host:
                values["host"], values["port"] = parse_address(host)
            else:
                values["host"] = host
        port = read("PORT")
        if port is not None:
            values["port"] = int(port)
        protocol = read("PROTOCOL")
        if protocol is not None:
            values["protocol"] = protocol.lower()
        rfc = read("FORMAT")
        if rfc is not None:
            values["rfc"] = rfc.lower().removeprefix("rfc")
        facility = read("FACILITY")
        if facility is not None:
            values["facility"] = Facility.from_name(facility)
        level = read("LEVEL")
        if level is not None:
            values["level"] = LogLevel.from_numeric(int(level)) if level.isdigit() else LogLevel.from_name(level)
        hostname = read("HOSTNAME")
        if hostname is not None:
            values["hostname"] = hostname
        process = read("PROCESS")
        if process is not None:
            values["process"] = process
        local = read("LOCAL")
        if local is not None:
            values["local"] = local
        framing = read("FRAMING")
        if framing is not None:
            values["framing"] = Framing.from_name(framing)

        settings = cls(**values)
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(settings, **applied) if applied else settings


__all__ = ["DOTENV_ENV_VAR", "SyslogSettings", "enable_dotenv", "should_use_dotenv"]
