"""Module entry point: ``python -m lib_log_syslog``."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
