"""Click command line for sending and inspecting syslog frames.

Purpose
-------
Give operators a quick way to push one message to a collector and to watch
what arrives on a port, using the same adapters as library callers.

Contents
--------
* :func:`cli` - command group honouring ``--use-dotenv``.
* ``info`` / ``send`` / ``listen`` subcommands.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import os
import socket
from typing import Any, Sequence

import click

from . import __init__conf__
from . import config as config_module
from .adapters.console import RichFrameConsole
from .adapters.transports import Framing, parse_address
from .domain import Facility, Severity, StructuredPayload
from .errors import InitializationError
from .listener import serve_tcp, serve_udp
from .runtime import build_logger

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (or set {config_module.DOTENV_ENV_VAR}=1).",
)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.name)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Send RFC 3164 / RFC 5424 messages and watch collector ports."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("send", context_settings=CONTEXT_SETTINGS)
@click.argument("message")
@click.option("--host", default=None, help="Collector host or host:port [env LOG_SYSLOG_HOST].")
@click.option("--port", type=int, default=None, help="Collector port [env LOG_SYSLOG_PORT].")
@click.option("--protocol", type=click.Choice(["udp", "tcp"]), default=None, help="Transport [env LOG_SYSLOG_PROTOCOL].")
@click.option("--format", "rfc", type=click.Choice(["3164", "5424"]), default=None, help="Wire format [env LOG_SYSLOG_FORMAT].")
@click.option("--framing", type=click.Choice([item.value for item in Framing]), default=None, help="TCP framing.")
@click.option("--facility", default=None, help="Facility name, e.g. user or local0 [env LOG_SYSLOG_FACILITY].")
@click.option("--severity", default="info", show_default=True, help="Severity name, e.g. err or warning.")
@click.option("--hostname", default=None, help="HOSTNAME field [env LOG_SYSLOG_HOSTNAME].")
@click.option("--process", default=None, help="Process / APP-NAME field [env LOG_SYSLOG_PROCESS].")
@click.option("--pid", type=int, default=None, help="PID field (defaults to this process).")
@click.option("--msg-id", type=int, default=None, help="RFC 5424 MSGID.")
@click.option(
    "--sd",
    "sd_params",
    type=(str, str, str),
    multiple=True,
    metavar="ELEMENT KEY VALUE",
    help="RFC 5424 structured-data parameter; repeatable.",
)
def cli_send(
    message: str,
    host: str | None,
    port: int | None,
    protocol: str | None,
    rfc: str | None,
    framing: str | None,
    facility: str | None,
    severity: str,
    hostname: str | None,
    process: str | None,
    pid: int | None,
    msg_id: int | None,
    sd_params: tuple[tuple[str, str, str], ...],
) -> None:
    """Send MESSAGE to the collector once and flush."""

    try:
        overrides: dict[str, Any] = {
            "protocol": protocol,
            "rfc": rfc,
            "framing": Framing.from_name(framing) if framing else None,
            "facility": Facility.from_name(facility) if facility else None,
            "hostname": hostname,
            "process": process,
        }
        if host is not None:
            if ":" in host:
                overrides["host"], overrides["port"] = parse_address(host)
            else:
                overrides["host"] = host
        if port is not None:
            overrides["port"] = port
        settings = config_module.SyslogSettings.from_env(**overrides)
        level = Severity.from_name(severity)
    except (ValueError, InitializationError) as exc:
        raise click.BadParameter(str(exc)) from exc

    payload: Any = message
    if settings.rfc == "5424":
        data: dict[str, dict[str, str]] = {}
        for element, key, value in sd_params:
            data.setdefault(element, {})[key] = value
        payload = StructuredPayload(msg_id=msg_id, structured_data=data, message=message)

    try:
        with build_logger(settings, pid=pid) as logger:
            logger.log(level, payload)
    except InitializationError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"write failed: {exc}") from exc


@cli.command("listen", context_settings=CONTEXT_SETTINGS)
@click.option("--host", default="127.0.0.1", show_default=True, help="Address to bind.")
@click.option("--port", type=int, default=5514, show_default=True, help="Port to bind.")
@click.option("--protocol", type=click.Choice(["udp", "tcp"]), default="udp", show_default=True)
@click.option("--framing", type=click.Choice([item.value for item in Framing]), default="none", show_default=True)
@click.option("--count", type=int, default=0, show_default=True, help="Stop after this many frames (0 = forever).")
@click.option("--no-color", is_flag=True, help="Disable colours.")
def cli_listen(host: str, port: int, protocol: str, framing: str, count: int, no_color: bool) -> None:
    """Print frames received on HOST:PORT."""

    console = RichFrameConsole(no_color=no_color)
    kind = socket.SOCK_DGRAM if protocol == "udp" else socket.SOCK_STREAM
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    with socket.socket(family, kind) as sock:
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise click.ClickException(f"cannot bind {host}:{port}: {exc}") from exc
        click.echo(f"listening on {protocol}://{host}:{port}", err=True)
        try:
            if kind == socket.SOCK_DGRAM:
                serve_udp(sock, console, count=count)
            else:
                sock.listen()
                serve_tcp(sock, console, count=count, framing=Framing.from_name(framing))
        except KeyboardInterrupt:  # pragma: no cover - interactive stop
            pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code otherwise.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_syslog, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, standalone_mode=False, prog_name=__init__conf__.shell_command)
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
