"""``two-sum-mcp serve`` — run the MCP session over stdin/stdout."""

from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError

from twosum_mcp.cli_commands._output import err_console
from twosum_mcp.config import DEFAULT_MAX_RECORD_SIZE, ServerConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@click.option(
    "--max-record-size",
    type=int,
    default=DEFAULT_MAX_RECORD_SIZE,
    show_default=True,
    help="Largest accepted input line in bytes.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for stderr output.",
)
@click.option("--trace-console", is_flag=True, help="Export trace spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export trace spans via OTLP/gRPC.")
def serve(
    max_record_size: int,
    log_level: str,
    trace_console: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve MCP requests from stdin until it is closed.

    Protocol frames are written to stdout; logs go to stderr.
    """
    from twosum_mcp.protocol.dispatcher import MethodDispatcher
    from twosum_mcp.protocol.errors import RecordTooLargeError
    from twosum_mcp.protocol.session import StdioSession
    from twosum_mcp.tools.registry import default_registry

    try:
        config = ServerConfig(max_record_size=max_record_size, log_level=log_level.upper())
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc

    logging.basicConfig(level=config.log_level, stream=sys.stderr, format=_LOG_FORMAT)

    if trace_console or otlp_endpoint:
        from twosum_mcp.utils.telemetry import configure_telemetry

        configure_telemetry(
            service_name=config.server_name,
            export_to_console=trace_console,
            otlp_endpoint=otlp_endpoint,
        )

    dispatcher = MethodDispatcher(default_registry(), config)
    session = StdioSession(
        dispatcher,
        reader=click.get_binary_stream("stdin"),
        writer=click.get_binary_stream("stdout"),
        max_record_size=config.max_record_size,
    )
    try:
        session.run()
    except RecordTooLargeError as exc:
        err_console.print(f"[red]Session error:[/red] {exc}")
        sys.exit(1)
