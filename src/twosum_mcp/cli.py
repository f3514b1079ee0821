"""two-sum-mcp CLI entrypoint."""

from __future__ import annotations

import click

from twosum_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="two-sum-mcp")
def main() -> None:
    """Stdio MCP server with a two-sum tool."""


# Register subcommands
from twosum_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
