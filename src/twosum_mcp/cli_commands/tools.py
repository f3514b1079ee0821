"""``two-sum-mcp tools`` — inspect the tool catalog."""

from __future__ import annotations

import click

from twosum_mcp.cli_commands._output import console, print_tools_json, print_tools_table


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def list_tools(as_json: bool) -> None:
    """List the tools this server exposes."""
    from twosum_mcp.tools.registry import default_registry

    definitions = default_registry().list()
    if not definitions:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    if as_json:
        print_tools_json(definitions)
    else:
        print_tools_table(definitions)
