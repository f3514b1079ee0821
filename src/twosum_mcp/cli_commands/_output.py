"""Shared CLI output formatters.

``console`` writes to stdout and is only used by commands that do not serve
the protocol; ``err_console`` writes to stderr.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from twosum_mcp.protocol.models import MCPToolDef, dump_payload

console = Console()
err_console = Console(stderr=True)


def print_tools_table(tools: Sequence[MCPToolDef]) -> None:
    """Pretty-print tool definitions as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Description")
    table.add_column("Arguments")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(
            tool.name,
            tool.title or "-",
            _truncate(tool.description or ""),
            ", ".join(required) or "-",
        )

    console.print(table)


def print_tools_json(tools: Sequence[MCPToolDef]) -> None:
    """Print tool definitions exactly as ``tools/list`` publishes them."""
    console.print_json(json.dumps([dump_payload(t) for t in tools]))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
