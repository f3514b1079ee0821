"""A minimal stdio MCP server exposing a two-sum tool."""

from __future__ import annotations

__version__ = "0.1.0"
