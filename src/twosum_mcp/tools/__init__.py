"""Tool catalog: registry and bundled tools."""

from twosum_mcp.tools.registry import Tool, ToolRegistry, default_registry
from twosum_mcp.tools.two_sum import TwoSumArgs, two_sum, two_sum_tool

__all__ = [
    "Tool",
    "ToolRegistry",
    "TwoSumArgs",
    "default_registry",
    "two_sum",
    "two_sum_tool",
]
