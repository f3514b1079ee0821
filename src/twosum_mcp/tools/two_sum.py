"""The bundled ``two_sum`` tool.

Given integers ``nums`` and ``target``, return the indices of the first pair
whose values sum to ``target``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from twosum_mcp.protocol.models import MCPToolDef, ToolsCallResult
from twosum_mcp.tools.registry import Tool

TOOL_NAME = "two_sum"

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "nums": {
            "type": "array",
            "items": {"type": "integer"},
            "description": "Array of integers to search",
        },
        "target": {
            "type": "integer",
            "description": "Target sum",
        },
    },
    "required": ["nums", "target"],
}

OUTPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "indices": {
            "type": "array",
            "items": {"type": "integer"},
            "minItems": 2,
            "maxItems": 2,
            "description": "The two indices whose values sum to the target",
        },
    },
    "required": ["indices"],
}

NO_SOLUTION_TEXT = "No two indices found whose values sum to the target"


class TwoSumArgs(BaseModel):
    """Arguments of ``two_sum``; mirrors :data:`INPUT_SCHEMA`."""

    model_config = {"extra": "forbid", "strict": True}

    nums: list[int]
    target: int


def two_sum(nums: list[int], target: int) -> tuple[int, int] | None:
    """Return ``(i, j)`` with ``i < j`` and ``nums[i] + nums[j] == target``.

    Single pass over a value-to-earliest-index map, so the returned pair has
    the smallest possible ``j`` and, for that ``j``, the smallest ``i``.
    Returns ``None`` when no pair exists.
    """
    seen: dict[int, int] = {}
    for j, value in enumerate(nums):
        i = seen.get(target - value)
        if i is not None:
            return i, j
        # Record after the check: an element never pairs with itself.
        seen.setdefault(value, j)
    return None


def run_two_sum(args: TwoSumArgs) -> ToolsCallResult:
    """Tool behavior: wrap :func:`two_sum` in a ``tools/call`` result."""
    pair = two_sum(args.nums, args.target)
    if pair is None:
        return ToolsCallResult.from_text(NO_SOLUTION_TEXT, is_error=True)
    i, j = pair
    return ToolsCallResult.from_text(
        f"indices: [{i},{j}]",
        structured={"indices": [i, j]},
    )


def two_sum_tool() -> Tool:
    """Build the registry entry for ``two_sum``."""
    definition = MCPToolDef(
        name=TOOL_NAME,
        title="Two Sum",
        description="Return the indices of two elements whose values sum to the target",
        input_schema=INPUT_SCHEMA,
        output_schema=OUTPUT_SCHEMA,
    )
    return Tool(definition=definition, arguments_model=TwoSumArgs, handler=run_two_sum)
