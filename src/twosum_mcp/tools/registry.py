"""ToolRegistry — the fixed, read-only tool catalog.

Built once at startup and handed to the dispatcher by reference. Each entry
pairs a published :class:`MCPToolDef` with a pydantic model for its arguments
and the callable that runs it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from twosum_mcp.protocol.errors import InvalidArgumentsError, ToolNotFoundError
from twosum_mcp.protocol.models import MCPToolDef, ToolsCallResult


@dataclass(frozen=True)
class Tool:
    """A registered tool: definition, argument shape, and behavior."""

    definition: MCPToolDef
    arguments_model: type[BaseModel]
    handler: Callable[[Any], ToolsCallResult]

    @property
    def name(self) -> str:
        return self.definition.name


class ToolRegistry:
    """Maps tool names to tools; preserves registration order.

    Usage::

        registry = ToolRegistry([two_sum_tool()])
        registry.list()                                  # published definitions
        registry.invoke("two_sum", {"nums": [1, 2], "target": 3})
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        by_name: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in by_name:
                msg = f"duplicate tool name: {tool.name}"
                raise ValueError(msg)
            by_name[tool.name] = tool
        self._tools = MappingProxyType(by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def list(self) -> tuple[MCPToolDef, ...]:
        """Return all tool definitions in registration order."""
        return tuple(tool.definition for tool in self._tools.values())

    def get(self, name: str) -> Tool:
        """Look up a tool by name."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    def invoke(self, name: str, arguments: Any) -> ToolsCallResult:
        """Resolve *name*, validate *arguments*, then run the tool.

        Raises
        ------
        ToolNotFoundError
            If no tool is registered under *name*.
        InvalidArgumentsError
            If *arguments* do not match the tool's argument model.
        """
        tool = self.get(name)
        try:
            args = tool.arguments_model.model_validate(arguments)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False, include_input=False)
            raise InvalidArgumentsError(name, errors=[dict(e) for e in errors]) from exc
        return tool.handler(args)


def default_registry() -> ToolRegistry:
    """Build the registry holding the bundled tools."""
    from twosum_mcp.tools.two_sum import two_sum_tool

    return ToolRegistry([two_sum_tool()])
