"""Error types and JSON-RPC error codes for the protocol layer."""

from __future__ import annotations

from typing import Any

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class DecodeError(ProtocolError):
    """An input record is not a well-formed JSON-RPC request."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Malformed request" + (f": {detail}" if detail else ""))


class RecordTooLargeError(ProtocolError):
    """An input record exceeded the configured size bound.

    Fatal for the stream: the session loop stops reading.
    """

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Input record exceeds {limit} bytes")


class InvocationError(ProtocolError):
    """A tool could not be invoked."""


class ToolNotFoundError(InvocationError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class InvalidArgumentsError(InvocationError):
    """Arguments do not match the tool's expected shape."""

    def __init__(self, name: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.name = name
        self.errors = errors or []
        super().__init__(f"Invalid arguments for {name}")
