"""MCP models — JSON-RPC 2.0 envelopes and method payloads.

Implements the message format used by the Model Context Protocol for the
lifecycle handshake (``initialize``), tool discovery (``tools/list``) and
execution (``tools/call``).

``params`` stays an opaque JSON value on the request envelope; each handler
validates it into one of the typed payload models below.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, model_validator

RequestId = StrictInt | StrictFloat | StrictStr | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = "2.0"
    id: RequestId = None
    method: str
    params: Any = None

    @property
    def has_id(self) -> bool:
        """Whether the client sent an ``id`` member (an explicit null counts)."""
        return "id" in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Carries exactly one of ``result`` or ``error``. The ``id`` member is only
    written to the wire when it was set, mirroring the originating request.
    """

    jsonrpc: str = "2.0"
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request: JsonRpcRequest, result: dict[str, Any]) -> JsonRpcResponse:
        """Build a result response correlated with *request*."""
        return cls(result=result, **_correlation(request))

    @classmethod
    def failure(cls, request: JsonRpcRequest, error: JsonRpcError) -> JsonRpcResponse:
        """Build an error response correlated with *request*."""
        return cls(error=error, **_correlation(request))

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible envelope, omitting unset members."""
        data = self.model_dump(mode="json", exclude_none=True)
        if "id" in self.model_fields_set:
            data["id"] = self.id
        return data


def _correlation(request: JsonRpcRequest) -> dict[str, Any]:
    return {"id": request.id} if request.has_id else {}


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class Implementation(BaseModel):
    """Name and version of a protocol participant."""

    name: str
    version: str = ""


class InitializeParams(BaseModel):
    """Parameters a client sends with ``initialize``. All members optional."""

    model_config = {"populate_by_name": True}

    protocol_version: str | None = Field(default=None, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=dict)
    client_info: Implementation | None = Field(default=None, alias="clientInfo")


class InitializeResult(BaseModel):
    """The server's answer to ``initialize``."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: dict[str, Any]
    server_info: Implementation = Field(alias="serverInfo")
    instructions: str | None = None


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    title: str | None = None
    description: str | None = None
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")
    output_schema: dict[str, Any] | None = Field(default=None, alias="outputSchema")


class ToolsListResult(BaseModel):
    """Result of ``tools/list``."""

    model_config = {"populate_by_name": True}

    tools: list[MCPToolDef] = []
    next_cursor: str | None = Field(default=None, alias="nextCursor")


class ToolsCallParams(BaseModel):
    """Parameters of ``tools/call``. ``arguments`` is validated by the tool."""

    name: str
    arguments: Any = None


class TextContent(BaseModel):
    """Plain text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolsCallResult(BaseModel):
    """Result of ``tools/call``.

    ``is_error`` flags a tool that ran but produced no answer; it is not a
    protocol-level error.
    """

    model_config = {"populate_by_name": True}

    content: list[TextContent] = []
    structured_content: dict[str, Any] | None = Field(default=None, alias="structuredContent")
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        structured: dict[str, Any] | None = None,
        is_error: bool = False,
    ) -> ToolsCallResult:
        """Create a result with a single text block."""
        return cls(
            content=[TextContent(text=text)],
            structured_content=structured,
            is_error=is_error,
        )


def dump_payload(model: BaseModel) -> dict[str, Any]:
    """Dump a payload model using wire names and dropping absent members."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
