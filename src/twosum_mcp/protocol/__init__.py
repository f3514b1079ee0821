"""Protocol layer: JSON-RPC codec, method dispatch, and the stdio session."""

from twosum_mcp.protocol.codec import decode_request, encode_response
from twosum_mcp.protocol.dispatcher import MethodDispatcher
from twosum_mcp.protocol.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    DecodeError,
    InvalidArgumentsError,
    InvocationError,
    ProtocolError,
    RecordTooLargeError,
    ToolNotFoundError,
)
from twosum_mcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ToolsCallResult,
)
from twosum_mcp.protocol.session import StdioSession

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "DecodeError",
    "InvalidArgumentsError",
    "InvocationError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPToolDef",
    "MethodDispatcher",
    "ProtocolError",
    "RecordTooLargeError",
    "StdioSession",
    "ToolNotFoundError",
    "ToolsCallResult",
    "decode_request",
    "encode_response",
]
