"""Message codec, one JSON-RPC envelope per record.

Decoding is tolerant: anything that is not a request envelope raises
:class:`DecodeError`, which the session loop treats as "skip this record".
Encoding never raises for a :class:`JsonRpcResponse`; a result that cannot be
serialized is replaced by an internal-error response with the same id.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from twosum_mcp.protocol.errors import INTERNAL_ERROR, DecodeError
from twosum_mcp.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse

logger = logging.getLogger(__name__)


def decode_request(record: bytes | str) -> JsonRpcRequest:
    """Parse one record into a :class:`JsonRpcRequest`."""
    try:
        return JsonRpcRequest.model_validate_json(record)
    except ValidationError as exc:
        raise DecodeError(f"{exc.error_count()} validation error(s)") from exc


def encode_response(response: JsonRpcResponse) -> bytes:
    """Serialize *response* as compact JSON (without the line terminator)."""
    try:
        return _dumps(response)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.error("Failed to serialize response for id %r: %s", response.id, exc)
        fallback = response.model_copy(
            update={
                "result": None,
                "error": JsonRpcError(
                    code=INTERNAL_ERROR,
                    message="Internal error: failed to serialize result",
                ),
            }
        )
        return _dumps(fallback)


def _dumps(response: JsonRpcResponse) -> bytes:
    text = json.dumps(response.to_wire(), separators=(",", ":"), allow_nan=False)
    return text.encode()
