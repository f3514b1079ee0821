"""MethodDispatcher — routes a request to its method handler.

Three methods are served (``initialize``, ``tools/list``, ``tools/call``);
anything else gets a method-not-found error. Handshake ordering is not
enforced: ``tools/*`` requests are answered even before ``initialize``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from twosum_mcp.config import ServerConfig
from twosum_mcp.protocol.errors import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    InvalidArgumentsError,
    ToolNotFoundError,
)
from twosum_mcp.protocol.models import (
    Implementation,
    InitializeParams,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolsCallParams,
    ToolsListResult,
    dump_payload,
)
from twosum_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from twosum_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[[JsonRpcRequest], JsonRpcResponse]


class MethodDispatcher:
    """Turns one :class:`JsonRpcRequest` into one :class:`JsonRpcResponse`.

    Usage::

        dispatcher = MethodDispatcher(default_registry())
        response = dispatcher.handle(request)
    """

    def __init__(self, registry: ToolRegistry, config: ServerConfig | None = None) -> None:
        self._registry = registry
        self._config = config or ServerConfig()
        self._handlers: dict[str, Handler] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Dispatch *request* by method name."""
        with _tracer.start_as_current_span("mcp.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            if request.has_id and request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            handler = self._handlers.get(request.method)
            if handler is None:
                logger.debug("Unknown method %r", request.method)
                response = _error(
                    request,
                    METHOD_NOT_FOUND,
                    f"Method not found: {request.method}",
                    data={"method": request.method},
                )
            else:
                response = handler(request)

            if response.error is not None:
                span.set_attribute(ATTR_ERROR_CODE, response.error.code)
            return response

    # -- handlers ------------------------------------------------------------

    def _initialize(self, request: JsonRpcRequest) -> JsonRpcResponse:
        try:
            params = InitializeParams.model_validate(request.params or {})
        except ValidationError as exc:
            logger.debug("Ignoring malformed initialize params: %s", exc)
            params = InitializeParams()

        client = params.client_info.name if params.client_info else "unknown"
        logger.info(
            "initialize from client %s (protocol %s)",
            client,
            params.protocol_version or "unspecified",
        )

        result = InitializeResult(
            protocol_version=self._config.protocol_version,
            capabilities={"tools": {"listChanged": False}},
            server_info=Implementation(
                name=self._config.server_name,
                version=self._config.server_version,
            ),
            instructions=self._config.instructions,
        )
        return JsonRpcResponse.success(request, dump_payload(result))

    def _tools_list(self, request: JsonRpcRequest) -> JsonRpcResponse:
        result = ToolsListResult(tools=list(self._registry.list()))
        return JsonRpcResponse.success(request, dump_payload(result))

    def _tools_call(self, request: JsonRpcRequest) -> JsonRpcResponse:
        try:
            params = ToolsCallParams.model_validate(request.params)
        except ValidationError:
            return _error(request, INVALID_PARAMS, "Invalid params")

        with _tracer.start_as_current_span("mcp.tools.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, params.name)
            try:
                result = self._registry.invoke(params.name, params.arguments)
            except ToolNotFoundError as exc:
                logger.debug("%s", exc)
                return _error(
                    request,
                    METHOD_NOT_FOUND,
                    f"Method not found: unknown tool {exc.name}",
                    data={"tool": exc.name},
                )
            except InvalidArgumentsError as exc:
                logger.debug("%s: %s", exc, exc.errors)
                return _error(
                    request,
                    INVALID_PARAMS,
                    f"Invalid arguments for {exc.name}",
                    data={"errors": exc.errors},
                )
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)

        return JsonRpcResponse.success(request, dump_payload(result))


def _error(
    request: JsonRpcRequest, code: int, message: str, *, data: Any = None
) -> JsonRpcResponse:
    return JsonRpcResponse.failure(request, JsonRpcError(code=code, message=message, data=data))
