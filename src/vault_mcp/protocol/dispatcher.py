"""ProtocolDispatcher — session state machine and JSON-RPC method routing.

One dispatcher instance owns one session.  The session starts
``UNINITIALIZED`` and moves to ``INITIALIZED`` exactly once, on the first
successful ``initialize``; there is no way back.

Outcome mapping:

* protocol failures (bad JSON, bad envelope, unknown method, bad params,
  wrong session state) become JSON-RPC **error** envelopes;
* tool failures, including every vault write failure, become **successful**
  ``tools/call`` results with ``isError: true``.

Usage::

    dispatcher = ProtocolDispatcher(server_name="obsidian-vault", server_version="0.1.0")
    dispatcher.register(PingTool())

    reply = await dispatcher.dispatch('{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}')
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from vault_mcp.protocol.errors import (
    INTERNAL_ERROR,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    JsonRpcProtocolError,
    MethodNotFoundError,
    ParseError,
)
from vault_mcp.protocol.models import (
    CallToolParams,
    CallToolResult,
    InitializeParams,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    ServerCapabilities,
    ServerInfo,
    ToolsCapability,
    is_valid_id,
)
from vault_mcp.tools.errors import ToolError
from vault_mcp.tools.registry import ToolRegistry
from vault_mcp.utils.telemetry import (
    ATTR_RPC_ERROR_CODE,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    get_tracer,
)
from vault_mcp.utils.validation import describe_validation_error

if TYPE_CHECKING:
    from vault_mcp.tools.models import ToolDescriptor
    from vault_mcp.tools.registry import Tool

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[[JsonRpcRequest], Awaitable[Any]]

# Notifications normally get no reply; ``initialized`` is answered with ``{}``.
_ANSWERED_NOTIFICATIONS = frozenset({"initialized"})


class SessionState(str, Enum):
    """Handshake state of the connection."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class ProtocolDispatcher:
    """Parse request lines, enforce initialize-before-use, and route methods."""

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        *,
        server_name: str,
        server_version: str,
    ) -> None:
        self._registry = registry if registry is not None else ToolRegistry()
        self._server_info = ServerInfo(name=server_name, version=server_version)
        self._state = SessionState.UNINITIALIZED
        self._handlers: dict[str, Handler] = {
            "initialize": self._handle_initialize,
            "initialized": self._handle_initialized,
            "notifications/initialized": self._handle_initialized,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is SessionState.INITIALIZED

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def server_info(self) -> ServerInfo:
        return self._server_info

    def register(self, tool: Tool) -> ToolDescriptor:
        """Forward registration to the underlying registry."""
        return self._registry.register(tool)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def dispatch(self, line: str | bytes) -> str | None:
        """Handle one input line; return the response line, or ``None``.

        ``None`` means the line was a notification that gets no reply.
        """
        response = await self.handle_line(line)
        if response is None:
            return None
        return json.dumps(response.to_wire(), ensure_ascii=False, allow_nan=False)

    async def handle_line(self, line: str | bytes) -> JsonRpcResponse | None:
        """Decode *line* as JSON and handle the resulting message."""
        try:
            payload = json.loads(line, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            logger.warning("Parse error: %s", exc)
            return JsonRpcResponse.from_error(None, ParseError(f"Parse error: {exc}"))
        return await self.handle_message(payload)

    async def handle_message(self, payload: Any) -> JsonRpcResponse | None:
        """Validate the envelope of a decoded message and route it."""
        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError as exc:
            error = InvalidRequestError(f"Invalid request: {describe_validation_error(exc)}")
            logger.warning("%s", error.message)
            return JsonRpcResponse.from_error(_salvage_id(payload), error)

        response = await self._handle_request(request)
        if request.is_notification and request.method not in _ANSWERED_NOTIFICATIONS:
            return None
        return response

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    async def _handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            if request.id is not None:
                span.set_attribute(ATTR_RPC_ID, str(request.id))
            logger.debug("Processing request: %s (id=%r)", request.method, request.id)

            try:
                handler = self._handlers.get(request.method)
                if handler is None:
                    raise MethodNotFoundError(request.method)
                result = await handler(request)
            except JsonRpcProtocolError as exc:
                logger.warning("Request %s failed: %s", request.method, exc.message)
                response = JsonRpcResponse.from_error(request.id, exc)
            except Exception as exc:
                logger.exception("Unhandled error while processing %s", request.method)
                response = JsonRpcResponse.failure(
                    request.id, INTERNAL_ERROR, f"Internal error: {exc}"
                )
            else:
                response = JsonRpcResponse.success(request.id, result)

            if response.error is not None:
                span.set_attribute(ATTR_RPC_ERROR_CODE, response.error.code)
            return response

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise InternalError("Server not initialized")

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------

    async def _handle_initialize(self, request: JsonRpcRequest) -> dict[str, Any]:
        if self.initialized:
            raise InternalError("Server already initialized")
        if request.params is None:
            raise InvalidParamsError("Missing initialize parameters")

        try:
            params = InitializeParams.model_validate(request.params)
        except ValidationError as exc:
            raise InvalidParamsError(
                f"Invalid initialize parameters: {describe_validation_error(exc)}"
            ) from exc

        self._state = SessionState.INITIALIZED
        logger.info(
            "Client initialized: %s %s (protocol %s)",
            params.client_info.name,
            params.client_info.version,
            params.protocol_version,
        )

        result = InitializeResult(
            capabilities=ServerCapabilities(tools=ToolsCapability(list_changed=False)),
            server_info=self._server_info,
        )
        return result.to_wire()

    async def _handle_initialized(self, request: JsonRpcRequest) -> dict[str, Any]:
        logger.info("Initialization completed")
        return {}

    async def _handle_tools_list(self, request: JsonRpcRequest) -> dict[str, Any]:
        self._require_initialized()
        return ListToolsResult(tools=self._registry.list_tools()).to_wire()

    async def _handle_tools_call(self, request: JsonRpcRequest) -> dict[str, Any]:
        self._require_initialized()
        if request.params is None:
            raise InvalidParamsError("Missing call tool parameters")

        try:
            params = CallToolParams.model_validate(request.params)
        except ValidationError as exc:
            raise InvalidParamsError(
                f"Invalid call tool parameters: {describe_validation_error(exc)}"
            ) from exc

        result = await self._call_tool(params.name, params.arguments or {})
        return result.to_wire()

    async def _call_tool(self, name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Execute a tool; its failures become ``isError`` results."""
        with _tracer.start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                text = await self._registry.execute(name, arguments)
            except ToolError as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                result = CallToolResult.from_text(f"Error: {exc}", is_error=True)
            else:
                result = CallToolResult.from_text(text)
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
            return result


def _salvage_id(payload: Any) -> Any:
    """Best-effort id for an error reply to a malformed request."""
    if isinstance(payload, dict):
        candidate = payload.get("id")
        if is_valid_id(candidate):
            return candidate
    return None


def _reject_constant(name: str) -> Any:
    """``NaN`` and ``Infinity`` are accepted by :mod:`json` but are not JSON."""
    raise ValueError(f"{name} is not a valid JSON value")
