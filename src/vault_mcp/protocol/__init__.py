"""Protocol layer — JSON-RPC envelopes, session dispatcher, stdio transport."""

from vault_mcp.protocol.dispatcher import ProtocolDispatcher, SessionState
from vault_mcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    JsonRpcProtocolError,
    MethodNotFoundError,
    ParseError,
    TransportError,
)
from vault_mcp.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from vault_mcp.protocol.transport import StdioTransport

__all__ = [
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcProtocolError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolDispatcher",
    "SessionState",
    "StdioTransport",
    "TransportError",
]
