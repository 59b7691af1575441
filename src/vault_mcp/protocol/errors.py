"""JSON-RPC error types for the protocol layer.

Each class carries the fixed JSON-RPC 2.0 code it maps to.  Raising one from
a method handler produces an error envelope; anything else a handler raises
is reported as :class:`InternalError`.
"""

from __future__ import annotations

from typing import Any

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcProtocolError(Exception):
    """Base error for all protocol-level failures."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)


class ParseError(JsonRpcProtocolError):
    """The line was not valid JSON."""

    code = PARSE_ERROR


class InvalidRequestError(JsonRpcProtocolError):
    """The JSON document is not a valid request envelope."""

    code = INVALID_REQUEST


class MethodNotFoundError(JsonRpcProtocolError):
    """No handler exists for the requested method."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(JsonRpcProtocolError):
    """Parameters are missing or have the wrong shape."""

    code = INVALID_PARAMS


class InternalError(JsonRpcProtocolError):
    """Server-side failure, including calls made in the wrong session state."""

    code = INTERNAL_ERROR


class TransportError(Exception):
    """Reading from or writing to the transport stream failed.  Fatal to the loop."""
