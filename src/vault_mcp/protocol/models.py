"""Protocol models — JSON-RPC 2.0 envelopes and MCP payloads.

Implements the message format used by the Model Context Protocol for the
``initialize`` handshake, tool discovery (``tools/list``), and execution
(``tools/call``).
"""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from vault_mcp.protocol.errors import JsonRpcProtocolError
from vault_mcp.tools.models import ToolDescriptor

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


def is_valid_id(value: Any) -> bool:
    """A request id is a string, a finite number, or null.  Booleans are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return value is None or isinstance(value, (str, int))


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    ``id`` is kept exactly as received.  A request without an ``id`` member
    is a notification; ``"id": null`` is not.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    method: StrictStr
    id: Any = None
    params: Any = None

    @field_validator("id")
    @classmethod
    def _scalar_id(cls, value: Any) -> Any:
        if not is_valid_id(value):
            msg = "id must be a string, number, or null"
            raise ValueError(msg)
        return value

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response.  Exactly one of ``result``/``error`` is set."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "exactly one of 'result' or 'error' must be set"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, id: Any, result: Any) -> JsonRpcResponse:
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: Any, code: int, message: str, data: Any = None) -> JsonRpcResponse:
        return cls(id=id, error=JsonRpcError(code=code, message=message, data=data))

    @classmethod
    def from_error(cls, id: Any, error: JsonRpcProtocolError) -> JsonRpcResponse:
        return cls.failure(id, error.code, error.message, error.data)

    def to_wire(self) -> dict[str, Any]:
        """Serialise for the transport; ``id`` is always present, even when null."""
        wire: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            wire["error"] = self.error.model_dump(exclude_none=True)
        else:
            wire["result"] = self.result
        return wire


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ClientInfo(BaseModel):
    name: StrictStr
    version: StrictStr


class InitializeParams(BaseModel):
    """Parameters of the ``initialize`` request."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: StrictStr = Field(alias="protocolVersion")
    capabilities: dict[str, Any]
    client_info: ClientInfo = Field(alias="clientInfo")


class ToolsCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool | None = Field(default=False, alias="listChanged")


class ServerCapabilities(BaseModel):
    logging: dict[str, Any] | None = None
    prompts: dict[str, Any] | None = None
    resources: dict[str, Any] | None = None
    tools: ToolsCapability | None = None


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Result of a successful ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ServerCapabilities
    server_info: ServerInfo = Field(alias="serverInfo")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ListToolsResult(BaseModel):
    tools: list[ToolDescriptor] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return {"tools": [tool.to_wire() for tool in self.tools]}


class CallToolParams(BaseModel):
    """Parameters of the ``tools/call`` request."""

    name: StrictStr
    arguments: dict[str, Any] | None = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """Result of ``tools/call``.  Tool failures set ``isError``."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> CallToolResult:
        return cls(content=[TextContent(text=text)], is_error=is_error)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
