"""Tool descriptor model — the shape advertised by ``tools/list``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """A registered tool's public definition.  Frozen once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        """Serialise with the camelCase keys MCP clients expect."""
        return self.model_dump(by_alias=True)
