"""``ping`` — echo a message back; used to check connectivity."""

from __future__ import annotations

from typing import Any

from vault_mcp.tools.errors import ToolArgumentsError


class PingTool:
    name = "ping"
    description = "A simple ping tool for testing connectivity"

    def __init__(self) -> None:
        self.input_schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "Message to echo back",
                    "default": "pong",
                },
            },
        }

    async def execute(self, arguments: dict[str, Any]) -> str:
        message = arguments.get("message", "pong")
        if not isinstance(message, str):
            raise ToolArgumentsError(self.name, "message: Input should be a valid string")
        return f"Echo: {message}"
