"""Tests for the ping tool."""

import pytest

from vault_mcp.tools.errors import ToolArgumentsError
from vault_mcp.tools.ping import PingTool


class TestPingTool:
    async def test_default_message(self) -> None:
        assert await PingTool().execute({}) == "Echo: pong"

    async def test_echoes_message(self) -> None:
        assert await PingTool().execute({"message": "hello"}) == "Echo: hello"

    async def test_rejects_non_string(self) -> None:
        with pytest.raises(ToolArgumentsError, match="Invalid arguments for ping"):
            await PingTool().execute({"message": 42})

    def test_schema_has_no_required_fields(self) -> None:
        schema = PingTool().input_schema
        assert schema["type"] == "object"
        assert "required" not in schema
        assert schema["properties"]["message"]["default"] == "pong"
