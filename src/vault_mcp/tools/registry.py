"""ToolRegistry — name-keyed collection of callable tools."""

from __future__ import annotations

import copy
import logging
from typing import Any, Protocol, runtime_checkable

from vault_mcp.tools.errors import DuplicateToolError, ToolNotFoundError
from vault_mcp.tools.models import ToolDescriptor

logger = logging.getLogger(__name__)


@runtime_checkable
class Tool(Protocol):
    """A capability the server exposes through ``tools/call``.

    ``execute`` validates its own arguments.  It returns the success text
    shown to the client, or raises :class:`~vault_mcp.tools.errors.ToolError`
    with a message describing the failure.
    """

    name: str
    description: str
    input_schema: dict[str, Any]

    async def execute(self, arguments: dict[str, Any]) -> str: ...


class ToolRegistry:
    """Maintains the name-to-tool map and dispatches executions.

    Usage::

        registry = ToolRegistry()
        registry.register(SaveMarkdownFileTool(writer))

        descriptors = registry.list_tools()          # registration order
        text = await registry.execute("ping", {})    # routes by name
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._descriptors: dict[str, ToolDescriptor] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: Tool) -> ToolDescriptor:
        """Add *tool*; its descriptor is snapshotted at this point.

        Raises:
            DuplicateToolError: A tool with the same name is registered.
        """
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)

        descriptor = ToolDescriptor(
            name=tool.name,
            description=tool.description,
            input_schema=copy.deepcopy(tool.input_schema),
        )
        self._tools[tool.name] = tool
        self._descriptors[tool.name] = descriptor
        logger.debug("Registered tool %s", tool.name)
        return descriptor

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def list_tools(self) -> list[ToolDescriptor]:
        """Return descriptors in registration order."""
        return list(self._descriptors.values())

    async def execute(self, name: str, arguments: dict[str, Any]) -> str:
        """Run the named tool.  Tool errors propagate unchanged.

        Raises:
            ToolNotFoundError: No tool is registered under *name*.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return await tool.execute(arguments)
