"""Tool layer — registry and built-in tools."""

from vault_mcp.tools.errors import (
    DuplicateToolError,
    ToolArgumentsError,
    ToolError,
    ToolNotFoundError,
)
from vault_mcp.tools.models import ToolDescriptor
from vault_mcp.tools.ping import PingTool
from vault_mcp.tools.registry import Tool, ToolRegistry
from vault_mcp.tools.save_markdown import SaveMarkdownFileTool

__all__ = [
    "DuplicateToolError",
    "PingTool",
    "SaveMarkdownFileTool",
    "Tool",
    "ToolArgumentsError",
    "ToolDescriptor",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistry",
]
