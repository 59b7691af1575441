"""``save_markdown_file`` — write a new note into the vault's target directory."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, StrictStr, ValidationError

from vault_mcp.tools.errors import ToolArgumentsError
from vault_mcp.utils.validation import describe_validation_error

if TYPE_CHECKING:
    from vault_mcp.vault.writer import VaultWriter

TOOL_NAME = "save_markdown_file"


class SaveMarkdownFileArgs(BaseModel):
    """Arguments accepted by ``save_markdown_file``."""

    filename: StrictStr
    content: StrictStr


class SaveMarkdownFileTool:
    """Persist markdown content as ``<filename>.md`` via a :class:`VaultWriter`.

    Satisfies the :class:`~vault_mcp.tools.registry.Tool` protocol.
    """

    name = TOOL_NAME
    description = "Save a markdown file to the Obsidian vault"

    def __init__(self, writer: VaultWriter) -> None:
        self._writer = writer
        self.input_schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                "filename": {
                    "type": "string",
                    "description": "The filename for the markdown file (without .md extension)",
                },
                "content": {
                    "type": "string",
                    "description": "The markdown content to save",
                },
            },
            "required": ["filename", "content"],
        }

    async def execute(self, arguments: dict[str, Any]) -> str:
        """Validate *arguments* and write the file off the event loop."""
        try:
            args = SaveMarkdownFileArgs.model_validate(arguments)
        except ValidationError as exc:
            raise ToolArgumentsError(self.name, describe_validation_error(exc)) from exc

        path = await asyncio.to_thread(self._writer.save, args.filename, args.content)

        return json.dumps(
            {
                "file_path": str(path),
                "message": f"Successfully saved markdown file: {args.filename}",
            },
            indent=2,
        )
