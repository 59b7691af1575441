"""Shared CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from vault_mcp.settings.models import Settings
    from vault_mcp.tools.models import ToolDescriptor

console = Console()
# ``serve`` owns stdout for protocol traffic, so its diagnostics go here.
err_console = Console(stderr=True)


def print_tools_table(descriptors: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Available Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for descriptor in descriptors:
        required = descriptor.input_schema.get("required", [])
        table.add_row(
            descriptor.name,
            _truncate(descriptor.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def print_settings(settings: Settings) -> None:
    """Print settings as YAML."""
    text = yaml.safe_dump(settings.model_dump(), sort_keys=False)
    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
