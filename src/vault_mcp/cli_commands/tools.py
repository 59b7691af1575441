"""``vault-mcp tools`` — inspect the tools the server exposes."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from vault_mcp.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """Inspect built-in tools."""


@tools.command("list")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="VAULT_MCP_CONFIG",
    default=None,
    help="Config file (default: per-user config.yaml if present).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def list_tools(config_path: Path | None, as_json: bool) -> None:
    """List tools in the order ``tools/list`` reports them."""
    from vault_mcp.server import build_registry
    from vault_mcp.settings.errors import SettingsError
    from vault_mcp.settings.loader import load_settings
    from vault_mcp.vault.writer import VaultWriter

    try:
        settings = load_settings(config_path)
    except SettingsError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    writer = VaultWriter(settings.vault.root, settings.vault.target_directory)
    descriptors = build_registry(writer).list_tools()

    if as_json:
        console.print_json(json.dumps({"tools": [d.to_wire() for d in descriptors]}))
        return

    print_tools_table(descriptors)
