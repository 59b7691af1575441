"""``vault-mcp config`` — inspect and initialise the configuration file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from vault_mcp.cli_commands._output import console, print_settings
from vault_mcp.settings.errors import SettingsError
from vault_mcp.settings.loader import default_config_path, load_settings, save_settings
from vault_mcp.settings.models import Settings


@click.group("config")
def config_cmd() -> None:
    """Inspect and initialise configuration."""


@config_cmd.command("path")
def path_cmd() -> None:
    """Print the default config file location."""
    console.print(str(default_config_path()), markup=False, highlight=False, soft_wrap=True)


@config_cmd.command("show")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="VAULT_MCP_CONFIG",
    default=None,
    help="Config file (default: per-user config.yaml if present).",
)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON instead of YAML.")
def show(config_path: Path | None, as_json: bool) -> None:
    """Print the effective configuration."""
    try:
        settings = load_settings(config_path)
    except SettingsError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    if as_json:
        console.print_json(settings.model_dump_json())
        return
    print_settings(settings)


@config_cmd.command("init")
@click.option(
    "--path",
    "target",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the file (default: per-user config.yaml).",
)
@click.option("--vault-path", default=None, help="Vault root to record in the new file.")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init(target: Path | None, vault_path: str | None, force: bool) -> None:
    """Write a config file populated with defaults."""
    destination = target or default_config_path()
    if destination.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {destination} (use --force to overwrite)")
        sys.exit(1)

    settings = Settings()
    if vault_path is not None:
        settings.vault.path = vault_path

    try:
        save_settings(settings, destination)
    except SettingsError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    console.print(f"[green]Wrote config to[/green] {destination}")
