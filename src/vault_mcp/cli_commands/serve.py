"""``vault-mcp serve`` — run the MCP server over stdin/stdout."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from vault_mcp.cli_commands._output import err_console
from vault_mcp.settings.errors import SettingsError
from vault_mcp.settings.loader import load_settings
from vault_mcp.settings.models import Settings, VaultSettings

_LEVEL_CHOICES = ["trace", "debug", "info", "warn", "warning", "error", "critical"]


def apply_overrides(
    settings: Settings,
    *,
    vault_path: Path | None = None,
    target_directory: str | None = None,
    log_level: str | None = None,
    telemetry: bool = False,
) -> Settings:
    """Return *settings* with command-line overrides applied (validated)."""
    vault = settings.vault.model_dump()
    if vault_path is not None:
        vault["path"] = str(vault_path)
    if target_directory is not None:
        vault["target_directory"] = target_directory

    try:
        settings.vault = VaultSettings.model_validate(vault)
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc

    if log_level is not None:
        settings.logging.level = log_level.lower()
    if telemetry:
        settings.telemetry.enabled = True
    return settings


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="VAULT_MCP_CONFIG",
    default=None,
    help="Config file (default: per-user config.yaml if present).",
)
@click.option(
    "--vault-path",
    "-v",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="VAULT_MCP_VAULT_PATH",
    default=None,
    help="Override the vault root directory.",
)
@click.option("--target-directory", default=None, help="Override the subdirectory notes go to.")
@click.option(
    "--log-level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Override the log level.",
)
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
@click.option("--sync", is_flag=True, help="Use the blocking loop instead of asyncio.")
def serve(
    config_path: Path | None,
    vault_path: Path | None,
    target_directory: str | None,
    log_level: str | None,
    telemetry: bool,
    sync: bool,
) -> None:
    """Serve MCP requests on stdin/stdout until end-of-input."""
    from vault_mcp.protocol.errors import TransportError
    from vault_mcp.server import VaultServer

    try:
        settings = apply_overrides(
            load_settings(config_path),
            vault_path=vault_path,
            target_directory=target_directory,
            log_level=log_level,
            telemetry=telemetry,
        )
    except SettingsError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    server = VaultServer(settings)

    try:
        server.run(sync=sync)
    except SettingsError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)
    except TransportError as exc:
        err_console.print(f"[red]Transport error:[/red] {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("Interrupted, shutting down.")
