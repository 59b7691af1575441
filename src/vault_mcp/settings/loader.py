"""Settings loading, saving, and startup validation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import ValidationError

from vault_mcp.settings.errors import SettingsError
from vault_mcp.settings.models import Settings

logger = logging.getLogger(__name__)

APP_NAME = "vault-mcp"
CONFIG_FILENAME = "config.yaml"


def default_config_path() -> Path:
    """Return the per-user config file location (``<app dir>/config.yaml``)."""
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILENAME


class SettingsLoader:
    """Load and validate a YAML config file into :class:`Settings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Settings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.  An empty file
        yields the defaults.

        Raises:
            SettingsError: On read errors, YAML parse errors, or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("Config YAML must be a mapping")

        try:
            return Settings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from *path*, or from the default location if present.

    An explicit *path* must exist.  When no path is given and the default
    file is absent, built-in defaults are returned.
    """
    if path is not None:
        return SettingsLoader(path).load()

    default = default_config_path()
    if not default.exists():
        logger.debug("No config file at %s, using defaults", default)
        return Settings()
    logger.debug("Loading config from %s", default)
    return SettingsLoader(default).load()


def save_settings(settings: Settings, path: Path) -> None:
    """Write *settings* as YAML, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(settings.model_dump(), sort_keys=False),
            encoding="utf-8",
        )
    except OSError as exc:
        raise SettingsError(f"Cannot write {path}: {exc}") from exc
    logger.info("Config saved to %s", path)


def check_vault_path(settings: Settings) -> None:
    """Validate the vault root before serving.

    A missing vault only warns (writes will fail until it exists); a path that
    exists but is not a directory is an error.
    """
    root = settings.vault.root
    if not root.exists():
        logger.warning("Vault path does not exist: %s", root)
    elif not root.is_dir():
        raise SettingsError(f"Vault path is not a directory: {root}")
