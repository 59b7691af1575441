"""Configuration provider — YAML-backed settings for the server."""

from vault_mcp.settings.errors import SettingsError
from vault_mcp.settings.loader import (
    SettingsLoader,
    check_vault_path,
    default_config_path,
    load_settings,
    save_settings,
)
from vault_mcp.settings.models import (
    LoggingSettings,
    ServerSettings,
    Settings,
    TelemetrySettings,
    VaultSettings,
)

__all__ = [
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "SettingsError",
    "SettingsLoader",
    "TelemetrySettings",
    "VaultSettings",
    "check_vault_path",
    "default_config_path",
    "load_settings",
    "save_settings",
]
