"""Pydantic models for the configuration file consumed by ``vault-mcp serve``."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vault_mcp import __version__

DEFAULT_TARGET_DIRECTORY = "Tips"
DEFAULT_SERVER_NAME = "obsidian-vault"

_LOG_LEVELS = ("trace", "debug", "info", "warn", "warning", "error", "critical")


class VaultSettings(BaseModel):
    """Where notes are written."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(default="~/Documents/vault", description="Vault root directory.")
    target_directory: str = Field(
        default=DEFAULT_TARGET_DIRECTORY,
        description="Subdirectory of the vault that receives new notes.",
    )

    @field_validator("target_directory")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            msg = f"target_directory must be a single directory name, got {value!r}"
            raise ValueError(msg)
        return value

    @property
    def root(self) -> Path:
        """The vault path with ``~`` expanded."""
        return Path(self.path).expanduser()


class ServerSettings(BaseModel):
    """Identity reported in ``serverInfo``."""

    model_config = ConfigDict(extra="forbid")

    name: str = DEFAULT_SERVER_NAME
    version: str = __version__


class LoggingSettings(BaseModel):
    """Log level and sinks."""

    model_config = ConfigDict(extra="forbid")

    level: str = "info"
    file: str | None = None
    console: bool = True

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        lowered = value.lower()
        if lowered not in _LOG_LEVELS:
            msg = f"Invalid log level: {value}. Must be one of: {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return lowered


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    otlp_endpoint: str | None = None


class Settings(BaseModel):
    """Top-level configuration parsed from YAML."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultSettings = Field(default_factory=VaultSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
