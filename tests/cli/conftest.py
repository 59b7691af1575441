"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from vault_mcp.cli_commands import config as config_cmd_mod
from vault_mcp.settings import loader as loader_mod


@pytest.fixture(autouse=True)
def _isolated_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the per-user config location at an empty temp dir."""
    path = tmp_path / "app" / "config.yaml"
    monkeypatch.setattr(loader_mod, "default_config_path", lambda: path)
    monkeypatch.setattr(config_cmd_mod, "default_config_path", lambda: path)
    monkeypatch.delenv("VAULT_MCP_CONFIG", raising=False)
    monkeypatch.delenv("VAULT_MCP_VAULT_PATH", raising=False)
    return path


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    (root / "Tips").mkdir(parents=True)
    return root


@pytest.fixture
def config_file(tmp_path: Path, vault: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"vault:\n  path: {vault}\n  target_directory: Tips\nlogging:\n  console: false\n",
        encoding="utf-8",
    )
    return path
