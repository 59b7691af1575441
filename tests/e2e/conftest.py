"""Fixtures for E2E tests that drive ``python -m vault_mcp serve``."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    (root / "Tips").mkdir(parents=True)
    return root


@pytest.fixture
def config(tmp_path: Path, vault: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"vault:\n  path: {vault}\nserver:\n  name: e2e-vault\n  version: 9.9.9\nlogging:\n  level: debug\n",
        encoding="utf-8",
    )
    return path
