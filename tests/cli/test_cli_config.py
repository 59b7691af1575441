"""Tests for ``vault-mcp config`` CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from vault_mcp.cli import main


class TestConfigPath:
    def test_prints_default_location(self, _isolated_default_config: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["config", "path"])

        assert result.exit_code == 0
        assert result.output.strip().endswith("config.yaml")


class TestConfigShow:
    def test_defaults_when_no_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["config", "show"])

        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert data["vault"]["target_directory"] == "Tips"
        assert data["server"]["name"] == "obsidian-vault"

    def test_from_file_as_json(self, config_file: Path, vault: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["config", "show", "-c", str(config_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["vault"]["path"] == str(vault)
        assert data["logging"]["console"] is False

    def test_from_env(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["config", "show", "--json"], env={"VAULT_MCP_CONFIG": str(config_file)})

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["logging"]["console"] is False

    def test_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("vault:\n  unknown_key: 1\n")

        runner = CliRunner()
        result = runner.invoke(main, ["config", "show", "-c", str(path)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestConfigInit:
    def test_writes_default_location(self, _isolated_default_config: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["config", "init"])

        assert result.exit_code == 0, result.output
        assert "Wrote config to" in result.output
        data = yaml.safe_load(_isolated_default_config.read_text())
        assert data["vault"]["path"] == "~/Documents/vault"

    def test_explicit_path_and_vault(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "c.yaml"

        runner = CliRunner()
        result = runner.invoke(main, ["config", "init", "--path", str(target), "--vault-path", "/srv/notes"])

        assert result.exit_code == 0, result.output
        assert yaml.safe_load(target.read_text())["vault"]["path"] == "/srv/notes"

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        target = tmp_path / "c.yaml"
        target.write_text("keep: me\n")

        runner = CliRunner()
        result = runner.invoke(main, ["config", "init", "--path", str(target)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert target.read_text() == "keep: me\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        target = tmp_path / "c.yaml"
        target.write_text("keep: me\n")

        runner = CliRunner()
        result = runner.invoke(main, ["config", "init", "--path", str(target), "--force"])

        assert result.exit_code == 0, result.output
        assert "vault" in yaml.safe_load(target.read_text())
