"""Tests for ``vault-mcp tools`` CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from vault_mcp.cli import main


class TestToolsList:
    def test_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list"])

        assert result.exit_code == 0, result.output
        assert "Available Tools" in result.output
        assert "ping" in result.output

    def test_json_matches_tools_list_payload(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list", "-c", str(config_file), "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        names = [t["name"] for t in payload["tools"]]
        assert names == ["save_markdown_file", "ping"]
        assert payload["tools"][0]["inputSchema"]["required"] == ["filename", "content"]

    def test_bad_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("- not\n- a mapping\n")

        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list", "-c", str(path)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
