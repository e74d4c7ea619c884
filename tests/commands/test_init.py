"""Tests for init CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from onionctl.cli import cli
from tests.conftest import read_json

pytestmark = pytest.mark.usefixtures("_isolated_project")


class TestInitCommand:
    def test_init_default_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert "OK: init" in result.output
        data = read_json(tmp_path / "onion-config.json")
        assert data == {
            "folderPath": "",
            "entities": [],
            "domainServices": [],
            "applicationServices": [],
            "domainServiceConnections": {},
            "applicationServiceDependencies": {},
            "uiFramework": "vanilla",
            "diFramework": "awilix",
        }

    def test_init_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "arch.json"
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "init",
                str(path),
                "--folder",
                "src/app",
                "--ui-framework",
                "react",
                "--di-framework",
                "angular",
            ],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "init"
        assert payload["data"] == {
            "path": str(path),
            "uiFramework": "react",
            "diFramework": "angular",
        }
        written = read_json(path)
        assert written["folderPath"] == "src/app"
        assert written["uiFramework"] == "react"

    def test_init_refuses_overwrite(self, cli_runner: CliRunner, config_path: Path) -> None:
        before = config_path.read_text()
        result = cli_runner.invoke(cli, ["--json", "init", str(config_path)])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "EXISTS"
        assert config_path.read_text() == before

    def test_init_force(self, cli_runner: CliRunner, config_path: Path) -> None:
        result = cli_runner.invoke(cli, ["init", str(config_path), "--force"])
        assert result.exit_code == 0, result.output
        assert read_json(config_path)["entities"] == []

    def test_init_rejects_unknown_framework(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["init", "--ui-framework", "svelte"])
        assert result.exit_code == 2

    def test_init_output_validates(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["init"])
        result = cli_runner.invoke(cli, ["validate", "onion-config.json"])
        assert result.exit_code == 0, result.output
