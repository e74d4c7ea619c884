"""Tests for validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from onionctl.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_project")


def _write(path: Path, data: Any) -> Path:
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


class TestValidateCommand:
    def test_valid_file(self, cli_runner: CliRunner, config_path: Path) -> None:
        result = cli_runner.invoke(cli, ["validate", str(config_path)])
        assert result.exit_code == 0, result.output
        assert "OK: validate" in result.output

    def test_valid_file_json(self, cli_runner: CliRunner, config_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", str(config_path)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {"path": str(config_path), "valid": True}

    def test_reports_every_violation(
        self, cli_runner: CliRunner, tmp_path: Path, sample_wire: dict[str, Any]
    ) -> None:
        sample_wire["domainServiceConnections"]["UserService"] = ["NonExistentEntity"]
        sample_wire["uiFramework"] = "svelte"
        path = _write(tmp_path / "bad.json", sample_wire)

        result = cli_runner.invoke(cli, ["--json", "validate", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_CONFIG"
        errors = payload["error"]["detail"]["errors"]
        assert len(errors) == 2
        assert "NonExistentEntity" in errors[0]
        assert "svelte" in errors[1]

    def test_fail_fast_reports_first(
        self, cli_runner: CliRunner, tmp_path: Path, sample_wire: dict[str, Any]
    ) -> None:
        sample_wire["domainServiceConnections"]["UserService"] = ["NonExistentEntity"]
        sample_wire["uiFramework"] = "svelte"
        path = _write(tmp_path / "bad.json", sample_wire)

        result = cli_runner.invoke(cli, ["--json", "validate", str(path), "--fail-fast"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_CONFIG"
        assert payload["error"]["detail"]["errors"] == [payload["error"]["message"]]
        assert "NonExistentEntity" in payload["error"]["message"]

    def test_fail_fast_valid(self, cli_runner: CliRunner, config_path: Path) -> None:
        result = cli_runner.invoke(cli, ["validate", str(config_path), "--fail-fast"])
        assert result.exit_code == 0, result.output

    def test_human_error_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path / "empty.json", {})
        result = cli_runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "ERROR: validate - 4 violation(s)" in result.stderr
        assert "  - `uiFramework` is required." in result.stderr

    @pytest.mark.parametrize("fail_fast", [[], ["--fail-fast"]])
    def test_invalid_json(
        self, cli_runner: CliRunner, tmp_path: Path, fail_fast: list[str]
    ) -> None:
        path = _write(tmp_path / "broken.json", "{not json")
        result = cli_runner.invoke(cli, ["--json", "validate", str(path), *fail_fast])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_JSON"

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "LOAD_FAILED"
