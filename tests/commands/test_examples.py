"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from onionctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["init", "--examples"], ["onionctl init", "--ui-framework react"]),
    (["validate", "--examples"], ["--fail-fast"]),
    (["node", "--examples"], ["--kind domain-service", "onionctl node list"]),
    (["connect", "--examples"], ["UserAppService IUserRepository"]),
    (["disconnect", "--examples"], ["onionctl disconnect"]),
    (["targets", "--examples"], ["--current"]),
]


@pytest.mark.usefixtures("_isolated_project")
@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_help_does_not_include_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["connect", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "UserAppService IUserRepository" not in result.output
