"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from popmelt.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["talents", "--examples"], ["popmelt talents list", "popmelt talents query"]),
    (["talents", "show", "--examples"], ["popmelt talents show maya-chen"]),
    (["talents", "query", "--examples"], ["-w keywords=vibrant"]),
    (["css", "--examples"], ["--state focus", "-p radius=8px"]),
    (["serve", "--examples"], ["--transport streamable-http"]),
    (["env", "--examples"], ["popmelt env"]),
]


@pytest.mark.parametrize(("args", "expected"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in expected:
        assert keyword in result.output


def test_help_lists_commands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for name in ("talents", "css", "serve", "env"):
        assert name in result.output


def test_no_subcommand_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "popmelt, version 1.0.0" in result.output
