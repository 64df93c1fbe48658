"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from enumplay.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["demo", "--help"], ["control-flow", "raw-values"]),
    (["variants", "--help"], ["[SET]"]),
    (["describe", "--help"], ["SET", "VARIANT"]),
    (["lookup", "--help"], ["SET", "RAW"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    HELP_COMMANDS,
    ids=[" ".join(args[:-1]) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Usage" in result.output
    for keyword in keywords:
        assert keyword in result.output
