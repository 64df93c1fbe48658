"""Tests for the describe CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from enumplay.cli import cli


class TestDescribeCommand:
    def test_weekday(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["describe", "weekday", "monday"])
        assert result.exit_code == 0
        assert "Monday is a regular workday." in result.output

    def test_course_dash_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "describe", "course", "ios-advanced"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["descriptions"] == {
            "name": "Advanced Topics in iOS & Swift",
            "type": "Mobile",
            "mobile": "True",
        }

    def test_unknown_variant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "describe", "month", "smarch"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "UNKNOWN_VARIANT"
