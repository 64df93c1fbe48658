"""Tests for the format_result dispatcher and OutputSettings."""

import json

from enumplay.output.formatters import OutputSettings, format_result
from enumplay.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.width is None


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("lookup", id="march"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "lookup"
        assert data["data"]["id"] == "march"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("lookup", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["op"] == "test"


class TestFormatResultModes:
    def test_quiet(self) -> None:
        assert format_result(_ok("lookup", id="march"), settings=OutputSettings(quiet=True)) == "march"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("custom", k="v"))
        assert output.startswith("OK")
        assert "k: v" in output
