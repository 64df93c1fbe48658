"""Tests for operation-specific renderers."""

from enumplay.output.renderers import render_quiet, render_result
from enumplay.services.playground import PlaygroundService
from enumplay.services.result import ServiceResult, fail


class TestRenderDemo:
    def test_lines_verbatim(self) -> None:
        result = ServiceResult(ok=True, op="demo", data={"lines": ["a [b]", ":-)"]})
        assert render_result(result) == "a [b]\n:-)"

    def test_long_lines_not_wrapped(self) -> None:
        line = "x" * 150
        result = ServiceResult(ok=True, op="demo", data={"lines": [line]})
        assert render_result(result, width=40) == line


class TestRenderTables:
    def test_list_sets(self, playground: PlaygroundService) -> None:
        output = render_result(playground.list_sets(), width=160)
        assert "weekday-zero" in output
        assert "Weekday1" in output

    def test_list_variants_with_raw(self, playground: PlaygroundService) -> None:
        output = render_result(playground.list_variants("direction"))
        assert "north" in output
        assert "↑" in output

    def test_list_variants_without_raw(self, playground: PlaygroundService) -> None:
        output = render_result(playground.list_variants("course"))
        assert "ios_advanced" in output
        assert "Raw value" not in output


class TestRenderVariant:
    def test_describe(self, playground: PlaygroundService) -> None:
        output = render_result(playground.describe("month", "april"))
        assert output.startswith("OK")
        assert "raw_value: 4" in output
        assert "position: April is the 4th month of the year" in output


class TestRenderError:
    def test_error_line(self) -> None:
        output = render_result(fail("lookup", "NOT_FOUND", "No Month variant"))
        assert output.startswith("ERROR")
        assert "lookup" in output
        assert "No Month variant" in output

    def test_choices_listed(self, playground: PlaygroundService) -> None:
        output = render_result(playground.describe("face", "angry"))
        assert "choices: happy, sad, nerd" in output


class TestRenderGeneric:
    def test_unknown_op(self) -> None:
        output = render_result(ServiceResult(ok=True, op="custom", data={"k": "v"}))
        assert "custom" in output
        assert "k: v" in output


class TestRenderQuiet:
    def test_demo_lines(self) -> None:
        result = ServiceResult(ok=True, op="demo", data={"lines": ["a", "b"]})
        assert render_quiet(result) == "a\nb"

    def test_item_ids(self, playground: PlaygroundService) -> None:
        assert render_quiet(playground.list_variants("face")) == "happy\nsad\nnerd"

    def test_single_id(self, playground: PlaygroundService) -> None:
        assert render_quiet(playground.lookup("face", ":-(")) == "sad"

    def test_fallback(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="noop")) == "OK: noop"

    def test_error(self) -> None:
        assert render_quiet(fail("lookup", "NOT_FOUND", "nope")) == "ERROR: lookup — nope"
