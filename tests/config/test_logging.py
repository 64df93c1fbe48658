"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from enumplay.config.logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("enumplay.test").debug("raw_lookup", raw="↑", found=True)
        captured = capfd.readouterr()
        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "raw_lookup"
        assert parsed["raw"] == "↑"
        assert parsed["found"] is True
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "enumplay.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_routed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("enumplay.stdlib").warning("plain %s", "message")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "plain message"
        assert parsed["level"] == "warning"

    def test_debug_suppressed_when_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("enumplay.test").debug("hidden")
        assert capfd.readouterr().err == ""
