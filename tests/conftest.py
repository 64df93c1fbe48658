"""Shared pytest fixtures for enumplay tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from enumplay.services.playground import PlaygroundService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def playground() -> PlaygroundService:
    return PlaygroundService()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory so no enumplay.toml is discovered."""
    monkeypatch.delenv("ENUMPLAY_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ep = logging.getLogger("enumplay")
    ep_level = ep.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ep.setLevel(ep_level)
