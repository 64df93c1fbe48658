"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, enumplay.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- enumplay.toml sections ---


class DemoConfig(BaseModel):
    """[demo] section."""

    model_config = {"frozen": True}

    pages: list[str] = Field(default_factory=lambda: ["control-flow", "raw-values"])


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=20)

