"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables and styled fields),
for scripts (``--quiet``) or for machines (``--json``).  The formatter
layer picks the mode; the renderers do the drawing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from enumplay.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from enumplay.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, width=settings.width)
