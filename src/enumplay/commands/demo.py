"""Command: run playground pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumplay.commands._base import EnumplayCommand
from enumplay.pages import PAGES

if TYPE_CHECKING:
    from enumplay.commands._context import AppContext


@click.command(
    cls=EnumplayCommand,
    examples="""\
  enumplay demo
  enumplay demo control-flow
  enumplay demo raw-values control-flow
  enumplay --json demo raw-values""",
)
@click.argument("pages", nargs=-1, type=click.Choice(sorted(PAGES)))
@click.pass_obj
def demo(app: AppContext, pages: tuple[str, ...]) -> None:
    """Run playground PAGES in order (default: the [demo] pages setting)."""
    selected = list(pages) or app.settings.demo.pages
    app.emit(app.playground.run_pages(selected))
