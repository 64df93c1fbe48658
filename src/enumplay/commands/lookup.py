"""Command: find a variant by its raw value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumplay.commands._base import EnumplayCommand

if TYPE_CHECKING:
    from enumplay.commands._context import AppContext


@click.command(
    cls=EnumplayCommand,
    examples="""\
  enumplay lookup month 3
  enumplay lookup direction ↑
  enumplay lookup face ':-('""",
)
@click.argument("set_key", metavar="SET")
@click.argument("raw")
@click.pass_obj
def lookup(app: AppContext, set_key: str, raw: str) -> None:
    """Find the variant of SET whose raw value is RAW (exit 1 if none)."""
    app.emit(app.playground.lookup(set_key, raw))
