"""Command: list closed sets, or the variants of one set."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumplay.commands._base import EnumplayCommand

if TYPE_CHECKING:
    from enumplay.commands._context import AppContext


@click.command(
    cls=EnumplayCommand,
    examples="""\
  enumplay variants
  enumplay variants month
  enumplay -q variants weekday""",
)
@click.argument("set_key", required=False, metavar="[SET]")
@click.pass_obj
def variants(app: AppContext, set_key: str | None) -> None:
    """List the known closed sets, or the variants of SET with raw values."""
    if set_key is None:
        app.emit(app.playground.list_sets())
    else:
        app.emit(app.playground.list_variants(set_key))
