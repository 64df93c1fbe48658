"""Command: describe one variant with every matching function of its set."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enumplay.commands._base import EnumplayCommand

if TYPE_CHECKING:
    from enumplay.commands._context import AppContext


@click.command(
    cls=EnumplayCommand,
    examples="""\
  enumplay describe weekday saturday
  enumplay describe course ios-advanced
  enumplay --json describe month march""",
)
@click.argument("set_key", metavar="SET")
@click.argument("variant")
@click.pass_obj
def describe(app: AppContext, set_key: str, variant: str) -> None:
    """Describe VARIANT of SET."""
    app.emit(app.playground.describe(set_key, variant))
