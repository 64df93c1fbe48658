"""Subcommand modules for enumplay.

Provides register_commands() which uses deferred imports to keep
``enumplay --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from enumplay.commands.demo import demo
    from enumplay.commands.describe import describe
    from enumplay.commands.lookup import lookup
    from enumplay.commands.variants import variants

    cli.add_command(demo)
    cli.add_command(variants)
    cli.add_command(describe)
    cli.add_command(lookup)
