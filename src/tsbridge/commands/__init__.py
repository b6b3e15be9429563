"""Subcommand modules for tsbridge.

Provides register_commands() which uses deferred imports to keep
``tsbridge --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from tsbridge.commands.demo import demo
    from tsbridge.commands.show import show

    cli.add_command(demo)
    cli.add_command(show)
