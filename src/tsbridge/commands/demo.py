"""Command: read the clock and print every rendering of it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsbridge.commands._base import TsCommand

if TYPE_CHECKING:
    from tsbridge.commands._context import AppContext


@click.command(
    cls=TsCommand,
    examples="""\
  tsbridge demo
  tsbridge --json demo
  TSBRIDGE_CLOCK__SOURCE=fixed TSBRIDGE_CLOCK__FIXED_SECONDS=1700000000 tsbridge demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Convert the current time both ways and print the four renderings."""
    from tsbridge.services.roundtrip import RoundTripService

    app.emit(RoundTripService(app.clock).demo())
