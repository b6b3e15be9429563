"""Command: render a given (seconds, nanoseconds) pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsbridge.commands._base import TsCommand

if TYPE_CHECKING:
    from tsbridge.commands._context import AppContext


@click.command(
    cls=TsCommand,
    examples="""\
  tsbridge show 0
  tsbridge show 1700000000 123000000
  tsbridge show 1700000000 1500000000
  tsbridge show -- -1 500000000""",
)
@click.argument("seconds", type=int)
@click.argument("nanoseconds", type=int, default=0)
@click.pass_obj
def show(app: AppContext, seconds: int, nanoseconds: int) -> None:
    """Render SECONDS and NANOSECONDS since the epoch as UTC timestamps."""
    from tsbridge.services.roundtrip import RoundTripService

    app.emit(RoundTripService(app.clock).show(seconds, nanoseconds))
