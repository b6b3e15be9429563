"""Root CLI group for tsbridge with global flags and command registration."""

from __future__ import annotations

import click

from tsbridge import __version__
from tsbridge.commands import register_commands
from tsbridge.commands._base import TsGroup
from tsbridge.commands._context import AppContext
from tsbridge.config.settings import TsSettings


@click.group(
    cls=TsGroup,
    invoke_without_command=True,
    examples="""\
  tsbridge
  tsbridge -v
  tsbridge --log-json -v demo
  tsbridge -c ./tsbridge.toml show 0 5""",
)
@click.version_option(version=__version__, prog_name="tsbridge")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the round-trip rendering.")
@click.option("-v", "--verbose", is_flag=True, help="Label renderings and show debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tsbridge — round-trip UTC instants through seconds+nanoseconds.

    With no command, runs ``demo``.
    """
    settings = TsSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from tsbridge.commands.demo import demo

        ctx.invoke(demo)


register_commands(cli)
