"""Allow ``python -m tsbridge``."""

from tsbridge.cli import cli

cli(prog_name="tsbridge")
