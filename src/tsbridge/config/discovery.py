"""Locate and read ``tsbridge.toml``.

Lookup order: an explicit ``--config`` path, then the ``TSBRIDGE_CONFIG``
env var, then a walk up from the working directory. A missing file is not
an error; a file that does not parse is.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "tsbridge.toml"
CONFIG_ENV_VAR = "TSBRIDGE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``tsbridge.toml`` at or above *start* (default: cwd).

    ``TSBRIDGE_CONFIG`` short-circuits the walk, and yields None when it
    names a file that does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for a CLI run.

    An explicit *config_path* wins and disables discovery; if it does not
    exist, no file is used.
    """
    if config_path:
        p = Path(config_path)
        return p if p.is_file() else None
    return find_config(start)


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into a raw settings dict; ``{}`` when there is no file.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
