"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TSBRIDGE_*`` prefix, ``__`` for nested sections
  3. TOML file    — resolved by :func:`tsbridge.config.discovery.resolve_config`
  4. Code defaults — baked into the section models

Bad values from any source surface as a ``click.ClickException`` naming
the offending field, never as a pydantic traceback.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tsbridge.config.discovery import read_config, resolve_config
from tsbridge.config.models import ClockConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the parsed ``tsbridge.toml`` into pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, which pydantic
# calls as a classmethod during __init__.
_tls = threading.local()


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "settings"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class TsSettings(BaseSettings):
    """Resolved settings for one tsbridge invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        clock: ``[clock]`` section selecting the system or a fixed clock.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TSBRIDGE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    clock: ClockConfig = Field(default_factory=ClockConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TsSettings:
        """Construct settings from CLI invocation.

        Raises:
            click.ClickException: On unparsable TOML or an invalid value.
        """
        toml_path = resolve_config(config_path, start)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = f" (config: {toml_path})" if toml_path else ""
            raise click.ClickException(f"Invalid settings{source}: {_describe(exc)}") from exc
        finally:
            _tls.toml_path = None
