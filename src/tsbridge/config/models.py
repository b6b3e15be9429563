"""Pydantic models for ``tsbridge.toml`` sections.

Sparse TOML contract: defaults baked here, the file only holds overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ClockConfig(BaseModel):
    """[clock] section: ``system`` reads the host, ``fixed`` pins the instant."""

    model_config = {"frozen": True}

    source: Literal["system", "fixed"] = "system"
    fixed_seconds: int = 0
    fixed_nanoseconds: int = 0
