"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, onionctl.toml only contains overrides.
A project needs no onionctl.toml at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from onionctl.domain.types import DiFramework, UiFramework

# --- onionctl.toml sections ---


class DefaultsConfig(BaseModel):
    """[defaults] section — framework values for new configurations."""

    model_config = {"frozen": True}

    ui_framework: UiFramework = UiFramework.VANILLA
    di_framework: DiFramework = DiFramework.AWILIX


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = 2

