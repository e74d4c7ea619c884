"""OnionSettings — CLI flags, env vars and ``onionctl.toml`` merged into one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ONIONCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``--config`` / ``ONIONCTL_CONFIG``, else :func:`find_config`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from onionctl.config.discovery import find_config
from onionctl.config.models import DefaultsConfig, OutputConfig

# TOML file for the settings object currently being constructed.
_toml_path: ContextVar[Path | None] = ContextVar("onionctl_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``onionctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class OnionSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        project_root: Directory holding ``onionctl.toml``, or CWD if none found.
        config_path: The ``onionctl.toml`` in effect, or None.
        no_color: Disable ANSI styling in human output.
        defaults: Frameworks written into new configuration files.
        output: JSON formatting of written configuration files.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ONIONCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the TOML file. No dotenv or secrets."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_path.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> OnionSettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* must exist. Without one, ``onionctl.toml``
        is discovered by walking up from *project_root* (default: CWD).

        Raises:
            click.ClickException: If the TOML file is missing, unparsable, or
                holds values the section models reject.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        token = _toml_path.set(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid settings ({source}): {exc.error_count()} error(s)\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_path.reset(token)
