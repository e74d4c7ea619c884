"""Command: validate a configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from onionctl.commands._base import OnionCommand, config_path_argument
from onionctl.domain.errors import ConfigParseError, ConfigValidationError
from onionctl.services.result import ServiceResult

if TYPE_CHECKING:
    from onionctl.commands._context import AppContext


@click.command(
    cls=OnionCommand,
    examples="""\
  onionctl validate onion-config.json
  onionctl validate onion-config.json --fail-fast
  onionctl --json validate onion-config.json""",
)
@config_path_argument
@click.option("--fail-fast", is_flag=True, help="Stop at the first violation.")
@click.pass_obj
def validate(app: AppContext, path: Path, fail_fast: bool) -> None:
    """Check PATH against every structural rule."""
    from onionctl.infrastructure.config_file import read_config_file

    try:
        file = read_config_file(path)
    except ValueError as exc:
        app.fail("validate", "LOAD_FAILED", str(exc), path=str(path))

    facade = app.new_facade()
    if fail_fast:
        try:
            facade.is_user_config_valid(file)
        except ConfigParseError as exc:
            app.fail("validate", "INVALID_JSON", str(exc), path=str(path))
        except ConfigValidationError as exc:
            app.fail("validate", "INVALID_CONFIG", str(exc), path=str(path), errors=exc.errors)
        app.emit(ServiceResult(ok=True, op="validate", data={"path": str(path), "valid": True}))
        return

    try:
        report = facade.validate_file(file)
    except ConfigParseError as exc:
        app.fail("validate", "INVALID_JSON", str(exc), path=str(path))

    if not report.valid:
        app.fail(
            "validate",
            "INVALID_CONFIG",
            f"{len(report.errors)} violation(s) in {path}",
            path=str(path),
            errors=report.errors,
        )
    app.emit(ServiceResult(ok=True, op="validate", data={"path": str(path), "valid": True}))
