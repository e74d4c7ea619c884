"""Command: create an empty configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from onionctl.commands._base import OnionCommand
from onionctl.domain.types import (
    VALID_DI_FRAMEWORKS,
    VALID_UI_FRAMEWORKS,
    DiFramework,
    UiFramework,
)
from onionctl.infrastructure.config_file import DEFAULT_CONFIG_NAME
from onionctl.services.result import ServiceResult

if TYPE_CHECKING:
    from onionctl.commands._context import AppContext


@click.command(
    "init",
    cls=OnionCommand,
    examples="""\
  onionctl init
  onionctl init architecture.json --ui-framework react
  onionctl init onion-config.json --di-framework angular --force""",
)
@click.argument("path", type=click.Path(path_type=Path), default=DEFAULT_CONFIG_NAME)
@click.option("--folder", "folder_path", default="", help="Target folder recorded in the file.")
@click.option("--ui-framework", type=click.Choice(VALID_UI_FRAMEWORKS), default=None)
@click.option("--di-framework", type=click.Choice(VALID_DI_FRAMEWORKS), default=None)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: Path,
    folder_path: str,
    ui_framework: str | None,
    di_framework: str | None,
    force: bool,
) -> None:
    """Write an empty configuration to PATH."""
    if path.exists() and not force:
        app.fail("init", "EXISTS", f"{path} already exists (use --force to overwrite)")

    facade = app.new_facade()
    overrides: dict[str, object] = {"folder_path": folder_path}
    if ui_framework:
        overrides["ui_framework"] = UiFramework(ui_framework)
    if di_framework:
        overrides["di_framework"] = DiFramework(di_framework)
    config = facade.update(lambda current: current.model_copy(update=overrides))
    wire = config.to_wire()
    app.save(path, config)
    app.emit(
        ServiceResult(
            ok=True,
            op="init",
            data={
                "path": str(path),
                "uiFramework": wire["uiFramework"],
                "diFramework": wire["diFramework"],
            },
        )
    )
