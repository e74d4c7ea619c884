"""Commands: connect, disconnect, and list connection targets."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from onionctl.commands._base import OnionCommand, config_path_argument
from onionctl.services.result import ServiceResult

if TYPE_CHECKING:
    from onionctl.commands._context import AppContext
    from onionctl.services.result import ConnectionResult


@click.command(
    cls=OnionCommand,
    examples="""\
  onionctl connect onion-config.json UserService User
  onionctl connect onion-config.json UserAppService UserService
  onionctl connect onion-config.json UserAppService IUserRepository""",
)
@config_path_argument
@click.argument("source")
@click.argument("target")
@click.pass_obj
def connect(app: AppContext, path: Path, source: str, target: str) -> None:
    """Connect SOURCE to TARGET (one ring inward)."""
    facade = app.open(path, op="add_connection")
    _emit_connection(app, path, "add_connection", facade.add_connection(source, target))


@click.command(
    cls=OnionCommand,
    examples="""\
  onionctl disconnect onion-config.json UserService User""",
)
@config_path_argument
@click.argument("source")
@click.argument("target")
@click.pass_obj
def disconnect(app: AppContext, path: Path, source: str, target: str) -> None:
    """Remove the connection from SOURCE to TARGET."""
    facade = app.open(path, op="remove_connection")
    _emit_connection(app, path, "remove_connection", facade.remove_connection(source, target))


@click.command(
    cls=OnionCommand,
    examples="""\
  onionctl targets onion-config.json UserAppService
  onionctl targets onion-config.json UserAppService --current""",
)
@config_path_argument
@click.argument("source")
@click.option("--current", is_flag=True, help="Show existing targets instead of possible ones.")
@click.pass_obj
def targets(app: AppContext, path: Path, source: str, current: bool) -> None:
    """List the nodes SOURCE can connect to (or is connected to)."""
    facade = app.open(path, op="targets")
    found = facade.get_current_targets(source) if current else facade.get_possible_targets(source)
    ring = facade.get_ring(source)
    app.emit(
        ServiceResult(
            ok=True,
            op="targets",
            data={
                "source": source,
                "ring": str(ring) if ring else None,
                "mode": "current" if current else "possible",
                "targets": found,
            },
        )
    )


def _emit_connection(app: AppContext, path: Path, op: str, result: ConnectionResult) -> None:
    if not result.success or result.data is None:
        app.fail(op, "CONNECTION_REJECTED", result.message)
    app.save(path, result.data)
    app.emit(ServiceResult(ok=True, op=op, data={"message": result.message}))
