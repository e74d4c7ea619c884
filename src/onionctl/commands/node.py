"""Command group: add, remove and list nodes of a configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from onionctl.commands._base import OnionGroup, config_path_argument
from onionctl.domain.errors import InvalidNodeNameError
from onionctl.domain.names import validate_node_name
from onionctl.domain.types import Ring
from onionctl.services.result import ServiceResult

if TYPE_CHECKING:
    from onionctl.commands._context import AppContext

_KINDS = ("entity", "domain-service", "application-service")


@click.group(
    cls=OnionGroup,
    examples="""\
  onionctl node add onion-config.json User
  onionctl node add onion-config.json UserService --kind domain-service
  onionctl node add onion-config.json UserAppService --kind application-service
  onionctl node remove onion-config.json UserService
  onionctl node list onion-config.json""",
)
def node() -> None:
    """Manage entities, domain services and application services."""


@node.command()
@config_path_argument
@click.argument("name")
@click.option("--kind", type=click.Choice(_KINDS), default="entity", show_default=True)
@click.pass_obj
def add(app: AppContext, path: Path, name: str, kind: str) -> None:
    """Add NAME to the configuration at PATH.

    Markup is stripped from NAME and its first letter is upper-cased. The
    result must be an identifier no other node already uses.
    """
    facade = app.open(path, op="add_node")
    data = facade.get_data()
    taken = [
        *data.entities,
        *data.domain_services,
        *data.application_services,
        *facade.get_repositories(),
    ]
    try:
        name = validate_node_name(name, taken)
    except InvalidNodeNameError as exc:
        app.fail("add_node", "INVALID_NAME", str(exc), name=name)

    if kind == "entity":
        config = facade.add_entity(name)
    elif kind == "domain-service":
        config = facade.add_domain_service(name)
    else:
        config = facade.add_application_service(name)
    app.save(path, config)
    app.emit(ServiceResult(ok=True, op="add_node", data={"name": name, "kind": kind}))


@node.command()
@config_path_argument
@click.argument("name")
@click.pass_obj
def remove(app: AppContext, path: Path, name: str) -> None:
    """Remove NAME and every reference to it."""
    facade = app.open(path, op="remove_node")
    ring = facade.get_ring(name)
    before = facade.get_data()
    config = facade.remove_node(name)
    warnings: list[str] = []
    if config is before:
        warnings.append(f'"{name}" is not part of the configuration')
    else:
        app.save(path, config)
    app.emit(
        ServiceResult(
            ok=True,
            op="remove_node",
            data={"name": name, "ring": str(ring) if ring else None},
            warnings=warnings,
        )
    )


@node.command("list")
@config_path_argument
@click.pass_obj
def list_nodes(app: AppContext, path: Path) -> None:
    """List every node with its ring and current targets."""
    facade = app.open(path, op="list_nodes")
    data = facade.get_data()
    nodes: list[dict[str, Any]] = []
    rings = (
        (Ring.ENTITIES, data.entities),
        (Ring.DOMAIN_SERVICES, data.domain_services),
        (Ring.APPLICATION_SERVICES, data.application_services),
        (Ring.REPOSITORIES, facade.get_repositories()),
    )
    for ring, names in rings:
        for name in dict.fromkeys(names):
            nodes.append(
                {"name": name, "ring": str(ring), "targets": facade.get_current_targets(name)}
            )
    app.emit(ServiceResult(ok=True, op="list_nodes", data={"nodes": nodes, "count": len(nodes)}))
