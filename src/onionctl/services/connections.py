"""ConnectionService — edges between rings.

Edges always point inward by exactly the distance the onion allows:

- Domain Service → Entity
- Application Service → Domain Service
- Application Service → Repository

Application services never reach entities directly; entities and
repositories never start an edge. Edges live only in
``domain_service_connections`` and ``application_service_dependencies``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from onionctl.domain.onion_config import AppServiceDependencies, OnionConfig
from onionctl.domain.repositories import get_repositories, get_ring, is_valid_repository
from onionctl.domain.types import Ring
from onionctl.services.base import BaseService
from onionctl.services.result import ConnectionResult

logger = logging.getLogger(__name__)


class EdgeKind(StrEnum):
    """The three legal edge kinds."""

    DOMAIN_TO_ENTITY = "domain_to_entity"
    APPLICATION_TO_DOMAIN = "application_to_domain"
    APPLICATION_TO_REPOSITORY = "application_to_repository"


ALLOWED_EDGES: dict[tuple[Ring, Ring], EdgeKind] = {
    (Ring.DOMAIN_SERVICES, Ring.ENTITIES): EdgeKind.DOMAIN_TO_ENTITY,
    (Ring.APPLICATION_SERVICES, Ring.DOMAIN_SERVICES): EdgeKind.APPLICATION_TO_DOMAIN,
    (Ring.APPLICATION_SERVICES, Ring.REPOSITORIES): EdgeKind.APPLICATION_TO_REPOSITORY,
}


@dataclass(frozen=True)
class _EdgeCheck:
    """Outcome of checking a proposed edge against a snapshot."""

    kind: EdgeKind | None
    reason: str = ""


class ConnectionService(BaseService):
    """Create, remove, query and validate edges."""

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_connection(self, source: str, target: str) -> ConnectionResult:
        """Add the edge *source* → *target* if the rings allow it."""
        check = _check_edge(self._current(), source, target)
        if check.kind is None:
            logger.debug("Rejected connection %s -> %s: %s", source, target, check.reason)
            return ConnectionResult(success=False, message=check.reason, data=None)

        kind = check.kind
        data = self._state.update(lambda current: _with_edge(current, kind, source, target))
        logger.debug("Added %s connection %s -> %s", kind, source, target)
        return ConnectionResult(
            success=True,
            message=f'Connection from "{source}" to "{target}" added',
            data=data,
        )

    def remove_connection(self, source: str, target: str) -> ConnectionResult:
        """Remove every stored occurrence of the edge *source* → *target*."""
        if not self.has_connection(source, target):
            return ConnectionResult(success=False, message="Connection not found", data=None)

        data = self._state.update(lambda current: _without_edge(current, source, target))
        logger.debug("Removed connection %s -> %s", source, target)
        return ConnectionResult(
            success=True,
            message="Connection removed successfully",
            data=data,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_connection(self, source: str, target: str) -> bool:
        """Check whether the edge *source* → *target* is stored."""
        return target in self.get_current_targets(source)

    def get_possible_targets(self, source: str) -> list[str]:
        """List the nodes *source* may still connect to.

        Names are de-duplicated, the source itself and already connected
        targets are excluded. Only repositories backed by an entity appear.
        """
        data = self._current()
        ring = get_ring(source, data)
        if ring is Ring.DOMAIN_SERVICES:
            candidates = list(data.entities)
        elif ring is Ring.APPLICATION_SERVICES:
            repositories = [
                repo
                for repo in get_repositories(data.entities)
                if is_valid_repository(repo, data.entities)
            ]
            candidates = [*data.domain_services, *repositories]
        else:
            return []

        connected = set(self.get_current_targets(source))
        return [
            name
            for name in dict.fromkeys(candidates)
            if name != source and name not in connected
        ]

    def get_current_targets(self, source: str) -> list[str]:
        """List the nodes *source* is currently connected to."""
        data = self._current()
        ring = get_ring(source, data)
        if ring is Ring.DOMAIN_SERVICES:
            return list(data.domain_service_connections.get(source, []))
        if ring is Ring.APPLICATION_SERVICES:
            deps = data.application_service_dependencies.get(source)
            if deps is None:
                return []
            return [*deps.domain_services, *deps.repositories]
        return []

    def validate_connection(self, source: str, target: str) -> bool:
        """Check whether :meth:`add_connection` would accept the edge."""
        return _check_edge(self._current(), source, target).kind is not None


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def _check_edge(data: OnionConfig, source: str, target: str) -> _EdgeCheck:
    source_ring = get_ring(source, data)
    if source_ring is None:
        return _EdgeCheck(None, f'Unknown source node "{source}"')
    target_ring = get_ring(target, data)
    if target_ring is None:
        return _EdgeCheck(None, f'Unknown target node "{target}"')
    if source == target:
        return _EdgeCheck(None, f'Cannot connect "{source}" to itself')

    kind = ALLOWED_EDGES.get((source_ring, target_ring))
    if kind is None:
        return _EdgeCheck(
            None,
            f'Cannot connect {source_ring} "{source}" to {target_ring} "{target}". '
            "Connections must point one ring inward.",
        )

    if target in _targets_of(data, kind, source):
        return _EdgeCheck(None, f'Connection from "{source}" to "{target}" already exists')
    return _EdgeCheck(kind)


def _targets_of(data: OnionConfig, kind: EdgeKind, source: str) -> list[str]:
    if kind is EdgeKind.DOMAIN_TO_ENTITY:
        return data.domain_service_connections.get(source, [])
    deps = data.application_service_dependencies.get(source)
    if deps is None:
        return []
    if kind is EdgeKind.APPLICATION_TO_DOMAIN:
        return deps.domain_services
    return deps.repositories


def _with_edge(current: OnionConfig, kind: EdgeKind, source: str, target: str) -> OnionConfig:
    if kind is EdgeKind.DOMAIN_TO_ENTITY:
        connections = dict(current.domain_service_connections)
        connections[source] = [*connections.get(source, []), target]
        return current.model_copy(update={"domain_service_connections": connections})

    dependencies = dict(current.application_service_dependencies)
    deps = dependencies.get(source, AppServiceDependencies())
    if kind is EdgeKind.APPLICATION_TO_DOMAIN:
        deps = deps.model_copy(update={"domain_services": [*deps.domain_services, target]})
    else:
        deps = deps.model_copy(update={"repositories": [*deps.repositories, target]})
    dependencies[source] = deps
    return current.model_copy(update={"application_service_dependencies": dependencies})


def _without_edge(current: OnionConfig, source: str, target: str) -> OnionConfig:
    ring = get_ring(source, current)
    if ring is Ring.DOMAIN_SERVICES:
        connections = dict(current.domain_service_connections)
        connections[source] = [t for t in connections.get(source, []) if t != target]
        return current.model_copy(update={"domain_service_connections": connections})

    dependencies = dict(current.application_service_dependencies)
    deps = dependencies[source]
    dependencies[source] = AppServiceDependencies(
        domain_services=[d for d in deps.domain_services if d != target],
        repositories=[r for r in deps.repositories if r != target],
    )
    return current.model_copy(update={"application_service_dependencies": dependencies})
