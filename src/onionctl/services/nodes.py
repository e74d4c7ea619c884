"""NodeLifecycleService — add and remove nodes with cascading cleanup.

Adding never checks uniqueness: the editing model keeps raw insertion
order, duplicates included. Removal strips every reference to the node so
the connection and dependency maps never point at a missing name.
"""

from __future__ import annotations

import logging

from onionctl.domain.onion_config import AppServiceDependencies, OnionConfig
from onionctl.domain.repositories import repository_name
from onionctl.services.base import BaseService

logger = logging.getLogger(__name__)


class NodeLifecycleService(BaseService):
    """Entity, domain-service and application-service lifecycle."""

    def add_entity(self, name: str) -> OnionConfig:
        """Append *name* to the entities."""
        logger.debug("Adding entity %s", name)
        return self._state.update(
            lambda current: current.model_copy(
                update={"entities": [*current.entities, name]},
            )
        )

    def add_domain_service(self, name: str) -> OnionConfig:
        """Append *name* to the domain services with an empty connection list."""
        logger.debug("Adding domain service %s", name)

        def updater(current: OnionConfig) -> OnionConfig:
            connections = dict(current.domain_service_connections)
            connections.setdefault(name, [])
            return current.model_copy(
                update={
                    "domain_services": [*current.domain_services, name],
                    "domain_service_connections": connections,
                }
            )

        return self._state.update(updater)

    def add_application_service(self, name: str) -> OnionConfig:
        """Append *name* to the application services with empty dependencies."""
        logger.debug("Adding application service %s", name)

        def updater(current: OnionConfig) -> OnionConfig:
            dependencies = dict(current.application_service_dependencies)
            dependencies.setdefault(name, AppServiceDependencies())
            return current.model_copy(
                update={
                    "application_services": [*current.application_services, name],
                    "application_service_dependencies": dependencies,
                }
            )

        return self._state.update(updater)

    def remove_node(self, name: str) -> OnionConfig:
        """Remove *name* from every collection and every reference to it.

        References are stripped even when *name* is not declared in any
        collection. When nothing refers to *name* the snapshot is left
        untouched and returned as-is.
        """
        return self._state.update(lambda current: _without_node(current, name))


def _without_node(current: OnionConfig, name: str) -> OnionConfig:
    # Dangling references count too: a loaded file may name nodes it never declares.
    repo = repository_name(name)

    connections: dict[str, list[str]] = {
        service: [t for t in targets if t != name]
        for service, targets in current.domain_service_connections.items()
        if service != name
    }
    dependencies: dict[str, AppServiceDependencies] = {
        service: AppServiceDependencies(
            domain_services=[d for d in deps.domain_services if d != name],
            repositories=[r for r in deps.repositories if r not in (name, repo)],
        )
        for service, deps in current.application_service_dependencies.items()
        if service != name
    }

    updated = current.model_copy(
        update={
            "entities": [e for e in current.entities if e != name],
            "domain_services": [d for d in current.domain_services if d != name],
            "application_services": [a for a in current.application_services if a != name],
            "domain_service_connections": connections,
            "application_service_dependencies": dependencies,
        }
    )
    if updated == current:
        return current

    logger.debug(
        "Removing node %s (entity=%s, domain=%s, application=%s)",
        name,
        name in current.entities,
        name in current.domain_services,
        name in current.application_services,
    )
    return updated
