"""Repository naming — the convention linking entities to repositories.

A repository is never stored. It is derived from an entity name as
``I<Entity>Repository`` and exists only as a referenceable name.

Pure functions, no infrastructure dependencies. Consumed by the
connection, lifecycle and validation services.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from onionctl.domain.types import Ring

# I + upper-case letter + letters/digits + literal "Repository".
REPOSITORY_PATTERN = re.compile(r"^I([A-Z][a-zA-Z0-9]*)Repository$")


def repository_name(entity: str) -> str:
    """Return the repository name derived from *entity*."""
    return f"I{entity}Repository"


def entity_of(name: str) -> str | None:
    """Extract the entity segment of a repository name, or None if malformed."""
    if not isinstance(name, str):
        return None
    match = REPOSITORY_PATTERN.match(name)
    if match is None:
        return None
    return match.group(1)


def is_repository_name(name: str) -> bool:
    """Check whether *name* follows the ``I<Entity>Repository`` pattern."""
    return entity_of(name) is not None


def is_valid_repository(name: str, entities: Iterable[str] | None) -> bool:
    """Check that *name* is a repository name whose entity is in *entities*."""
    entity = entity_of(name)
    if entity is None:
        return False
    return entity in _as_list(entities)


def get_repositories(entities: Iterable[str] | None) -> list[str]:
    """Map each entity to its repository, preserving order and duplicates."""
    return [repository_name(entity) for entity in _as_list(entities)]


def get_ring(node: str, config: Any) -> Ring | None:
    """Classify *node* by the collection that contains it.

    Checks entities, domain services and application services in that
    order, then falls back to a repository-validity check. *config* may be
    an :class:`~onionctl.domain.onion_config.OnionConfig` or a raw wire
    mapping; missing or malformed collections count as empty.
    """
    entities = _collection(config, "entities")
    if node in entities:
        return Ring.ENTITIES
    if node in _collection(config, "domain_services"):
        return Ring.DOMAIN_SERVICES
    if node in _collection(config, "application_services"):
        return Ring.APPLICATION_SERVICES
    if is_valid_repository(node, entities):
        return Ring.REPOSITORIES
    return None


_WIRE_NAMES: dict[str, str] = {
    "entities": "entities",
    "domain_services": "domainServices",
    "application_services": "applicationServices",
}


def _collection(config: Any, field: str) -> list[str]:
    if config is None:
        return []
    if isinstance(config, Mapping):
        value = config.get(_WIRE_NAMES[field], config.get(field))
    else:
        value = getattr(config, field, None)
    return _as_list(value)


def _as_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return []
