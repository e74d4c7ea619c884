"""OnionConfig — the configuration graph aggregate.

Wire names are camelCase (``domainServiceConnections``), Python attributes
are snake_case. Snapshots are frozen: every change produces a new model via
:meth:`pydantic.BaseModel.model_copy`, so a reference handed out earlier
keeps describing the old graph.

INVARIANT: Callers never mutate the lists or dicts of a snapshot in place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from onionctl.domain.types import DiFramework, UiFramework, UiLibrary

_WIRE_MODEL_CONFIG: dict[str, Any] = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class AppServiceDependencies(BaseModel):
    """Domain-service and repository dependencies of one application service."""

    model_config = _WIRE_MODEL_CONFIG

    domain_services: list[str] = Field(default_factory=list)
    repositories: list[str] = Field(default_factory=list)


class OnionConfig(BaseModel):
    """Root aggregate of an onion architecture configuration.

    Attributes:
        folder_path: Target location, opaque to the core.
        entities: Entity names in insertion order. Duplicates are kept.
        domain_services: Domain-service names, same duplicate policy.
        application_services: Application-service names, same duplicate policy.
        domain_service_connections: Entity names each domain service depends on.
        application_service_dependencies: Dependencies per application service.
        ui_framework: Target UI framework, ``None`` when unset.
        di_framework: Dependency-injection framework.
        ui_library: Optional UI component library.
    """

    model_config = _WIRE_MODEL_CONFIG

    folder_path: str = ""
    entities: list[str] = Field(default_factory=list)
    domain_services: list[str] = Field(default_factory=list)
    application_services: list[str] = Field(default_factory=list)
    domain_service_connections: dict[str, list[str]] = Field(default_factory=dict)
    application_service_dependencies: dict[str, AppServiceDependencies] = Field(
        default_factory=dict
    )
    ui_framework: UiFramework | None = None
    di_framework: DiFramework | None = DiFramework.AWILIX
    ui_library: UiLibrary | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase, JSON-ready representation.

        ``uiLibrary`` is omitted when unset so files written by older
        tooling round-trip unchanged.
        """
        data = self.model_dump(mode="json", by_alias=True)
        if data.get("uiLibrary") is None:
            data.pop("uiLibrary", None)
        return data

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize to the persisted JSON representation."""
        return json.dumps(self.to_wire(), indent=indent)


@dataclass(frozen=True)
class ConfigFile:
    """External representation of a configuration: a path and its raw text."""

    path: str
    content: str
