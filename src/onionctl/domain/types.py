"""Rings and framework enums.

The four onion rings classify every node name in a configuration.
Framework enums constrain the ``uiFramework``, ``diFramework`` and
``uiLibrary`` fields of the wire format.
"""

from __future__ import annotations

from enum import StrEnum


class Ring(StrEnum):
    """Architectural layers, innermost first."""

    ENTITIES = "Entities"
    DOMAIN_SERVICES = "Domain Services"
    APPLICATION_SERVICES = "Application Services"
    REPOSITORIES = "Repositories"


class UiFramework(StrEnum):
    """UI frameworks a configuration can target."""

    REACT = "react"
    ANGULAR = "angular"
    VUE = "vue"
    LIT = "lit"
    VANILLA = "vanilla"


class DiFramework(StrEnum):
    """Dependency-injection frameworks."""

    AWILIX = "awilix"
    ANGULAR = "angular"


class UiLibrary(StrEnum):
    """Optional UI component libraries."""

    NONE = "none"
    SHADCN = "shadcn"


VALID_UI_FRAMEWORKS: list[str] = [f.value for f in UiFramework]
VALID_DI_FRAMEWORKS: list[str] = [f.value for f in DiFramework]
VALID_UI_LIBRARIES: list[str] = [lib.value for lib in UiLibrary]

FRAMEWORK_UI_LIBRARIES: dict[str, list[str]] = {
    "react": ["none", "shadcn"],
    "angular": ["none"],
    "vue": ["none"],
    "lit": ["none"],
    "vanilla": ["none"],
}


def available_ui_libraries(framework: str) -> list[str]:
    """Return the UI libraries usable with *framework* (``["none"]`` if unknown)."""
    return FRAMEWORK_UI_LIBRARIES.get(framework, ["none"])
