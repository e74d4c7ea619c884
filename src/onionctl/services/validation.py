"""ValidationService — structural validation in two tiers.

Both tiers consult the same rule table:

- :meth:`ValidationService.validate_config_structure` drains every rule and
  returns a :class:`ValidationReport`. It never raises.
- :meth:`ValidationService.is_user_config_valid` parses a
  :class:`ConfigFile` and raises on the first violation.

Rules work on the raw wire mapping (camelCase keys), so a malformed
document (a string where a list belongs, a missing dependency object)
becomes a violation message instead of a crash.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from onionctl.domain.errors import ConfigParseError, ConfigValidationError
from onionctl.domain.onion_config import ConfigFile, OnionConfig
from onionctl.domain.repositories import is_valid_repository
from onionctl.domain.types import (
    VALID_DI_FRAMEWORKS,
    VALID_UI_FRAMEWORKS,
    VALID_UI_LIBRARIES,
    available_ui_libraries,
)
from onionctl.services.result import ValidationReport

logger = logging.getLogger(__name__)

Rule = Callable[[Mapping[str, Any]], Iterator[str]]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def check_domain_services(config: Mapping[str, Any]) -> Iterator[str]:
    """Domain-service connections reference known services and entities."""
    entities = config.get("entities")
    if "entities" in config and not isinstance(entities, list):
        yield "`entities` should be an array."
    elif isinstance(entities, list):
        for entity in entities:
            if not isinstance(entity, str):
                yield f"Invalid entity name {entity!r}. Expected a string."
    entity_set = set(_strings(entities))

    connections = config.get("domainServiceConnections")
    if "domainServiceConnections" in config and not isinstance(connections, Mapping):
        yield "`domainServiceConnections` should be an object."
    connections = connections if isinstance(connections, Mapping) else {}

    services = config.get("domainServices")
    if not isinstance(services, list):
        yield "`domainServices` should be an array."
        return

    for service in services:
        if not isinstance(service, str):
            yield f"Invalid domainService name {service!r}. Expected a string."
            continue
        deps = connections.get(service)
        if not isinstance(deps, list):
            yield (
                f'Missing or invalid dependency array for domainService "{service}". '
                "Expected an array."
            )
            continue
        for dep in deps:
            if not isinstance(dep, str) or dep not in entity_set:
                yield (
                    f'Invalid dependency "{dep}" in domainService "{service}". '
                    "Not found in entities."
                )

    known = set(_strings(services))
    for key in connections:
        if key not in known:
            yield f'Unknown domainService "{key}" found in domainServiceConnections.'


def check_application_services(config: Mapping[str, Any]) -> Iterator[str]:
    """Application-service dependencies reference known services and repositories."""
    entities = _strings(config.get("entities"))
    domain_set = set(_strings(config.get("domainServices")))

    dependencies = config.get("applicationServiceDependencies")
    if "applicationServiceDependencies" in config and not isinstance(dependencies, Mapping):
        yield "`applicationServiceDependencies` should be an object."
    dependencies = dependencies if isinstance(dependencies, Mapping) else {}

    services = config.get("applicationServices")
    if not isinstance(services, list):
        yield "`applicationServices` should be an array."
        return

    for service in services:
        if not isinstance(service, str):
            yield f"Invalid applicationService name {service!r}. Expected a string."
            continue
        if service not in dependencies:
            yield (
                f'Missing dependency definition for applicationService "{service}" '
                "in applicationServiceDependencies."
            )
            continue
        yield from _check_app_dependencies(service, dependencies[service], domain_set, entities)

    known = set(_strings(services))
    for key in dependencies:
        if key not in known:
            yield f'Unknown applicationService "{key}" found in applicationServiceDependencies.'


def _check_app_dependencies(
    service: str,
    deps: Any,
    domain_set: set[str],
    entities: list[str],
) -> Iterator[str]:
    if not isinstance(deps, Mapping):
        yield f'Missing or invalid dependencies for applicationService "{service}".'
        return

    domain_deps = deps.get("domainServices")
    if not isinstance(domain_deps, list):
        yield f'Missing "domainServices" array for applicationService "{service}".'
    else:
        for dep in domain_deps:
            if not isinstance(dep, str) or dep not in domain_set:
                yield (
                    f'Invalid domainService "{dep}" in applicationService "{service}". '
                    "Not found in domainServices."
                )

    repositories = deps.get("repositories")
    if not isinstance(repositories, list):
        yield f'Missing "repositories" array for applicationService "{service}".'
        return
    for repo in repositories:
        if not is_valid_repository(repo, entities):
            yield (
                f'Invalid repository "{repo}" in applicationService "{service}". '
                "Expected format: I<Entity>Repository where Entity exists in entities."
            )


def check_ui_framework(config: Mapping[str, Any]) -> Iterator[str]:
    """``uiFramework`` is present and one of the known frameworks."""
    yield from _check_enum_field(
        config.get("uiFramework"), "uiFramework", "UI framework", VALID_UI_FRAMEWORKS
    )


def check_di_framework(config: Mapping[str, Any]) -> Iterator[str]:
    """``diFramework`` is present and one of the known frameworks."""
    yield from _check_enum_field(
        config.get("diFramework"), "diFramework", "DI framework", VALID_DI_FRAMEWORKS
    )


def check_ui_library(config: Mapping[str, Any]) -> Iterator[str]:
    """``uiLibrary``, when set, is known and available for the UI framework."""
    library = config.get("uiLibrary")
    if library is None:
        return
    if not isinstance(library, str):
        yield "`uiLibrary` should be a string."
        return
    if library not in VALID_UI_LIBRARIES:
        yield (
            f'Unknown UI library "{library}" found in config. '
            f"Valid libraries are: {', '.join(VALID_UI_LIBRARIES)}."
        )
        return

    framework = config.get("uiFramework")
    if isinstance(framework, str) and framework in VALID_UI_FRAMEWORKS:
        available = available_ui_libraries(framework)
        if library not in available:
            yield (
                f'UI library "{library}" is not available for UI framework "{framework}". '
                f"Available libraries are: {', '.join(available)}."
            )


def check_folder_path(config: Mapping[str, Any]) -> Iterator[str]:
    """``folderPath``, when present, is a string."""
    if "folderPath" in config and not isinstance(config["folderPath"], str):
        yield "`folderPath` should be a string."


def _check_enum_field(value: Any, field: str, label: str, valid: list[str]) -> Iterator[str]:
    if value is None or value == "":
        yield f"`{field}` is required."
        return
    if not isinstance(value, str):
        yield f"`{field}` should be a string."
        return
    if value not in valid:
        yield (
            f'Unknown {label} "{value}" found in config. '
            f"Valid frameworks are: {', '.join(valid)}."
        )


# Order matters: the fail-fast gate reports whichever rule fires first.
RULES: tuple[Rule, ...] = (
    check_domain_services,
    check_application_services,
    check_ui_framework,
    check_di_framework,
    check_ui_library,
    check_folder_path,
)


def iter_violations(config: OnionConfig | Mapping[str, Any]) -> Iterator[str]:
    """Yield every violation in rule order, lazily."""
    raw = config.to_wire() if isinstance(config, OnionConfig) else config
    if not isinstance(raw, Mapping):
        yield "Configuration should be an object."
        return
    for rule in RULES:
        yield from rule(raw)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class ValidationService:
    """Whole-graph validator with an aggregating and a fail-fast entry point."""

    def validate_config_structure(
        self, config: OnionConfig | Mapping[str, Any]
    ) -> ValidationReport:
        """Return every violation found in *config*. Never raises."""
        errors = list(iter_violations(config))
        if errors:
            logger.debug("Configuration has %d violation(s)", len(errors))
        return ValidationReport(valid=not errors, errors=errors)

    def is_user_config_valid(self, file: ConfigFile) -> bool:
        """Accept or reject *file*, stopping at the first violation.

        Raises:
            ConfigParseError: If the content is not a JSON object.
            ConfigValidationError: On the first rule violation.
        """
        raw = parse_config_file(file)
        first = next(iter_violations(raw), None)
        if first is not None:
            logger.debug("Rejected %s: %s", file.path, first)
            raise ConfigValidationError(first)
        return True


def parse_config_file(file: ConfigFile) -> dict[str, Any]:
    """Decode the JSON text of *file* into a raw wire mapping.

    Raises:
        ConfigParseError: If the content is not valid JSON or not an object.
    """
    try:
        data = json.loads(file.content)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {file.path}: {exc}"
        raise ConfigParseError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid configuration in {file.path}: expected a JSON object"
        raise ConfigParseError(msg)
    return data


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]
