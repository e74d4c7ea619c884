"""ConfigFacade — the one entry point for callers outside the core.

Composes :class:`ConfigState`, :class:`NodeLifecycleService`,
:class:`ConnectionService` and :class:`ValidationService` around a single
state object. UI adapters, the CLI and generators talk to this class only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from onionctl.config.models import DefaultsConfig
from onionctl.domain import repositories
from onionctl.domain.errors import ConfigParseError
from onionctl.domain.onion_config import ConfigFile, OnionConfig
from onionctl.domain.types import Ring
from onionctl.services.connections import ConnectionService
from onionctl.services.nodes import NodeLifecycleService
from onionctl.services.result import ConnectionResult, ValidationReport
from onionctl.services.state import ConfigState, Updater
from onionctl.services.validation import ValidationService, parse_config_file

logger = logging.getLogger(__name__)


class ConfigFacade:
    """Union of the state, lifecycle, connection and validation operations.

    Usage::

        facade = ConfigFacade()
        facade.add_entity("User")
        facade.add_domain_service("UserService")
        facade.add_connection("UserService", "User")
        assert facade.validate_config_structure().valid
    """

    def __init__(
        self,
        state: ConfigState | None = None,
        *,
        defaults: DefaultsConfig | None = None,
    ) -> None:
        self._state = state if state is not None else ConfigState(defaults=defaults)
        self._nodes = NodeLifecycleService(self._state)
        self._connections = ConnectionService(self._state)
        self._validation = ValidationService()

    @property
    def state(self) -> ConfigState:
        return self._state

    # --- State ---

    def get_data(self) -> OnionConfig:
        return self._state.get_data()

    def update(self, updater: Updater) -> OnionConfig:
        return self._state.update(updater)

    def get_empty_config(self) -> OnionConfig:
        return self._state.get_empty_config()

    def load_config(self, config: OnionConfig) -> OnionConfig:
        """Replace the current snapshot with *config*."""
        return self._state.load(config)

    def load_file(self, file: ConfigFile) -> OnionConfig:
        """Deserialize *file* and make it the current snapshot."""
        config = self.map_file_to_config(file)
        logger.debug("Loaded configuration from %s", file.path)
        return self._state.load(config)

    def reset(self) -> OnionConfig:
        return self._state.reset()

    # --- Node lifecycle ---

    def add_entity(self, name: str) -> OnionConfig:
        return self._nodes.add_entity(name)

    def add_domain_service(self, name: str) -> OnionConfig:
        return self._nodes.add_domain_service(name)

    def add_application_service(self, name: str) -> OnionConfig:
        return self._nodes.add_application_service(name)

    def remove_node(self, name: str) -> OnionConfig:
        return self._nodes.remove_node(name)

    # --- Connections ---

    def add_connection(self, source: str, target: str) -> ConnectionResult:
        return self._connections.add_connection(source, target)

    def remove_connection(self, source: str, target: str) -> ConnectionResult:
        return self._connections.remove_connection(source, target)

    def has_connection(self, source: str, target: str) -> bool:
        return self._connections.has_connection(source, target)

    def get_possible_targets(self, source: str) -> list[str]:
        return self._connections.get_possible_targets(source)

    def get_current_targets(self, source: str) -> list[str]:
        return self._connections.get_current_targets(source)

    def validate_connection(self, source: str, target: str) -> bool:
        return self._connections.validate_connection(source, target)

    # --- Repository naming ---

    def is_repository_name(self, name: str) -> bool:
        return repositories.is_repository_name(name)

    def is_valid_repository(self, name: str) -> bool:
        """Check *name* against the entities of the current snapshot."""
        return repositories.is_valid_repository(name, self.get_data().entities)

    def get_repositories(self) -> list[str]:
        """Repositories implied by the entities of the current snapshot."""
        return repositories.get_repositories(self.get_data().entities)

    def get_ring(self, node: str) -> Ring | None:
        return repositories.get_ring(node, self.get_data())

    # --- Validation ---

    def validate_config_structure(
        self, config: OnionConfig | Mapping[str, Any] | None = None
    ) -> ValidationReport:
        """Validate *config*, or the current snapshot when omitted."""
        target = config if config is not None else self.get_data()
        return self._validation.validate_config_structure(target)

    def is_user_config_valid(self, file: ConfigFile) -> bool:
        return self._validation.is_user_config_valid(file)

    def validate_file(self, file: ConfigFile) -> ValidationReport:
        """Decode *file* and report every violation in it.

        Raises:
            ConfigParseError: If the content is not a JSON object.
        """
        return self._validation.validate_config_structure(parse_config_file(file))

    def map_file_to_config(self, file: ConfigFile) -> OnionConfig:
        """Deserialize *file* into an :class:`OnionConfig`.

        Raises:
            ConfigParseError: If the content is not JSON or does not match
                the configuration schema.
        """
        raw = parse_config_file(file)
        try:
            return OnionConfig.model_validate(raw)
        except ValidationError as exc:
            msg = f"Invalid configuration in {file.path}: {exc.error_count()} schema error(s)"
            raise ConfigParseError(msg) from exc
