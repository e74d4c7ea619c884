"""ConfigState — owner of the current configuration snapshot.

:meth:`ConfigState.update` is the single mutation path. It hands the
current snapshot to an updater, stores whatever the updater returns, and
returns it. A reader therefore sees either the old or the new snapshot,
never a half-applied change.

INVARIANT: If the updater raises, the stored snapshot is unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from onionctl.config.models import DefaultsConfig
from onionctl.domain.onion_config import OnionConfig

logger = logging.getLogger(__name__)

Updater = Callable[[OnionConfig], OnionConfig]


class ConfigState:
    """Holds one :class:`OnionConfig` and replaces it atomically.

    Not thread-safe. A concurrent host must serialize calls, e.g. by
    guarding the instance with its own lock.
    """

    def __init__(
        self,
        initial: OnionConfig | None = None,
        *,
        defaults: DefaultsConfig | None = None,
    ) -> None:
        self._defaults = defaults or DefaultsConfig()
        self._data = initial if initial is not None else self.get_empty_config()

    def get_data(self) -> OnionConfig:
        """Return the current snapshot. Callers must not mutate it."""
        return self._data

    def update(self, updater: Updater) -> OnionConfig:
        """Replace the snapshot with ``updater(current)`` and return it.

        Raises:
            TypeError: If *updater* returns something other than an OnionConfig.
            Exception: Anything *updater* raises propagates unchanged.
        """
        result = updater(self._data)
        if not isinstance(result, OnionConfig):
            msg = f"Updater must return an OnionConfig, got {type(result).__name__}"
            raise TypeError(msg)
        if result is not self._data:
            logger.debug(
                "Configuration replaced: %d entities, %d domain services, "
                "%d application services",
                len(result.entities),
                len(result.domain_services),
                len(result.application_services),
            )
        self._data = result
        return result

    def get_empty_config(self) -> OnionConfig:
        """Return a configuration with empty collections and default frameworks."""
        return OnionConfig(
            ui_framework=self._defaults.ui_framework,
            di_framework=self._defaults.di_framework,
        )

    def load(self, config: OnionConfig) -> OnionConfig:
        """Replace the snapshot wholesale with an externally loaded *config*."""
        return self.update(lambda _current: config)

    def reset(self) -> OnionConfig:
        """Replace the snapshot with an empty configuration."""
        return self.update(lambda _current: self.get_empty_config())
