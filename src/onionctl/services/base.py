"""BaseService — shared foundation for the mutating services.

Every service receives the :class:`ConfigState` it operates on at
construction time. Reads go through ``self._state.get_data()``; writes go
through ``self._state.update()`` and nowhere else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from onionctl.domain.onion_config import OnionConfig
    from onionctl.services.state import ConfigState


class BaseService:
    """Base for services that read and replace the configuration snapshot.

    Usage::

        class NodeLifecycleService(BaseService):
            def add_entity(self, name: str) -> OnionConfig:
                return self._state.update(lambda current: ...)
    """

    def __init__(self, state: ConfigState) -> None:
        self._state = state

    @property
    def state(self) -> ConfigState:
        """The state object this service mutates."""
        return self._state

    def _current(self) -> OnionConfig:
        return self._state.get_data()
