"""Reading and writing configuration JSON files.

The core never touches the filesystem. The CLI uses these helpers to
turn a path into a :class:`ConfigFile` and to persist snapshots back.
"""

from __future__ import annotations

import logging
from pathlib import Path

from onionctl.domain.onion_config import ConfigFile, OnionConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "onion-config.json"


def read_config_file(path: Path) -> ConfigFile:
    """Read *path* into a :class:`ConfigFile`.

    Raises:
        ValueError: If *path* does not exist or is not a file.
    """
    if not path.is_file():
        msg = f"Configuration file not found: {path}"
        raise ValueError(msg)
    return ConfigFile(path=str(path), content=path.read_text(encoding="utf-8"))


def write_config_file(path: Path, config: OnionConfig, *, indent: int = 2) -> Path:
    """Serialize *config* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_json(indent=indent) + "\n", encoding="utf-8")
    logger.debug("Wrote configuration to %s", path)
    return path
