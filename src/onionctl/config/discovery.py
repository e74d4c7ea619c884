"""Locating ``onionctl.toml`` by walking up the directory tree.

Explicit overrides (``--config`` and ``ONIONCTL_CONFIG``) are handled by
the CLI option. This module only searches.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "onionctl.toml"


def search_dirs(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: CWD) and then each ancestor up to the root."""
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None, filename: str = CONFIG_FILENAME) -> Path | None:
    """Return the nearest *filename* at or above *start*, or None."""
    for directory in search_dirs(start):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None
