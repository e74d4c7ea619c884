"""Shared pytest fixtures and test helpers for onionctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from onionctl.domain.onion_config import ConfigFile, OnionConfig
from onionctl.services.facade import ConfigFacade
from onionctl.services.state import ConfigState


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def state() -> ConfigState:
    """ConfigState holding an empty configuration."""
    return ConfigState()


@pytest.fixture
def facade(state: ConfigState) -> ConfigFacade:
    """ConfigFacade over the ``state`` fixture."""
    return ConfigFacade(state)


@pytest.fixture
def sample_wire() -> dict[str, Any]:
    """A well-formed configuration in wire (camelCase) form."""
    return {
        "folderPath": "/tmp/project",
        "entities": ["User", "Product"],
        "domainServices": ["UserService", "ProductService"],
        "applicationServices": ["UserAppService"],
        "domainServiceConnections": {
            "UserService": ["User"],
            "ProductService": ["Product"],
        },
        "applicationServiceDependencies": {
            "UserAppService": {
                "domainServices": ["UserService"],
                "repositories": ["IUserRepository"],
            },
        },
        "uiFramework": "angular",
        "diFramework": "angular",
    }


@pytest.fixture
def sample_config(sample_wire: dict[str, Any]) -> OnionConfig:
    """The ``sample_wire`` configuration as a model."""
    return OnionConfig.model_validate(sample_wire)


@pytest.fixture
def loaded_facade(facade: ConfigFacade, sample_config: OnionConfig) -> ConfigFacade:
    """Facade whose state holds ``sample_config``."""
    facade.load_config(sample_config)
    return facade


@pytest.fixture
def config_path(tmp_path: Path, sample_wire: dict[str, Any]) -> Path:
    """``sample_wire`` written to a JSON file in a temp directory."""
    path = tmp_path / "onion-config.json"
    path.write_text(json.dumps(sample_wire), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory with no onionctl.toml above it."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ONIONCTL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None]:
    """Detach handlers the CLI installs on the onionctl logger."""
    yield
    logger = logging.getLogger("onionctl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_file(data: Any, path: str = "config.json") -> ConfigFile:
    """Wrap *data* as a ConfigFile, JSON-encoding non-string payloads."""
    content = data if isinstance(data, str) else json.dumps(data)
    return ConfigFile(path=path, content=content)


def read_json(path: Path) -> dict[str, Any]:
    """Load a JSON file written by the CLI."""
    return json.loads(path.read_text(encoding="utf-8"))
