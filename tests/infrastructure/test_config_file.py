"""Tests for configuration file reading and writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from onionctl.domain.onion_config import OnionConfig
from onionctl.infrastructure.config_file import (
    DEFAULT_CONFIG_NAME,
    read_config_file,
    write_config_file,
)


class TestReadConfigFile:
    def test_reads_content(self, config_path: Path, sample_wire: dict[str, Any]) -> None:
        file = read_config_file(config_path)
        assert file.path == str(config_path)
        assert json.loads(file.content) == sample_wire

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Configuration file not found"):
            read_config_file(tmp_path / DEFAULT_CONFIG_NAME)

    def test_directory_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            read_config_file(tmp_path)


class TestWriteConfigFile:
    def test_writes_wire_json(self, tmp_path: Path, sample_config: OnionConfig) -> None:
        path = write_config_file(tmp_path / "out.json", sample_config)
        text = path.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert json.loads(text) == sample_config.to_wire()
        assert '\n  "entities"' in text

    def test_custom_indent(self, tmp_path: Path, sample_config: OnionConfig) -> None:
        path = write_config_file(tmp_path / "out.json", sample_config, indent=4)
        assert '\n    "entities"' in path.read_text(encoding="utf-8")

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = write_config_file(tmp_path / "nested" / "dir" / "c.json", OnionConfig())
        assert path.is_file()

    def test_read_back(self, tmp_path: Path, sample_config: OnionConfig) -> None:
        path = write_config_file(tmp_path / DEFAULT_CONFIG_NAME, sample_config)
        file = read_config_file(path)
        assert OnionConfig.model_validate_json(file.content) == sample_config
