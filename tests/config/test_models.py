"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from onionctl.config.models import DefaultsConfig, OutputConfig
from onionctl.domain.types import DiFramework, UiFramework


class TestDefaults:
    def test_code_baked_defaults(self) -> None:
        assert DefaultsConfig().ui_framework is UiFramework.VANILLA
        assert DefaultsConfig().di_framework is DiFramework.AWILIX
        assert OutputConfig().indent == 2

    def test_sparse_override(self) -> None:
        cfg = DefaultsConfig.model_validate({"di_framework": "angular"})
        assert cfg.di_framework is DiFramework.ANGULAR
        assert cfg.ui_framework is UiFramework.VANILLA

    def test_unknown_framework_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DefaultsConfig.model_validate({"ui_framework": "svelte"})


class TestFrozen:
    def test_defaults_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DefaultsConfig().ui_framework = UiFramework.REACT  # type: ignore[misc]

    def test_output_frozen(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig().indent = 4  # type: ignore[misc]
