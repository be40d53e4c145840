"""Tests for factory configuration.

Covers:
- Default values reproduce the bundled behaviour
- Loading from environment variables
- Fail-fast range validation
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from projfactory.core.config import ConfigValidationError, FactoryConfig, is_valid_file_id
from projfactory.core.constants import DEFAULT_SEARCH_FILES


class TestFactoryConfigDefaults:
    """Verify default configuration values."""

    def test_default_coordsys_dir(self) -> None:
        assert FactoryConfig().coordsys_dir == ""

    def test_default_search_order(self) -> None:
        assert FactoryConfig().search_files == ("world", "nad83", "nad27", "esri", "epsg")

    def test_default_init_depth(self) -> None:
        assert FactoryConfig().max_init_depth == 8

    def test_frozen_immutability(self) -> None:
        cfg = FactoryConfig()
        with pytest.raises(AttributeError):
            cfg.max_init_depth = 3  # type: ignore[misc]


class TestFactoryConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self, tmp_path: Path) -> None:
        env = {
            "PROJFACTORY_COORDSYS_DIR": str(tmp_path),
            "PROJFACTORY_SEARCH_FILES": "epsg, world",
            "PROJFACTORY_MAX_INIT_DEPTH": "3",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = FactoryConfig.from_env()

        assert cfg.coordsys_dir == str(tmp_path)
        assert cfg.search_files == ("epsg", "world")
        assert cfg.max_init_depth == 3

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = FactoryConfig.from_env()
        assert cfg == FactoryConfig()
        assert cfg.search_files == DEFAULT_SEARCH_FILES

    def test_blank_entries_dropped(self) -> None:
        with patch.dict(os.environ, {"PROJFACTORY_SEARCH_FILES": "epsg,,nad83,"}, clear=True):
            cfg = FactoryConfig.from_env()
        assert cfg.search_files == ("epsg", "nad83")


class TestFactoryConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_missing_directory_rejected(self, tmp_path: Path) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_COORDSYS_DIR": str(tmp_path / "absent")}, clear=True),
            pytest.raises(ConfigValidationError, match="PROJFACTORY_COORDSYS_DIR"),
        ):
            FactoryConfig.from_env()

    def test_empty_search_files_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_SEARCH_FILES": " , "}, clear=True),
            pytest.raises(ConfigValidationError, match="at least one"),
        ):
            FactoryConfig.from_env()

    def test_path_in_search_files_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_SEARCH_FILES": "epsg,../etc/passwd"}, clear=True),
            pytest.raises(ConfigValidationError, match="PROJFACTORY_SEARCH_FILES"),
        ):
            FactoryConfig.from_env()

    def test_zero_depth_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_MAX_INIT_DEPTH": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be >= 1"),
        ):
            FactoryConfig.from_env()

    def test_depth_one_accepted(self) -> None:
        with patch.dict(os.environ, {"PROJFACTORY_MAX_INIT_DEPTH": "1"}, clear=True):
            cfg = FactoryConfig.from_env()
        assert cfg.max_init_depth == 1

    def test_non_numeric_depth_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_MAX_INIT_DEPTH": "deep"}, clear=True),
            pytest.raises(ValueError),
        ):
            FactoryConfig.from_env()

    def test_error_contains_key_and_value(self) -> None:
        with (
            patch.dict(os.environ, {"PROJFACTORY_MAX_INIT_DEPTH": "-2"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            FactoryConfig.from_env()
        assert exc_info.value.key == "PROJFACTORY_MAX_INIT_DEPTH"
        assert exc_info.value.value == -2
        assert exc_info.value.stage == "config"


class TestIsValidFileId:
    """Definition-file ids are bare names."""

    def test_accepts_bundled_names(self) -> None:
        for file_id in DEFAULT_SEARCH_FILES:
            assert is_valid_file_id(file_id)

    def test_accepts_dotted_and_dashed(self) -> None:
        assert is_valid_file_id("my-defs.v2")

    def test_rejects_paths(self) -> None:
        for file_id in ("a/b", "..", ".", "", "a\\b"):
            assert not is_valid_file_id(file_id)
