"""Factory configuration loaded from environment variables.

The defaults reproduce the bundled behaviour exactly: definition files are
read from the package resources and searched in the order
``world, nad83, nad27, esri, epsg``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range, so a bad deployment fails at startup rather than on
    the first lookup.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from projfactory.core.constants import DEFAULT_SEARCH_FILES
from projfactory.core.exceptions import ProjectionError

_FILE_ID_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


class ConfigValidationError(ProjectionError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        reason: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.reason = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


def is_valid_file_id(file_id: str) -> bool:
    """Return True if *file_id* is a bare definition-file name (no path parts)."""
    return bool(_FILE_ID_RE.match(file_id)) and file_id not in (".", "..")


@dataclass(frozen=True, slots=True)
class FactoryConfig:
    """Immutable factory configuration.

    Attributes:
        coordsys_dir: Directory searched for definition files before the
            bundled resources. Empty means bundled resources only.
        search_files: Definition files tried, in order, for unqualified names.
        max_init_depth: Maximum nesting of ``+init=`` references.
    """

    coordsys_dir: str = ""
    search_files: tuple[str, ...] = DEFAULT_SEARCH_FILES
    max_init_depth: int = 8

    @classmethod
    def from_env(cls) -> FactoryConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If ``PROJFACTORY_MAX_INIT_DEPTH`` is not an integer.
        """
        raw_files = os.getenv("PROJFACTORY_SEARCH_FILES", ",".join(DEFAULT_SEARCH_FILES))
        config = cls(
            coordsys_dir=os.getenv("PROJFACTORY_COORDSYS_DIR", ""),
            search_files=tuple(f.strip() for f in raw_files.split(",") if f.strip()),
            max_init_depth=int(os.getenv("PROJFACTORY_MAX_INIT_DEPTH", "8")),
        )
        _validate(config)
        return config


def _validate(config: FactoryConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.coordsys_dir and not os.path.isdir(config.coordsys_dir):
        raise ConfigValidationError(
            "PROJFACTORY_COORDSYS_DIR",
            config.coordsys_dir,
            "must be an existing directory",
        )

    if not config.search_files:
        raise ConfigValidationError(
            "PROJFACTORY_SEARCH_FILES",
            config.search_files,
            "must name at least one definition file",
        )

    for file_id in config.search_files:
        if not is_valid_file_id(file_id):
            raise ConfigValidationError(
                "PROJFACTORY_SEARCH_FILES",
                file_id,
                "file names may not contain path separators",
            )

    if config.max_init_depth < 1:
        raise ConfigValidationError(
            "PROJFACTORY_MAX_INIT_DEPTH",
            config.max_init_depth,
            "must be >= 1",
        )
