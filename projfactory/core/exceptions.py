"""Unified projection-resolution exception taxonomy.

Every domain exception inherits from ``ProjectionError`` and carries
structured context fields so callers can tell malformed input apart from
unknown identifiers and rejected configurations.

Taxonomy categories
-------------------
- ``ValidationError``: malformed input text (definition files, numbers,
  angles, out-of-domain values). Fix the input and retry.
- ``PermanentError``: the input is well formed but names something that
  does not exist, or the assembled parameters are rejected.

"Not found" is not an exception: a missing named coordinate system is a
normal negative result (``None``), so a multi-file search can move on.

Every exception exposes ``to_error_dict()`` for a stable structured payload
suitable for logging.
"""

from __future__ import annotations


class ProjectionError(Exception):
    """Base exception for all projection-resolution errors.

    Attributes:
        message: Human-readable error description.
        stage: Resolution stage where the error occurred
            (e.g. ``"parse_coordsys"``, ``"resolve_parameters"``).
        code: Machine-readable error code (e.g. ``"COORDSYS_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ProjectionError):
    """Malformed input text."""


class PermanentError(ProjectionError):
    """Well-formed input that cannot be resolved."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class ParseError(ValidationError):
    """Grammar violation in a coordinate-system definition file.

    Attributes:
        line_number: 1-based line of the offending token.
        source: Name of the file being parsed (may be empty).
    """

    default_stage = "parse_coordsys"
    default_code = "COORDSYS_PARSE_FAILED"

    def __init__(self, message: str, *, line_number: int, source: str = "") -> None:
        self.line_number = line_number
        self.source = source
        where = f"{source}:{line_number}" if source else str(line_number)
        super().__init__(f"{where}: {message}")

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["line_number"] = self.line_number
        payload["source"] = self.source
        return payload


class InvalidParameterError(ValidationError):
    """A parameter value could not be read as a number or an angle."""

    default_stage = "resolve_parameters"
    default_code = "PARAMETER_INVALID"

    def __init__(self, key: str, value: str, reason: str = "") -> None:
        self.key = key
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid value for +{key}: {value!r}{detail}")


class DomainError(ValidationError):
    """An angle-derived computation left its valid trigonometric domain.

    The code mirrors the classic PROJ.4 error number for "latitude or
    longitude exceeded limits".
    """

    default_stage = "resolve_parameters"
    default_code = "-11"

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"-11: latitude or longitude exceeded limits (+{key}={value})")


class UnknownIdentifierError(PermanentError):
    """An unregistered projection, ellipsoid, unit or definition-file name.

    Attributes:
        kind: What was being looked up (``"projection"``, ``"ellipsoid"``, ...).
        identifier: The name that could not be resolved.
    """

    default_stage = "resolve_parameters"
    default_code = "IDENTIFIER_UNKNOWN"

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Unknown {kind}: {identifier}")


class ConfigurationError(PermanentError):
    """The assembled projection parameters were rejected."""

    default_stage = "initialize"
    default_code = "PROJECTION_CONFIG_INVALID"


class RegistryError(PermanentError):
    """A projection variant could not be registered."""

    default_stage = "registry"
    default_code = "REGISTRY_BUILD_FAILED"
