"""Projection capability base class.

Defines the contract every projection variant satisfies. The resolver
interacts exclusively with this interface; it never knows which concrete
variant is behind it.

Lifecycle:
    1. Construction: by the registry, from a canonical identifier.
    2. Configuration: the resolver sets the ellipsoid and scalar
       parameters in place (``set_*`` methods, plain attributes).
    3. ``initialize()``: validates the assembled parameters and builds
       the forward operation. Failure raises ``ConfigurationError``.
    4. ``transform(p)``: projects a longitude/latitude point in degrees.

The forward mathematics is delegated to PROJ through ``pyproj.Proj``,
built from the descriptor's own PROJ.4 description.

Optional capabilities (``SupportsUTMZone``, ``SupportsAzimuth``) are
structural protocols: the resolver checks whether a variant exposes them
instead of testing for a particular subclass.
"""

from __future__ import annotations

import abc
import logging
import math
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from projfactory.core.constants import HALFPI
from projfactory.core.exceptions import ConfigurationError, ValidationError
from projfactory.models.geometry import Point2D, Rectangle2D
from projfactory.models.summary import EllipsoidSummary, ProjectionSummary

if TYPE_CHECKING:
    from projfactory.models.ellipsoid import Ellipsoid

logger = logging.getLogger("projfactory.projections")

_ANGLE_TOLERANCE = 1e-10


class TransformError(ValidationError):
    """A point could not be projected (outside the projection's domain)."""

    default_stage = "transform"
    default_code = "TRANSFORM_FAILED"


@runtime_checkable
class SupportsUTMZone(Protocol):
    """Variants that accept a UTM zone override (``+zone``, ``+south``)."""

    def set_utm_zone(self, zone: int) -> None: ...

    def set_south_hemisphere(self, south: bool) -> None: ...


@runtime_checkable
class SupportsAzimuth(Protocol):
    """Variants with an azimuth of the central line (``+alpha``, ``+lonc``)."""

    def set_azimuth_degrees(self, degrees: float) -> None: ...

    def set_central_longitude_degrees(self, degrees: float) -> None: ...


class Projection(abc.ABC):
    """Abstract base class for projection descriptors.

    Angles are stored in radians; the ``set_*_degrees`` methods convert.

    Attributes:
        ellipsoid: Reference ellipsoid, ``None`` until resolved.
        projection_latitude: Latitude of origin (``+lat_0``), radians.
        projection_longitude: Central meridian (``+lon_0``), radians.
        true_scale_latitude: Latitude of true scale (``+lat_ts``), radians.
        false_easting: ``+x_0`` in metres.
        false_northing: ``+y_0`` in metres.
        scale_factor: ``+k_0``.
        from_metres: Output units per metre (``1 / +to_meter``).
    """

    #: Human-readable name reported by an untagged instance.
    readable_name: ClassVar[str] = ""
    #: PROJ ``+proj=`` keyword used when describing the descriptor.
    proj4_name: ClassVar[str] = ""

    def __init__(self) -> None:
        self._name = ""
        self.ellipsoid: Ellipsoid | None = None
        self.projection_latitude = 0.0
        self.projection_longitude = 0.0
        self.true_scale_latitude = 0.0
        self.false_easting = 0.0
        self.false_northing = 0.0
        self.scale_factor = 1.0
        self.from_metres = 1.0
        self._forward: Any = None
        self._initialized = False

    def __str__(self) -> str:
        return self.readable_name

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Canonical identifier once tagged by the registry, else the readable name."""
        return self._name or self.readable_name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def equator_radius(self) -> float:
        return self.ellipsoid.equator_radius if self.ellipsoid is not None else 0.0

    def set_projection_latitude_degrees(self, degrees: float) -> None:
        self.projection_latitude = math.radians(degrees)

    def set_projection_longitude_degrees(self, degrees: float) -> None:
        self.projection_longitude = math.radians(degrees)

    def set_true_scale_latitude_degrees(self, degrees: float) -> None:
        self.true_scale_latitude = math.radians(degrees)

    @abc.abstractmethod
    def variant_parameters(self) -> dict[str, float | int | bool]:
        """PROJ parameters specific to the variant.

        They are appended to the common parameters in ``proj4_parameters()``
        and may override them. Booleans are rendered as bare flags.
        """

    def extensions(self) -> dict[str, float | int | bool]:
        """Variant-specific settings reported in ``summary()``."""
        return {}

    def proj4_parameters(self) -> dict[str, float | int | bool | str]:
        """Return the descriptor as ordered PROJ.4 key/value parameters."""
        params: dict[str, float | int | bool | str] = {"proj": self.proj4_name}
        if self.ellipsoid is not None:
            params["a"] = self.ellipsoid.equator_radius
            params["es"] = self.ellipsoid.eccentricity_squared
        params["lat_0"] = math.degrees(self.projection_latitude)
        params["lon_0"] = math.degrees(self.projection_longitude)
        params["x_0"] = self.false_easting
        params["y_0"] = self.false_northing
        params["k_0"] = self.scale_factor
        if self.from_metres != 1.0:
            params["to_meter"] = 1.0 / self.from_metres
        params.update(self.variant_parameters())
        return params

    def proj4_description(self) -> str:
        """Return the descriptor as a ``+key=value`` PROJ.4 string."""
        parts = []
        for key, value in self.proj4_parameters().items():
            if isinstance(value, bool):
                if value:
                    parts.append(f"+{key}")
            else:
                parts.append(f"+{key}={value}")
        parts.append("+no_defs")
        return " ".join(parts)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Validate the assembled parameters and build the forward operation.

        Raises:
            ConfigurationError: If a parameter is out of range or PROJ
                rejects the resulting description.
        """
        self._validate()
        self._forward = self._build_forward()
        self._initialized = True
        logger.debug("Projection initialized | name=%s | proj4=%s", self.name, self.proj4_description())

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def validate_variant(self) -> None:
        """Hook for variant-specific checks. Raise ``ConfigurationError``."""

    def _validate(self) -> None:
        if self.ellipsoid is None:
            msg = f"{self.name}: no ellipsoid resolved"
            raise ConfigurationError(msg)
        a = self.ellipsoid.equator_radius
        if not (math.isfinite(a) and a > 0):
            msg = f"{self.name}: equatorial radius must be > 0, got {a}"
            raise ConfigurationError(msg)
        es = self.ellipsoid.eccentricity_squared
        if not 0.0 <= es < 1.0:
            msg = f"{self.name}: squared eccentricity must be in [0, 1), got {es}"
            raise ConfigurationError(msg)
        if abs(self.projection_latitude) > HALFPI + _ANGLE_TOLERANCE:
            msg = f"{self.name}: |lat_0| must not exceed 90 degrees"
            raise ConfigurationError(msg)
        if not (math.isfinite(self.scale_factor) and self.scale_factor > 0):
            msg = f"{self.name}: scale factor must be > 0, got {self.scale_factor}"
            raise ConfigurationError(msg)
        if not (math.isfinite(self.from_metres) and self.from_metres > 0):
            msg = f"{self.name}: unit conversion must be > 0, got {self.from_metres}"
            raise ConfigurationError(msg)
        self.validate_variant()

    def _build_forward(self) -> Any:
        from pyproj import Proj
        from pyproj.exceptions import CRSError, ProjError

        description = self.proj4_description()
        try:
            return Proj(description)
        except (CRSError, ProjError) as exc:
            msg = f"{self.name}: PROJ rejected {description!r}: {exc}"
            raise ConfigurationError(msg) from exc

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def _project(self, lon: float, lat: float) -> tuple[float, float]:
        from pyproj.exceptions import ProjError

        try:
            x, y = self._forward(lon, lat, errcheck=True)
        except ProjError as exc:
            msg = f"{self.name}: cannot project ({lon}, {lat}): {exc}"
            raise TransformError(msg) from exc
        return float(x), float(y)

    def transform(self, src: Point2D, dst: Point2D | None = None) -> Point2D:
        """Project a (longitude, latitude) point in degrees.

        Args:
            src: Input point; ``x`` is longitude, ``y`` latitude.
            dst: Optional point to receive the result (may be ``src``).

        Returns:
            The projected point in the descriptor's linear units.

        Raises:
            ConfigurationError: If ``initialize()`` has not been called.
            TransformError: If the point lies outside the projection domain.
        """
        if not self._initialized:
            msg = f"{self.name}: transform() called before initialize()"
            raise ConfigurationError(msg)
        x, y = self._project(src.x, src.y)
        if dst is None:
            return Point2D(x, y)
        dst.x = x
        dst.y = y
        return dst

    def transform_rect(self, src: Rectangle2D) -> Rectangle2D:
        """Project the four corners of *src* and return their bounding rectangle."""
        corners = (
            (src.x, src.y),
            (src.x, src.max_y),
            (src.max_x, src.y),
            (src.max_x, src.max_y),
        )
        first = self.transform(Point2D(*corners[0]))
        result = Rectangle2D(first.x, first.y, 0.0, 0.0)
        for lon, lat in corners[1:]:
            p = self.transform(Point2D(lon, lat))
            result.add(p.x, p.y)
        return result

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> ProjectionSummary:
        """Return a JSON-friendly snapshot of the descriptor."""
        ellipsoid = EllipsoidSummary()
        if self.ellipsoid is not None:
            ellipsoid = EllipsoidSummary(
                short_name=self.ellipsoid.short_name,
                equator_radius_m=self.ellipsoid.equator_radius,
                eccentricity_squared=self.ellipsoid.eccentricity_squared,
            )
        return ProjectionSummary(
            identifier=self.name,
            readable_name=self.readable_name,
            ellipsoid=ellipsoid,
            projection_latitude_deg=math.degrees(self.projection_latitude),
            projection_longitude_deg=math.degrees(self.projection_longitude),
            true_scale_latitude_deg=math.degrees(self.true_scale_latitude),
            false_easting_m=self.false_easting,
            false_northing_m=self.false_northing,
            scale_factor=self.scale_factor,
            from_metres=self.from_metres,
            extensions=self.extensions(),
            proj4=self.proj4_description(),
        )
