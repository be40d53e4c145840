"""Transverse Mercator family (``tmerc``, ``utm``).

Both variants expose the UTM-zone capability: setting a zone fixes the
central meridian, the 0.9996 scale factor and the 500 km false easting,
and, in the southern hemisphere, a 10 000 km false northing.
"""

from __future__ import annotations

import math

from projfactory.core.constants import (
    UTM_FALSE_EASTING,
    UTM_MAX_ZONE,
    UTM_MIN_ZONE,
    UTM_SCALE_FACTOR,
    UTM_SOUTH_FALSE_NORTHING,
)
from projfactory.core.exceptions import ConfigurationError
from projfactory.projections.base import Projection


def utm_zone_for_longitude(lon_degrees: float) -> int:
    """Return the UTM zone (1-60) containing *lon_degrees*."""
    lon = (lon_degrees + 180.0) % 360.0
    return min(int(math.floor(lon / 6.0)) + 1, UTM_MAX_ZONE)


class TransverseMercatorProjection(Projection):
    """Transverse Mercator, optionally pinned to a UTM zone."""

    readable_name = "Transverse Mercator"
    proj4_name = "tmerc"

    def __init__(self) -> None:
        super().__init__()
        self.utm_zone: int | None = None
        self.south = False

    def set_utm_zone(self, zone: int) -> None:
        """Apply the standard UTM parameters for *zone*.

        Out-of-range zones are accepted here and rejected by ``initialize()``.
        """
        self.utm_zone = zone
        self.projection_latitude = 0.0
        self.projection_longitude = math.radians((zone - 1 + 0.5) * 6.0 - 180.0)
        self.scale_factor = UTM_SCALE_FACTOR
        self.false_easting = UTM_FALSE_EASTING
        self.false_northing = UTM_SOUTH_FALSE_NORTHING if self.south else 0.0

    def set_south_hemisphere(self, south: bool) -> None:
        self.south = south
        if self.utm_zone is not None:
            self.false_northing = UTM_SOUTH_FALSE_NORTHING if south else 0.0

    def variant_parameters(self) -> dict[str, float | int | bool]:
        return {}

    def extensions(self) -> dict[str, float | int | bool]:
        if self.utm_zone is None:
            return {}
        return {"utm_zone": self.utm_zone, "south": self.south}

    def validate_variant(self) -> None:
        if self.utm_zone is not None and not UTM_MIN_ZONE <= self.utm_zone <= UTM_MAX_ZONE:
            msg = f"{self.name}: UTM zone must be in [{UTM_MIN_ZONE}, {UTM_MAX_ZONE}], got {self.utm_zone}"
            raise ConfigurationError(msg)


class UniversalTransverseMercatorProjection(TransverseMercatorProjection):
    """Transverse Mercator that always runs on a UTM zone.

    Without an explicit ``+zone`` the zone is taken from the central meridian.
    """

    readable_name = "Universal Transverse Mercator"

    def validate_variant(self) -> None:
        if self.utm_zone is None:
            self.set_utm_zone(utm_zone_for_longitude(math.degrees(self.projection_longitude)))
        super().validate_variant()
