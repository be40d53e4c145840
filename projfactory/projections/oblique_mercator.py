"""Oblique Mercator (``+proj=omerc``), azimuth form.

The central line is defined by its azimuth ``+alpha`` at the projection
centre (``+lat_0``, ``+lonc``). The centre longitude shares storage with
the central meridian, so ``+lon_0`` and ``+lonc`` address the same value.
"""

from __future__ import annotations

import math

from projfactory.core.exceptions import ConfigurationError
from projfactory.projections.base import Projection


class ObliqueMercatorProjection(Projection):
    """Hotine oblique Mercator with an azimuth-defined central line."""

    readable_name = "Oblique Mercator"
    proj4_name = "omerc"

    def __init__(self) -> None:
        super().__init__()
        self.azimuth: float | None = None

    def set_azimuth_degrees(self, degrees: float) -> None:
        self.azimuth = math.radians(degrees)

    def set_central_longitude_degrees(self, degrees: float) -> None:
        self.set_projection_longitude_degrees(degrees)

    def variant_parameters(self) -> dict[str, float | int | bool]:
        params: dict[str, float | int | bool] = {"lonc": math.degrees(self.projection_longitude)}
        if self.azimuth is not None:
            params["alpha"] = math.degrees(self.azimuth)
        return params

    def proj4_parameters(self) -> dict[str, float | int | bool | str]:
        params = super().proj4_parameters()
        params.pop("lon_0", None)
        return params

    def extensions(self) -> dict[str, float | int | bool]:
        if self.azimuth is None:
            return {}
        return {"alpha": math.degrees(self.azimuth)}

    def validate_variant(self) -> None:
        if self.azimuth is None:
            msg = f"{self.name}: an azimuth (+alpha) is required"
            raise ConfigurationError(msg)
