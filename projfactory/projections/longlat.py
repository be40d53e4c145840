"""Geographic pass-through (``+proj=longlat``).

Coordinates stay in decimal degrees; ``transform`` only copies them.
The descriptor still carries the ellipsoid so that other systems can
inherit it through ``+init=``.
"""

from __future__ import annotations

from typing import Any

from projfactory.projections.base import Projection


class LongLatProjection(Projection):
    """Geographic coordinates on the descriptor's ellipsoid."""

    readable_name = "Lat/Long"
    proj4_name = "longlat"

    def variant_parameters(self) -> dict[str, float | int | bool]:
        return {}

    def proj4_parameters(self) -> dict[str, float | int | bool | str]:
        params = super().proj4_parameters()
        for key in ("lat_0", "x_0", "y_0", "k_0", "to_meter"):
            params.pop(key, None)
        return params

    def _build_forward(self) -> Any:
        return None

    def _project(self, lon: float, lat: float) -> tuple[float, float]:
        return lon, lat
