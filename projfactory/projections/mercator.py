"""Mercator projection descriptor (``+proj=merc``)."""

from __future__ import annotations

import math

from projfactory.core.constants import HALFPI
from projfactory.core.exceptions import ConfigurationError
from projfactory.projections.base import Projection


class MercatorProjection(Projection):
    """Normal-aspect Mercator.

    Scale is either given directly (``+k_0``) or implied by a latitude of
    true scale (``+lat_ts``). PROJ derives ``k_0`` from ``lat_ts`` when
    both are present, so a non-zero ``lat_ts`` replaces ``k_0`` in the
    description.
    """

    readable_name = "Mercator"
    proj4_name = "merc"

    def variant_parameters(self) -> dict[str, float | int | bool]:
        if self.true_scale_latitude == 0.0:
            return {}
        return {"lat_ts": math.degrees(self.true_scale_latitude)}

    def proj4_parameters(self) -> dict[str, float | int | bool | str]:
        params = super().proj4_parameters()
        if "lat_ts" in params:
            params.pop("k_0", None)
        return params

    def validate_variant(self) -> None:
        if abs(self.true_scale_latitude) >= HALFPI:
            msg = f"{self.name}: |lat_ts| must be less than 90 degrees"
            raise ConfigurationError(msg)
