"""Reference ellipsoid value and the by-short-name ellipsoid table.

The table itself is PROJ's built-in ellipsoid list, read through
``pyproj.list.get_ellps_map`` so the constants always match the PROJ
library the descriptors are eventually evaluated with.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass

logger = logging.getLogger("projfactory.models.ellipsoid")


@dataclass(frozen=True, slots=True)
class Ellipsoid:
    """A reference ellipsoid.

    Attributes:
        short_name: PROJ short name (``"WGS84"``), empty for ad-hoc shapes.
        equator_radius: Semi-major axis ``a`` in metres.
        eccentricity_squared: Squared eccentricity ``es``; 0 for a sphere.
        name: Descriptive name (defaults to the short name).
    """

    short_name: str
    equator_radius: float
    eccentricity_squared: float
    name: str = ""

    @property
    def polar_radius(self) -> float:
        """Semi-minor axis ``b``."""
        return self.equator_radius * math.sqrt(1.0 - self.eccentricity_squared)

    @property
    def is_sphere(self) -> bool:
        return self.eccentricity_squared == 0.0


def eccentricity_squared_from_flattening(f: float) -> float:
    return f * (2.0 - f)


@functools.lru_cache(maxsize=1)
def _ellipsoid_table() -> dict[str, Ellipsoid]:
    from pyproj.list import get_ellps_map

    table: dict[str, Ellipsoid] = {}
    for short_name, params in get_ellps_map().items():
        a = float(params["a"])
        if "rf" in params:
            es = eccentricity_squared_from_flattening(1.0 / float(params["rf"]))
        elif "f" in params:
            es = eccentricity_squared_from_flattening(float(params["f"]))
        elif "b" in params:
            b = float(params["b"])
            es = 1.0 - (b * b) / (a * a)
        else:
            es = float(params.get("es", 0.0))
        table[short_name] = Ellipsoid(
            short_name=short_name,
            equator_radius=a,
            eccentricity_squared=es,
            name=str(params.get("description", short_name)),
        )
    logger.debug("Loaded ellipsoid table | count=%d", len(table))
    return table


def find_ellipsoid(short_name: str) -> Ellipsoid | None:
    """Look up a reference ellipsoid by its PROJ short name.

    Returns:
        The ``Ellipsoid``, or ``None`` if the name is not in the table.
    """
    return _ellipsoid_table().get(short_name)


def ellipsoid_names() -> list[str]:
    """Return all known ellipsoid short names, sorted."""
    return sorted(_ellipsoid_table())
