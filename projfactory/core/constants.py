"""Shared constants: single source of truth.

Centralises the bundled definition-file names, the PROJ datum table and
the series coefficients used by the spherical radius adjustments.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Bundled coordinate-system definition files
# ---------------------------------------------------------------------------

COORDSYS_PACKAGE: str = "projfactory.data.coordsys"
"""Importable package holding the bundled definition files."""

DEFAULT_SEARCH_FILES: tuple[str, ...] = ("world", "nad83", "nad27", "esri", "epsg")
"""Files searched, in order, for an unqualified coordinate-system name."""

QUALIFIER_SEPARATOR: str = ":"
"""Separates ``<file>`` from ``<localName>`` in a qualified name."""

# ---------------------------------------------------------------------------
# Datum → reference ellipsoid (PROJ ``pj_datums`` table)
# ---------------------------------------------------------------------------

DATUM_ELLIPSOIDS: dict[str, str] = {
    "WGS84": "WGS84",
    "GGRS87": "GRS80",
    "NAD83": "GRS80",
    "NAD27": "clrk66",
    "potsdam": "bessel",
    "carthage": "clrk80ign",
    "hermannskogel": "bessel",
    "ire65": "mod_airy",
    "nzgd49": "intl",
    "OSGB36": "airy",
}

# ---------------------------------------------------------------------------
# Spherical radius adjustment coefficients
# ---------------------------------------------------------------------------

SIXTH: float = 1.0 / 6.0
RA4: float = 17.0 / 360.0
RA6: float = 67.0 / 3024.0
RV4: float = 5.0 / 72.0
RV6: float = 55.0 / 1296.0

HALFPI: float = math.pi / 2.0

# ---------------------------------------------------------------------------
# UTM
# ---------------------------------------------------------------------------

UTM_MIN_ZONE: int = 1
UTM_MAX_ZONE: int = 60
UTM_SCALE_FACTOR: float = 0.9996
UTM_FALSE_EASTING: float = 500_000.0
UTM_SOUTH_FALSE_NORTHING: float = 10_000_000.0
