"""Projection variants and the registry that constructs them.

- Projection: Abstract base class defining the capability interface
- MercatorProjection, TransverseMercatorProjection,
  UniversalTransverseMercatorProjection, ObliqueMercatorProjection,
  LongLatProjection: the built-in variants
- registry: canonical identifier / readable name lookups
"""

from projfactory.projections.base import (
    Projection,
    SupportsAzimuth,
    SupportsUTMZone,
    TransformError,
)
from projfactory.projections.longlat import LongLatProjection
from projfactory.projections.mercator import MercatorProjection
from projfactory.projections.oblique_mercator import ObliqueMercatorProjection
from projfactory.projections.registry import (
    LONGLAT,
    MERC,
    OMERC,
    TMERC,
    UTM,
    get_named_proj4_projection,
    get_named_projection,
    get_ordered_projection_names,
    list_projections,
    register_projection,
)
from projfactory.projections.transverse_mercator import (
    TransverseMercatorProjection,
    UniversalTransverseMercatorProjection,
)

__all__ = [
    "LONGLAT",
    "MERC",
    "OMERC",
    "TMERC",
    "UTM",
    "LongLatProjection",
    "MercatorProjection",
    "ObliqueMercatorProjection",
    "Projection",
    "SupportsAzimuth",
    "SupportsUTMZone",
    "TransformError",
    "TransverseMercatorProjection",
    "UniversalTransverseMercatorProjection",
    "get_named_proj4_projection",
    "get_named_projection",
    "get_ordered_projection_names",
    "list_projections",
    "register_projection",
]
