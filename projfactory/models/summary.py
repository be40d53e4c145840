"""Pydantic snapshot of a resolved projection descriptor.

A ``ProjectionSummary`` is the JSON-friendly record of what a resolution
produced: which variant, which ellipsoid, and every scalar parameter in
degrees and metres. It is the structure logged after a named lookup and
the form callers persist or compare.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EllipsoidSummary(BaseModel):
    """Ellipsoid section of the summary.

    Attributes:
        short_name: PROJ short name, empty for ad-hoc shapes.
        equator_radius_m: Semi-major axis in metres.
        eccentricity_squared: Squared eccentricity (0 for a sphere).
    """

    short_name: str = ""
    equator_radius_m: float = 0.0
    eccentricity_squared: float = 0.0


class ProjectionSummary(BaseModel):
    """Top-level descriptor snapshot.

    Angles are in decimal degrees, offsets in metres.
    """

    identifier: str
    readable_name: str
    ellipsoid: EllipsoidSummary = Field(default_factory=EllipsoidSummary)
    projection_latitude_deg: float = 0.0
    projection_longitude_deg: float = 0.0
    true_scale_latitude_deg: float = 0.0
    false_easting_m: float = 0.0
    false_northing_m: float = 0.0
    scale_factor: float = 1.0
    from_metres: float = 1.0
    extensions: dict[str, float | int | bool] = Field(default_factory=dict)
    proj4: str = ""
