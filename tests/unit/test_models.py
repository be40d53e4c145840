"""Tests for the ellipsoid and unit tables and the summary model."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from projfactory.models.ellipsoid import (
    Ellipsoid,
    eccentricity_squared_from_flattening,
    ellipsoid_names,
    find_ellipsoid,
)
from projfactory.models.summary import EllipsoidSummary, ProjectionSummary
from projfactory.models.units import find_unit, unit_names


class TestEllipsoid:
    """Ellipsoid value and the PROJ-backed table."""

    def test_polar_radius(self) -> None:
        ellipsoid = Ellipsoid("", 100.0, 0.36)
        assert ellipsoid.polar_radius == pytest.approx(80.0)

    def test_sphere(self) -> None:
        assert Ellipsoid("", 1.0, 0.0).is_sphere
        assert not Ellipsoid("", 1.0, 0.1).is_sphere

    def test_flattening_conversion(self) -> None:
        f = 1.0 / 298.257223563
        assert eccentricity_squared_from_flattening(f) == pytest.approx(0.00669437999014, rel=1e-10)

    def test_wgs84(self) -> None:
        ellipsoid = find_ellipsoid("WGS84")
        assert ellipsoid is not None
        assert ellipsoid.equator_radius == 6378137.0
        assert ellipsoid.eccentricity_squared == pytest.approx(0.00669437999014, rel=1e-10)

    def test_clarke_1866_from_semi_minor_axis(self) -> None:
        ellipsoid = find_ellipsoid("clrk66")
        assert ellipsoid is not None
        assert ellipsoid.polar_radius == pytest.approx(6356583.8, abs=1e-3)

    def test_sphere_entry(self) -> None:
        ellipsoid = find_ellipsoid("sphere")
        assert ellipsoid is not None
        assert ellipsoid.is_sphere

    def test_unknown(self) -> None:
        assert find_ellipsoid("nonesuch") is None

    def test_case_sensitive(self) -> None:
        assert find_ellipsoid("wgs84") is None

    def test_names_sorted(self) -> None:
        names = ellipsoid_names()
        assert names == sorted(names)
        assert {"WGS84", "GRS80", "clrk66", "airy", "intl", "bessel"} <= set(names)


class TestUnits:
    """Linear units keyed by PROJ short name."""

    def test_metre(self) -> None:
        unit = find_unit("m")
        assert unit is not None
        assert unit.value == 1.0

    def test_us_survey_foot(self) -> None:
        unit = find_unit("us-ft")
        assert unit is not None
        assert unit.value == pytest.approx(1200.0 / 3937.0)

    def test_kilometre(self) -> None:
        assert find_unit("km").value == 1000.0

    def test_unknown(self) -> None:
        assert find_unit("nonesuch") is None

    def test_names(self) -> None:
        names = unit_names()
        assert names == sorted(names)
        assert {"m", "ft", "us-ft"} <= set(names)


class TestProjectionSummary:
    """Pydantic summary model."""

    def test_defaults(self) -> None:
        summary = ProjectionSummary(identifier="merc", readable_name="Mercator")
        assert summary.ellipsoid == EllipsoidSummary()
        assert summary.scale_factor == 1.0
        assert summary.extensions == {}

    def test_identifier_required(self) -> None:
        with pytest.raises(ValidationError):
            ProjectionSummary(readable_name="Mercator")  # type: ignore[call-arg]

    def test_round_trip_json(self) -> None:
        summary = ProjectionSummary(
            identifier="utm",
            readable_name="Universal Transverse Mercator",
            ellipsoid=EllipsoidSummary(short_name="WGS84", equator_radius_m=6378137.0),
            projection_longitude_deg=3.0,
            extensions={"utm_zone": 31},
        )
        restored = ProjectionSummary.model_validate_json(summary.model_dump_json())
        assert restored == summary
        assert math.isclose(restored.projection_longitude_deg, 3.0)
