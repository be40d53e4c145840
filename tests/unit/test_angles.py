"""Tests for DMS-aware angle parsing."""

from __future__ import annotations

import math

import pytest

from projfactory.utils.angles import parse_angle, parse_angle_radians


class TestParseAngle:
    """Accepted spellings and their decimal-degree values."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("30", 30.0),
            ("-85.5", -85.5),
            (".5", 0.5),
            ("+12", 12.0),
            ("1e-3", 0.001),
            ("-85d50", -85.0 - 50.0 / 60.0),
            ("30d30", 30.5),
            ("30d30'", 30.5),
            ("30D30'36\"", 30.51),
            ("30°30'36", 30.51),
            ("45d", 45.0),
            ("45d30N", 45.5),
            ("45d30S", -45.5),
            ("122W", -122.0),
            ("122e", 122.0),
            ("-0d30", -0.5),
        ],
    )
    def test_values(self, text: str, expected: float) -> None:
        assert parse_angle(text) == pytest.approx(expected)

    def test_surrounding_whitespace(self) -> None:
        assert parse_angle("  10  ") == 10.0

    @pytest.mark.parametrize("text", ["", "east", "10x", "d30", "10d30'x", "inf", "nan", "1-2"])
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_angle(text)

    def test_radians(self) -> None:
        assert parse_angle_radians("90") == pytest.approx(math.pi / 2)
        assert parse_angle_radians("-85d50") == pytest.approx(math.radians(-85.0 - 50.0 / 60.0))
