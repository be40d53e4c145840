"""Plain geometric value carriers used by projection transforms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Point2D:
    """A mutable 2-D point (longitude/latitude in, easting/northing out)."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"[{self.x:f}, {self.y:f}]"


@dataclass(slots=True)
class Rectangle2D:
    """A mutable axis-aligned rectangle anchored at its minimum corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def set_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def add(self, new_x: float, new_y: float) -> None:
        """Grow to the smallest rectangle containing both itself and the point."""
        x1 = min(self.x, new_x)
        x2 = max(self.x + self.width, new_x)
        y1 = min(self.y, new_y)
        y2 = max(self.y + self.height, new_y)
        self.set_rect(x1, y1, x2 - x1, y2 - y1)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height
