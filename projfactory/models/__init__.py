"""Data models.

- Point2D / Rectangle2D: plain geometric carriers for transforms
- Ellipsoid: reference ellipsoid value and PROJ ellipsoid table lookup
- Unit: linear unit value and PROJ unit table lookup
- ProjectionSummary: JSON snapshot of a resolved descriptor
"""

from projfactory.models.ellipsoid import Ellipsoid, find_ellipsoid
from projfactory.models.geometry import Point2D, Rectangle2D
from projfactory.models.units import Unit, find_unit

__all__ = [
    "Ellipsoid",
    "Point2D",
    "Rectangle2D",
    "Unit",
    "find_ellipsoid",
    "find_unit",
]
