"""Linear unit value and the by-name unit table.

Units are identified by their PROJ short names (``m``, ``ft``, ``us-ft``,
``km`` ...), the spelling used by ``+units=`` arguments. The conversion
factors come from the PROJ database via ``pyproj.database.get_units_map``.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

logger = logging.getLogger("projfactory.models.units")


@dataclass(frozen=True, slots=True)
class Unit:
    """A linear unit.

    Attributes:
        name: PROJ short name (e.g. ``"us-ft"``).
        value: Metres per unit.
        description: Full unit name (e.g. ``"US survey foot"``).
    """

    name: str
    value: float
    description: str = ""


@functools.lru_cache(maxsize=1)
def _unit_table() -> dict[str, Unit]:
    from pyproj.database import get_units_map

    table: dict[str, Unit] = {}
    for unit in get_units_map(category="linear").values():
        short_name = unit.proj_short_name
        if not short_name or short_name in table:
            continue
        table[short_name] = Unit(
            name=short_name,
            value=float(unit.conv_factor),
            description=unit.name,
        )
    logger.debug("Loaded unit table | count=%d", len(table))
    return table


def find_unit(name: str) -> Unit | None:
    """Look up a linear unit by PROJ short name, or ``None`` if unknown."""
    return _unit_table().get(name)


def unit_names() -> list[str]:
    """Return all known unit short names, sorted."""
    return sorted(_unit_table())
