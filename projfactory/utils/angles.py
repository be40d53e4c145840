"""Degrees, minutes and seconds aware angle parsing.

Accepts the angle spellings found in PROJ.4 arguments and definition files:

- plain decimal degrees: ``30``, ``-85.5``, ``.5``, ``1e-3``
- degrees and minutes: ``-85d50``, ``30d30'``
- degrees, minutes and seconds: ``30d30'15"``, ``30°30'15.5"``
- an optional hemisphere suffix: ``45d30N``, ``122W`` (``S``/``W`` negate)
"""

from __future__ import annotations

import math
import re

_NUM = r"(?:\d+(?:\.\d*)?|\.\d+)"

_ANGLE_RE = re.compile(
    rf"""^(?P<sign>[+-])?
    (?P<deg>{_NUM})
    (?:[dD°]
        (?:
            (?P<min>{_NUM})'(?:(?P<sec>{_NUM})"?)?
          | (?P<minonly>{_NUM})
        )?
    )?
    (?P<hemi>[NSEWnsew])?$""",
    re.VERBOSE,
)


def parse_angle(text: str) -> float:
    """Parse *text* as an angle and return decimal degrees.

    Raises:
        ValueError: If *text* is not a recognised angle spelling.
    """
    s = text.strip()
    if not s:
        msg = "empty angle"
        raise ValueError(msg)

    try:
        value = float(s)
    except ValueError:
        pass
    else:
        if not math.isfinite(value):
            msg = f"angle must be finite: {text!r}"
            raise ValueError(msg)
        return value

    match = _ANGLE_RE.match(s)
    if match is None:
        msg = f"not an angle: {text!r}"
        raise ValueError(msg)

    minutes = match.group("min") or match.group("minonly") or "0"
    seconds = match.group("sec") or "0"
    value = float(match.group("deg")) + float(minutes) / 60.0 + float(seconds) / 3600.0

    if match.group("sign") == "-":
        value = -value
    if match.group("hemi") and match.group("hemi").upper() in "SW":
        value = -value
    return value


def parse_angle_radians(text: str) -> float:
    """Parse *text* as an angle and return radians."""
    return math.radians(parse_angle(text))
