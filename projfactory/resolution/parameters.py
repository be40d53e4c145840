"""PROJ.4 parameter resolution.

Turns a flat list of ``+key=value`` arguments into an initialized
projection descriptor. The steps run in a fixed order and each one
depends on the previous:

1. Variant selection: ``+proj`` through the registry, or ``+init``
   through the named resolver (which supplies a starting ``a``/``es``).
2. Ellipsoid shape, first match wins: ``+R``; ``+ellps`` (else
   ``+datum``); explicit ``+a`` with ``+es`` / ``+rf`` / ``+f`` / ``+b``.
3. Radius adjustment, explicit shapes only, first match wins:
   ``R_A``, ``R_V``, ``R_a``, ``R_g``, ``R_h``, ``R_lat_a``, ``R_lat_g``.
4. Ellipsoid assembly: replaces anything inherited through ``+init``.
5. Scalars: ``lat_0``, ``lon_0``, ``lat_ts``, ``x_0``, ``y_0``,
   ``k_0`` (else ``k``), ``units`` then ``to_meter`` (the later wins).
6. Variant extensions: ``zone``/``south`` on UTM-capable variants,
   ``alpha``/``lonc`` on azimuth-capable variants.
7. ``initialize()``.

Radius-adjustment flags are lenient: any non-empty value counts as set,
so ``+R_A=false`` still selects the authalic radius.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from projfactory.core.config import FactoryConfig
from projfactory.core.constants import DATUM_ELLIPSOIDS, HALFPI, RA4, RA6, RV4, RV6, SIXTH
from projfactory.core.exceptions import (
    ConfigurationError,
    DomainError,
    InvalidParameterError,
    UnknownIdentifierError,
)
from projfactory.models.ellipsoid import Ellipsoid, eccentricity_squared_from_flattening, find_ellipsoid
from projfactory.models.units import find_unit
from projfactory.projections.base import SupportsAzimuth, SupportsUTMZone
from projfactory.projections.registry import get_named_proj4_projection
from projfactory.utils.angles import parse_angle

if TYPE_CHECKING:
    from collections.abc import Iterable

    from projfactory.projections.base import Projection

logger = logging.getLogger("projfactory.resolution.parameters")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_arguments(args: Iterable[str]) -> dict[str, str]:
    """Collect ``+key=value`` tokens into a dict; other tokens are ignored.

    A repeated key keeps its last value.
    """
    params: dict[str, str] = {}
    for arg in args:
        if not arg.startswith("+"):
            continue
        key, sep, value = arg[1:].partition("=")
        if not sep:
            continue
        if key in params:
            logger.warning("Repeated parameter, keeping last value | key=%s", key)
        params[key] = value
    return params


def from_proj4_specification(args: Iterable[str], config: FactoryConfig | None = None) -> Projection:
    """Return a projection initialized from a PROJ.4 argument list.

    Raises:
        UnknownIdentifierError: Unknown projection, ellipsoid, unit or ``+init`` name.
        InvalidParameterError: A numeric or angle value cannot be read.
        DomainError: A ``R_lat_*`` latitude lies outside [-90, 90] degrees.
        ParseError: A definition file consulted through ``+init`` is malformed.
        ConfigurationError: ``initialize()`` rejected the assembled parameters.
    """
    return resolve_arguments(args, config)


def from_proj4_string(text: str, config: FactoryConfig | None = None) -> Projection:
    """Like ``from_proj4_specification`` for a whitespace-separated string."""
    return resolve_arguments(text.split(), config)


def resolve_arguments(
    args: Iterable[str],
    config: FactoryConfig | None = None,
    *,
    _init_chain: tuple[str, ...] = (),
) -> Projection:
    config = config or FactoryConfig()
    params = parse_arguments(args)

    projection, a, es = _select_variant(params, config, _init_chain)
    projection.ellipsoid = _resolve_ellipsoid(params, a, es)
    _apply_scalars(projection, params)
    _apply_extensions(projection, params)
    projection.initialize()

    logger.debug(
        "Resolved projection | name=%s | ellipsoid=%s | a=%s | es=%s",
        projection.name,
        projection.ellipsoid.short_name or "-",
        projection.ellipsoid.equator_radius,
        projection.ellipsoid.eccentricity_squared,
    )
    return projection


# ---------------------------------------------------------------------------
# Value readers
# ---------------------------------------------------------------------------


def _number(params: dict[str, str], key: str) -> float:
    value = params[key]
    try:
        number = float(value)
    except ValueError:
        raise InvalidParameterError(key, value, "not a number") from None
    if not math.isfinite(number):
        raise InvalidParameterError(key, value, "must be finite")
    return number


def _angle(params: dict[str, str], key: str) -> float:
    value = params[key]
    try:
        return parse_angle(value)
    except ValueError as exc:
        raise InvalidParameterError(key, value, str(exc)) from None


def _flag(params: dict[str, str], key: str) -> bool:
    return bool(params.get(key))


def _unit_factor(params: dict[str, str], key: str) -> float:
    """Read a metres-per-unit value; ``num/den`` fractions are accepted."""
    value = params[key]
    numerator, sep, denominator = value.partition("/")
    try:
        factor = float(numerator) / float(denominator) if sep else float(numerator)
    except (ValueError, ZeroDivisionError):
        raise InvalidParameterError(key, value, "not a number") from None
    if not (math.isfinite(factor) and factor > 0):
        raise InvalidParameterError(key, value, "must be > 0")
    return factor


# ---------------------------------------------------------------------------
# Step 1: variant selection
# ---------------------------------------------------------------------------


def _select_variant(
    params: dict[str, str],
    config: FactoryConfig,
    init_chain: tuple[str, ...],
) -> tuple[Projection, float, float]:
    projection: Projection | None = None
    a = 0.0
    es = 0.0

    proj4_name = params.get("proj")
    if proj4_name is not None:
        projection = get_named_proj4_projection(proj4_name)
        if projection is None:
            raise UnknownIdentifierError("projection", proj4_name)

    init = params.get("init")
    if init is not None:
        from projfactory.resolution.named import get_named_proj4_coordinate_system

        if init in init_chain:
            msg = f"Circular +init reference: {' -> '.join((*init_chain, init))}"
            raise ConfigurationError(msg)
        if len(init_chain) >= config.max_init_depth:
            msg = f"+init nesting deeper than {config.max_init_depth}: {init}"
            raise ConfigurationError(msg)
        if projection is not None:
            logger.warning("+init replaces +proj | proj=%s | init=%s", proj4_name, init)

        inherited = get_named_proj4_coordinate_system(init, config, _init_chain=(*init_chain, init))
        if inherited is None:
            raise UnknownIdentifierError("projection", init)
        projection = inherited
        a = inherited.equator_radius
        es = inherited.ellipsoid.eccentricity_squared

    if projection is None:
        raise UnknownIdentifierError("projection", "(no +proj or +init given)")
    return projection, a, es


# ---------------------------------------------------------------------------
# Steps 2-4: ellipsoid
# ---------------------------------------------------------------------------


def _resolve_ellipsoid(params: dict[str, str], a: float, es: float) -> Ellipsoid:
    name = ""
    if "R" in params:
        a = _number(params, "R")
        es = 0.0
    else:
        key = "ellps" if "ellps" in params else "datum"
        short_name = params.get(key)
        if short_name is not None:
            reference = _lookup_ellipsoid(key, short_name)
            a = reference.equator_radius
            es = reference.eccentricity_squared
            name = short_name
        else:
            a, es = _explicit_shape(params, a, es)
    return Ellipsoid(short_name=name, equator_radius=a, eccentricity_squared=es, name=name)


def _lookup_ellipsoid(key: str, short_name: str) -> Ellipsoid:
    ellps_name = DATUM_ELLIPSOIDS.get(short_name, short_name) if key == "datum" else short_name
    reference = find_ellipsoid(ellps_name)
    if reference is None:
        raise UnknownIdentifierError("ellipsoid", short_name)
    return reference


def _explicit_shape(params: dict[str, str], a: float, es: float) -> tuple[float, float]:
    b = 0.0
    if "a" in params:
        a = _number(params, "a")

    if "es" in params:
        es = _number(params, "es")
    elif "rf" in params:
        rf = _number(params, "rf")
        if rf == 0.0:
            raise InvalidParameterError("rf", params["rf"], "inverse flattening must be non-zero")
        es = eccentricity_squared_from_flattening(1.0 / rf)
    elif "f" in params:
        es = eccentricity_squared_from_flattening(_number(params, "f"))
    elif "b" in params:
        b = _number(params, "b")
        if a == 0.0:
            raise InvalidParameterError("b", params["b"], "requires a non-zero +a")
        es = 1.0 - (b * b) / (a * a)

    if b == 0.0:
        b = a * math.sqrt(max(0.0, 1.0 - es))
    return _adjust_radius(params, a, es, b)


def _latitude_term(params: dict[str, str], key: str, es: float) -> float:
    phi = math.radians(_angle(params, key))
    if abs(phi) > HALFPI:
        raise DomainError(key, params[key])
    sin_phi = math.sin(phi)
    return 1.0 - es * sin_phi * sin_phi


def _adjust_radius(params: dict[str, str], a: float, es: float, b: float) -> tuple[float, float]:
    if _flag(params, "R_A"):
        a *= 1.0 - es * (SIXTH + es * (RA4 + es * RA6))
    elif _flag(params, "R_V"):
        a *= 1.0 - es * (SIXTH + es * (RV4 + es * RV6))
    elif _flag(params, "R_a"):
        a = 0.5 * (a + b)
    elif _flag(params, "R_g"):
        a = math.sqrt(a * b)
    elif _flag(params, "R_h"):
        a = 2.0 * a * b / (a + b) if a + b else 0.0
        es = 0.0
    elif "R_lat_a" in params:
        t = _latitude_term(params, "R_lat_a", es)
        a *= 0.5 * (1.0 - es + t) / (t * math.sqrt(t))
        es = 0.0
    elif "R_lat_g" in params:
        t = _latitude_term(params, "R_lat_g", es)
        a *= math.sqrt(1.0 - es) / t
        es = 0.0
    return a, es


# ---------------------------------------------------------------------------
# Steps 5-6: scalars and variant extensions
# ---------------------------------------------------------------------------


def _apply_scalars(projection: Projection, params: dict[str, str]) -> None:
    if "lat_0" in params:
        projection.set_projection_latitude_degrees(_angle(params, "lat_0"))
    if "lon_0" in params:
        projection.set_projection_longitude_degrees(_angle(params, "lon_0"))
    if "lat_ts" in params:
        projection.set_true_scale_latitude_degrees(_angle(params, "lat_ts"))
    if "x_0" in params:
        projection.false_easting = _number(params, "x_0")
    if "y_0" in params:
        projection.false_northing = _number(params, "y_0")

    scale_key = "k_0" if "k_0" in params else "k"
    if scale_key in params:
        projection.scale_factor = _number(params, scale_key)

    if "units" in params:
        unit = find_unit(params["units"])
        if unit is None:
            raise UnknownIdentifierError("unit", params["units"])
        projection.from_metres = 1.0 / unit.value
    if "to_meter" in params:
        projection.from_metres = 1.0 / _unit_factor(params, "to_meter")


def _apply_extensions(projection: Projection, params: dict[str, str]) -> None:
    if isinstance(projection, SupportsUTMZone):
        if _flag(params, "south"):
            projection.set_south_hemisphere(True)
        if "zone" in params:
            value = params["zone"]
            try:
                zone = int(value)
            except ValueError:
                raise InvalidParameterError("zone", value, "not an integer") from None
            projection.set_utm_zone(zone)

    if isinstance(projection, SupportsAzimuth):
        if "alpha" in params:
            projection.set_azimuth_degrees(_angle(params, "alpha"))
        if "lonc" in params:
            projection.set_central_longitude_degrees(_angle(params, "lonc"))
