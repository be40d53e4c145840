"""Projection registry: resolves PROJ.4 identifiers to projection variants.

The registry maps a canonical identifier (``"merc"``, ``"tmerc"`` ...) to a
zero-argument constructor, and each variant's self-reported readable name
(``"Mercator"``) back to its identifier. Readable names are read from one
throwaway instance per variant at registration time, so the two maps can
never disagree.

Usage::

    from projfactory.projections.registry import get_named_proj4_projection

    projection = get_named_proj4_projection("merc")

The registry is built once, on first use, under a lock. The build fills
fresh maps and only publishes them when every variant registered
successfully, so a failed build never leaves a partial registry behind.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from projfactory.core.exceptions import RegistryError
from projfactory.projections.longlat import LongLatProjection
from projfactory.projections.mercator import MercatorProjection
from projfactory.projections.oblique_mercator import ObliqueMercatorProjection
from projfactory.projections.transverse_mercator import (
    TransverseMercatorProjection,
    UniversalTransverseMercatorProjection,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from projfactory.projections.base import Projection

logger = logging.getLogger("projfactory.projections.registry")

# ---------------------------------------------------------------------------
# Canonical identifiers
# ---------------------------------------------------------------------------

MERC = "merc"
OMERC = "omerc"
TMERC = "tmerc"
UTM = "utm"
LONGLAT = "longlat"

_BUILTIN_VARIANTS: tuple[tuple[str, Callable[[], Projection]], ...] = (
    (MERC, MercatorProjection),
    (OMERC, ObliqueMercatorProjection),
    (TMERC, TransverseMercatorProjection),
    (UTM, UniversalTransverseMercatorProjection),
    (LONGLAT, LongLatProjection),
)

# ---------------------------------------------------------------------------
# Registry state (published once, read-only afterwards)
# ---------------------------------------------------------------------------

_REGISTRY: dict[str, Callable[[], Projection]] = {}
_NAME_MAP: dict[str, str] = {}
_LOCK = threading.Lock()


def _register(
    registry: dict[str, Callable[[], Projection]],
    name_map: dict[str, str],
    proj4_name: str,
    constructor: Callable[[], Projection],
) -> None:
    try:
        sample = constructor()
    except Exception as exc:
        msg = f"Unable to register {proj4_name}: {exc}"
        raise RegistryError(msg) from exc
    registry[proj4_name] = constructor
    name_map[sample.name] = proj4_name
    logger.debug("Registered projection | id=%s | name=%s", proj4_name, sample.name)


def _ensure_registry() -> None:
    """Build the registry once (idempotent, thread safe)."""
    if _REGISTRY:
        return
    with _LOCK:
        if _REGISTRY:
            return
        registry: dict[str, Callable[[], Projection]] = {}
        name_map: dict[str, str] = {}
        for proj4_name, constructor in _BUILTIN_VARIANTS:
            _register(registry, name_map, proj4_name, constructor)
        _NAME_MAP.update(name_map)
        _REGISTRY.update(registry)
        logger.info("Projection registry built | variants=%d", len(registry))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_projection(proj4_name: str, constructor: Callable[[], Projection]) -> None:
    """Register a custom projection variant.

    Args:
        proj4_name: Canonical identifier (e.g. ``"my_merc"``).
        constructor: Zero-argument callable returning a new ``Projection``.

    Raises:
        ValueError: If the identifier is empty.
        RegistryError: If a sample instance cannot be constructed.
    """
    if not proj4_name:
        msg = "Projection identifier must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    with _LOCK:
        _register(_REGISTRY, _NAME_MAP, proj4_name, constructor)


def get_named_proj4_projection(proj4_name: str) -> Projection | None:
    """Construct a fresh projection for a canonical identifier.

    Returns:
        A new ``Projection`` tagged with *proj4_name*, or ``None`` if the
        identifier is not registered.
    """
    _ensure_registry()
    constructor = _REGISTRY.get(proj4_name)
    if constructor is None:
        return None
    projection = constructor()
    projection.name = proj4_name
    return projection


def get_named_projection(name: str) -> Projection | None:
    """Construct a projection from its human-readable name (e.g. ``"Mercator"``)."""
    _ensure_registry()
    proj4_name = _NAME_MAP.get(name)
    if proj4_name is None:
        return None
    return get_named_proj4_projection(proj4_name)


def get_ordered_projection_names() -> list[str]:
    """Return the human-readable names of all registered variants, sorted."""
    _ensure_registry()
    return sorted(_NAME_MAP)


def list_projections() -> list[str]:
    """Return the canonical identifiers of all registered variants, sorted."""
    _ensure_registry()
    return sorted(_REGISTRY)
