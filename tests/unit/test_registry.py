"""Tests for the projection registry.

Covers: identifier and readable-name lookups, ordering, fresh instances,
custom registration, all-or-nothing builds, and thread-safe one-time
initialisation.
"""

from __future__ import annotations

import threading
import unittest
from unittest.mock import patch

from projfactory.core.exceptions import RegistryError
from projfactory.projections import registry
from projfactory.projections.base import Projection
from projfactory.projections.mercator import MercatorProjection
from projfactory.projections.registry import (
    LONGLAT,
    MERC,
    OMERC,
    TMERC,
    UTM,
    _ensure_registry,
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


def _reset_registry() -> None:
    registry._REGISTRY.clear()
    registry._NAME_MAP.clear()


class TestLookups(unittest.TestCase):
    """Built-in variants resolve by identifier and by readable name."""

    def test_list_projections(self) -> None:
        assert list_projections() == sorted([LONGLAT, MERC, OMERC, TMERC, UTM])

    def test_ordered_names_sorted(self) -> None:
        names = get_ordered_projection_names()
        assert names == sorted(names)
        assert "Mercator" in names
        assert "Transverse Mercator" in names
        assert "Universal Transverse Mercator" in names

    def test_by_identifier(self) -> None:
        projection = get_named_proj4_projection(MERC)
        assert isinstance(projection, MercatorProjection)
        assert projection.name == MERC

    def test_utm_is_distinct_from_tmerc(self) -> None:
        assert type(get_named_proj4_projection(TMERC)) is TransverseMercatorProjection
        assert type(get_named_proj4_projection(UTM)) is UniversalTransverseMercatorProjection

    def test_unknown_identifier(self) -> None:
        assert get_named_proj4_projection("nonesuch") is None

    def test_by_readable_name(self) -> None:
        projection = get_named_projection("Transverse Mercator")
        assert isinstance(projection, TransverseMercatorProjection)
        assert projection.name == TMERC

    def test_unknown_readable_name(self) -> None:
        assert get_named_projection("Nonesuch") is None

    def test_fresh_instance_each_call(self) -> None:
        assert get_named_proj4_projection(MERC) is not get_named_proj4_projection(MERC)

    def test_instances_are_not_initialized(self) -> None:
        assert not get_named_proj4_projection(MERC).is_initialized


class _CustomProjection(MercatorProjection):
    readable_name = "Custom Mercator"


class TestRegisterProjection(unittest.TestCase):
    """register_projection adds custom variants."""

    def setUp(self) -> None:
        _ensure_registry()

    def tearDown(self) -> None:
        registry._REGISTRY.pop("custom_merc", None)
        registry._NAME_MAP.pop("Custom Mercator", None)

    def test_register_and_get(self) -> None:
        register_projection("custom_merc", _CustomProjection)
        assert "custom_merc" in list_projections()
        assert "Custom Mercator" in get_ordered_projection_names()
        assert isinstance(get_named_projection("Custom Mercator"), _CustomProjection)

    def test_register_empty_identifier_raises(self) -> None:
        with self.assertRaises(ValueError):
            register_projection("", _CustomProjection)

    def test_broken_constructor_raises(self) -> None:
        def _broken() -> Projection:
            raise RuntimeError("boom")

        with self.assertRaises(RegistryError) as ctx:
            register_projection("custom_merc", _broken)
        assert "custom_merc" in str(ctx.exception)
        assert "custom_merc" not in list_projections()


class TestRegistryBuild(unittest.TestCase):
    """The built-in registry is built once, completely or not at all."""

    def setUp(self) -> None:
        _reset_registry()

    def tearDown(self) -> None:
        _reset_registry()
        _ensure_registry()

    def test_failed_build_publishes_nothing(self) -> None:
        def _broken() -> Projection:
            raise RuntimeError("boom")

        variants = ((MERC, MercatorProjection), ("broken", _broken))
        with patch.object(registry, "_BUILTIN_VARIANTS", variants):
            with self.assertRaises(RegistryError):
                _ensure_registry()
        assert registry._REGISTRY == {}
        assert registry._NAME_MAP == {}

    def test_build_is_idempotent(self) -> None:
        with patch.object(registry, "_register", wraps=registry._register) as mock_register:
            _ensure_registry()
            _ensure_registry()
        assert mock_register.call_count == len(registry._BUILTIN_VARIANTS)

    def test_concurrent_first_use_builds_once(self) -> None:
        results: list[list[str]] = []
        barrier = threading.Barrier(8)

        def _use() -> None:
            barrier.wait()
            results.append(list_projections())

        with patch.object(registry, "_register", wraps=registry._register) as mock_register:
            threads = [threading.Thread(target=_use) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert len(results) == 8
        assert all(r == results[0] for r in results)
        assert len(results[0]) == len(registry._BUILTIN_VARIANTS)
        assert mock_register.call_count == len(registry._BUILTIN_VARIANTS)
