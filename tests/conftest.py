"""Shared pytest fixtures for the projfactory test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from projfactory.core.config import FactoryConfig

# ---------------------------------------------------------------------------
# Definition-file fixtures
# ---------------------------------------------------------------------------

SAMPLE_COORDSYS = """\
# Test definitions

# Plain WGS 84 Mercator
<merc84> +proj=merc +ellps=WGS84 +no_defs <>

# Spread over several lines, keys without '+'
<tm_multi> proj=tmerc
    ellps=GRS80 lat_0=0 lon_0=9
    k=0.9996 x_0=500000 # trailing comment
    y_0=0 no_defs <>

# Web Mercator hack value
<web> +proj=merc +a=6378137 +b=6378137 +nadgrids=@null +wktext +no_defs <>
"""

BROKEN_COORDSYS = """\
<good> +proj=merc +ellps=WGS84 <>

<bad> +proj=merc +ellps= <>
"""


@pytest.fixture()
def coordsys_dir(tmp_path: Path) -> Path:
    """Directory holding a ``custom`` and a ``broken`` definition file."""
    (tmp_path / "custom").write_text(SAMPLE_COORDSYS, encoding="latin-1")
    (tmp_path / "broken").write_text(BROKEN_COORDSYS, encoding="latin-1")
    return tmp_path


@pytest.fixture()
def local_config(coordsys_dir: Path) -> FactoryConfig:
    """Config that looks in ``coordsys_dir`` before the bundled files."""
    return FactoryConfig(coordsys_dir=str(coordsys_dir))


@pytest.fixture()
def bundled_config() -> FactoryConfig:
    """Default config: bundled files only, default search order."""
    return FactoryConfig()
