"""Named coordinate-system resolution.

Resolves names such as ``"epsg:32631"`` or ``"101"`` to projection
descriptors by looking the name up in the bundled definition files and
feeding the block's arguments through the parameter resolver.

- A qualified name (``"<file>:<localName>"``, split at the first ``:``)
  reads only that file.
- An unqualified name tries ``world``, ``nad83``, ``nad27``, ``esri`` and
  ``epsg`` in that order (``FactoryConfig.search_files``).

"Not found" is returned as ``None`` so that the search can continue;
malformed files and unresolvable parameters raise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from projfactory.core.config import FactoryConfig
from projfactory.core.constants import QUALIFIER_SEPARATOR
from projfactory.resolution.coordsys_parser import find_block, iter_blocks, open_coordsys_file

if TYPE_CHECKING:
    from projfactory.projections.base import Projection

logger = logging.getLogger("projfactory.resolution.named")


def split_qualified_name(name: str) -> tuple[str | None, str]:
    """Split ``"<file>:<localName>"``; the file part is ``None`` when unqualified."""
    file_id, sep, local_name = name.partition(QUALIFIER_SEPARATOR)
    if not sep:
        return None, name
    return file_id, local_name


def find_coordinate_system(
    file_id: str,
    name: str,
    config: FactoryConfig | None = None,
) -> list[str] | None:
    """Return the raw ``+key=value`` arguments of block *name* in *file_id*.

    Raises:
        UnknownIdentifierError: If the definition file does not exist.
        ParseError: If the file is malformed before the block is found.
    """
    with open_coordsys_file(file_id, config) as source:
        return find_block(source, name, source_name=file_id)


def list_coordinate_systems(file_id: str, config: FactoryConfig | None = None) -> list[str]:
    """Return the block names defined in *file_id*, in file order."""
    with open_coordsys_file(file_id, config) as source:
        return [block_name for block_name, _ in iter_blocks(source, source_name=file_id)]


def read_projection_file(
    file_id: str,
    name: str,
    config: FactoryConfig | None = None,
    *,
    _init_chain: tuple[str, ...] = (),
) -> Projection | None:
    """Resolve block *name* of *file_id* to a projection, or ``None`` if absent."""
    from projfactory.resolution.parameters import resolve_arguments

    arguments = find_coordinate_system(file_id, name, config)
    if arguments is None:
        return None
    logger.info("Coordinate system found | file=%s | name=%s", file_id, name)
    return resolve_arguments(arguments, config, _init_chain=_init_chain)


def get_named_proj4_coordinate_system(
    name: str,
    config: FactoryConfig | None = None,
    *,
    _init_chain: tuple[str, ...] = (),
) -> Projection | None:
    """Resolve a qualified or unqualified coordinate-system name.

    Args:
        name: ``"<file>:<localName>"`` or a bare local name.
        config: Optional ``FactoryConfig``; defaults to the bundled files.

    Returns:
        The initialized ``Projection``, or ``None`` if no file defines the name.

    Raises:
        ParseError: If a consulted definition file is malformed.
        UnknownIdentifierError: If a qualified file does not exist, or the
            block names an unknown projection, ellipsoid or unit.
        ConfigurationError: If the assembled parameters are rejected.
    """
    config = config or FactoryConfig()
    file_id, local_name = split_qualified_name(name)
    if file_id is not None:
        return read_projection_file(file_id, local_name, config, _init_chain=_init_chain)

    for candidate in config.search_files:
        projection = read_projection_file(candidate, name, config, _init_chain=_init_chain)
        if projection is not None:
            return projection

    logger.debug("Coordinate system not found | name=%s | searched=%s", name, ",".join(config.search_files))
    return None
