"""Resolution of PROJ.4 specifications into projection descriptors.

- coordsys_parser: block-structured definition file parser
- parameters: ``+key=value`` cascade (ellipsoid, radius, scalars, variant extensions)
- named: qualified / unqualified coordinate-system name lookup
"""

from projfactory.resolution.coordsys_parser import find_block, format_block, iter_blocks, open_coordsys_file
from projfactory.resolution.named import (
    find_coordinate_system,
    get_named_proj4_coordinate_system,
    list_coordinate_systems,
    read_projection_file,
    split_qualified_name,
)
from projfactory.resolution.parameters import (
    from_proj4_specification,
    from_proj4_string,
    parse_arguments,
)

__all__ = [
    "find_block",
    "find_coordinate_system",
    "format_block",
    "from_proj4_specification",
    "from_proj4_string",
    "get_named_proj4_coordinate_system",
    "iter_blocks",
    "list_coordinate_systems",
    "open_coordsys_file",
    "parse_arguments",
    "read_projection_file",
    "split_qualified_name",
]
