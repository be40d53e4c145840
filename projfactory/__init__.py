"""projfactory: build projection descriptors from PROJ.4 specifications.

Usage::

    from projfactory import from_proj4_string, get_named_proj4_coordinate_system

    merc = from_proj4_string("+proj=merc +ellps=WGS84")
    utm31 = get_named_proj4_coordinate_system("epsg:32631")
"""

from projfactory.core.config import FactoryConfig
from projfactory.core.exceptions import (
    ConfigurationError,
    DomainError,
    InvalidParameterError,
    ParseError,
    ProjectionError,
    RegistryError,
    UnknownIdentifierError,
)
from projfactory.models.geometry import Point2D, Rectangle2D
from projfactory.projections import (
    Projection,
    get_named_proj4_projection,
    get_named_projection,
    get_ordered_projection_names,
    register_projection,
)
from projfactory.resolution import (
    from_proj4_specification,
    from_proj4_string,
    get_named_proj4_coordinate_system,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DomainError",
    "FactoryConfig",
    "InvalidParameterError",
    "ParseError",
    "Point2D",
    "Projection",
    "ProjectionError",
    "Rectangle2D",
    "RegistryError",
    "UnknownIdentifierError",
    "from_proj4_specification",
    "from_proj4_string",
    "get_named_proj4_coordinate_system",
    "get_named_proj4_projection",
    "get_named_projection",
    "get_ordered_projection_names",
    "register_projection",
]
