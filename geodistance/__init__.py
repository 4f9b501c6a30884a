"""Main package for the great-circle distance module."""

from .distances import (
    deg2km,
    from_array,
    from_lat_lng,
    from_points,
    haversine,
    vincenty,
)
from .enums import DEFAULT_ALGORITHM, GeoDistanceAlgorithm
from .errors import Error, InvalidArgumentError, UnsupportedAlgorithmError
from .point import Point
from .version import __version__, __version_info__

__all__ = (
    "__version__",
    "__version_info__",
    "deg2km",
    "from_array",
    "from_lat_lng",
    "from_points",
    "haversine",
    "vincenty",
    "DEFAULT_ALGORITHM",
    "Error",
    "GeoDistanceAlgorithm",
    "InvalidArgumentError",
    "Point",
    "UnsupportedAlgorithmError",
)
