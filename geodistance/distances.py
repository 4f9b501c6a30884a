"""Distance calculation routines.

All the distance functions in this module return the great-circle distance
of two points in degrees of rotation. Use `deg2km()` to convert the result
to kilometers.

Example::

    >>> dist = from_lat_lng(53.556, 6.492, 50.750, 5.9149)
    >>> deg2km(dist)  # doctest: +ELLIPSIS
    314.06...

Both formulas assume a perfect sphere, so they deviate from the true geodesic
distance by up to ~0.5%. The difference between the two is numerical only;
Vincenty's formula is better conditioned for points closer than about a meter.

See https://en.wikipedia.org/wiki/Great-circle_distance
"""

import logging

from math import acos, atan2, cos, degrees, isnan, nan, radians, sin, sqrt
from typing import Callable, Sequence

from .constants import KM_PER_DEGREE
from .enums import DEFAULT_ALGORITHM, GeoDistanceAlgorithm
from .errors import UnsupportedAlgorithmError
from .point import Point

__all__ = (
    "deg2km",
    "from_array",
    "from_lat_lng",
    "from_points",
    "haversine",
    "vincenty",
)

log = logging.getLogger(__name__)


def deg2km(degrees: float) -> float:
    """Converts a distance given in degrees of rotation along a great circle
    to kilometers on the surface of the Earth.
    """
    return degrees * KM_PER_DEGREE


def haversine(first: Point, second: Point) -> float:
    """Returns the distance of two points given in spherical coordinates
    (latitude and longitude) using the Haversine formula.

    Parameters:
        first: the first point
        second: the second point

    Returns:
        the distance of the two points, in degrees of rotation

    See https://en.wikipedia.org/wiki/Haversine_formula
    """
    first_lat = radians(first.lat)
    second_lat = radians(second.lat)
    lon_diff = radians(second.long) - radians(first.long)

    x = cos(first_lat) * cos(second_lat) * cos(lon_diff) + sin(first_lat) * sin(
        second_lat
    )

    # Rounding may push x slightly out of the domain of acos() for identical
    # or antipodal points. Comparisons keep NaN intact.
    if x > 1.0:
        x = 1.0
    elif x < -1.0:
        x = -1.0

    return degrees(acos(x))


def vincenty(first: Point, second: Point) -> float:
    """Returns the distance of two points given in spherical coordinates
    (latitude and longitude) using the special case of Vincenty's formula
    for a sphere.

    Parameters:
        first: the first point
        second: the second point

    Returns:
        the distance of the two points, in degrees of rotation

    See https://en.wikipedia.org/wiki/Vincenty%27s_formulae
    """
    first_lat = radians(first.lat)
    second_lat = radians(second.lat)
    lon_diff = radians(second.long - first.long)

    sin_first_lat, cos_first_lat = sin(first_lat), cos(first_lat)
    sin_second_lat, cos_second_lat = sin(second_lat), cos(second_lat)
    cos_lon_diff = cos(lon_diff)

    numerator = sqrt(
        (cos_second_lat * sin(lon_diff)) ** 2
        + (
            cos_first_lat * sin_second_lat
            - sin_first_lat * cos_second_lat * cos_lon_diff
        )
        ** 2
    )
    denominator = (
        sin_first_lat * sin_second_lat + cos_first_lat * cos_second_lat * cos_lon_diff
    )
    return degrees(atan2(numerator, denominator))


_formulas: dict[GeoDistanceAlgorithm, Callable[[Point, Point], float]] = {
    GeoDistanceAlgorithm.HAVERSINE: haversine,
    GeoDistanceAlgorithm.VINCENTY: vincenty,
}


def from_points(
    point1: Point,
    point2: Point,
    algo: GeoDistanceAlgorithm = DEFAULT_ALGORITHM,
) -> float:
    """Returns the great-circle distance of two points.

    Parameters:
        point1: the first point
        point2: the second point
        algo: the formula to use

    Returns:
        the distance of the two points, in degrees of rotation

    Raises:
        UnsupportedAlgorithmError: if the formula is not one of the members
            of GeoDistanceAlgorithm_
    """
    try:
        formula = _formulas[algo]
    except (KeyError, TypeError):
        raise UnsupportedAlgorithmError(algo) from None

    log.debug(f"Calculating distance of {point1!r} and {point2!r} with {algo!r}")

    try:
        result = formula(point1, point2)
    except ValueError:
        # sin() and cos() reject infinite angles
        result = nan

    if isnan(result):
        log.warning(
            f"{algo.describe()} distance of {point1!r} and {point2!r} is not a number"
        )

    return result


def from_lat_lng(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    algo: GeoDistanceAlgorithm = DEFAULT_ALGORITHM,
) -> float:
    """Returns the great-circle distance of two points given with their
    latitudes and longitudes, in degrees.

    Returns:
        the distance of the two points, in degrees of rotation
    """
    return from_points(Point(lat1, lng1), Point(lat2, lng2), algo)


def from_array(
    point1: Sequence[float],
    point2: Sequence[float],
    algo: GeoDistanceAlgorithm = DEFAULT_ALGORITHM,
) -> float:
    """Returns the great-circle distance of two points, each given as an
    ordered sequence that holds the latitude at index 0 and the longitude at
    index 1.

    Returns:
        the distance of the two points, in degrees of rotation

    Raises:
        InvalidArgumentError: if one of the sequences does not hold a
            latitude-longitude pair
    """
    return from_points(Point.from_sequence(point1), Point.from_sequence(point2), algo)
