from __future__ import annotations

from typing import Optional

from .distances import deg2km
from .errors import InvalidArgumentError
from .point import Point

__all__ = ("format_distance", "format_point", "parse_coordinate")


_default_precision_for_unit: dict[str, int] = {"deg": 7, "km": 3}


def format_point(point: Point) -> str:
    """Formats a point in a human-readable way."""
    return point.format()


def format_distance(
    degrees: float, unit: str = "deg", precision: Optional[int] = None
) -> str:
    """Formats a distance given in degrees of rotation in a human-readable
    way.

    Args:
        degrees: the distance, in degrees of rotation
        unit: the unit to show the distance in; ``deg`` for degrees of
            rotation or ``km`` for kilometers
        precision: the number of decimal digits to show; ``None`` means to
            use a default that depends on the unit

    Returns:
        the formatted distance
    """
    if unit not in _default_precision_for_unit:
        raise InvalidArgumentError(f"unknown distance unit: {unit!r}")

    if precision is None:
        precision = _default_precision_for_unit[unit]

    if unit == "km":
        return f"{deg2km(degrees):.{precision}f} km"
    else:
        return f"{degrees:.{precision}f}°"


def parse_coordinate(text: str) -> Point:
    """Parses a point given as comma-separated latitude and longitude, in
    decimal degrees.

    Args:
        text: the text to parse, e.g. ``53.556,6.492``

    Returns:
        the parsed point
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise InvalidArgumentError(f"Invalid coordinate: {text!r}")
    return Point.from_sequence([part.strip() for part in parts])
