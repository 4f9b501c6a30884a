"""Class representing a point on the surface of a sphere."""

from __future__ import annotations

from typing import Any, Sequence

from .errors import InvalidArgumentError

__all__ = ("Point",)


class Point:
    """Immutable latitude-longitude pair, both given in decimal degrees.

    No range checks or normalization are performed; values outside the usual
    [-90, 90] and [-180, 180] ranges are passed on to the distance formulas
    as they are.
    """

    __slots__ = ("_lat", "_long")

    _lat: float
    _long: float

    @classmethod
    def from_sequence(cls, data: Sequence[float]) -> Point:
        """Creates a point from an ordered sequence that holds the latitude
        at index 0 and the longitude at index 1. Extra items are ignored.

        Raises:
            InvalidArgumentError: if the sequence has less than two items or
                its first two items are not numbers
        """
        try:
            lat, long = data[0], data[1]
        except (IndexError, KeyError, TypeError):
            raise InvalidArgumentError(
                f"expected a latitude-longitude pair, got {data!r}"
            ) from None

        try:
            return cls(lat, long)
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                f"latitude and longitude must be numbers, got {data!r}"
            ) from None

    def __init__(self, lat: float, long: float):
        """Constructor.

        Parameters:
            lat: the latitude, in degrees
            long: the longitude, in degrees
        """
        self._lat = float(lat)
        self._long = float(long)

    def format(self) -> str:
        """Formats the point as a string."""
        return f"{self._lat:.7f}°, {self._long:.7f}°"

    @property
    def json(self) -> list[float]:
        """Returns the JSON representation of the point."""
        return [self._lat, self._long]

    @property
    def lat(self) -> float:
        """The latitude of the point."""
        return self._lat

    @property
    def long(self) -> float:
        """The longitude of the point."""
        return self._long

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Point):
            return self._lat == other._lat and self._long == other._long
        else:
            return False

    def __hash__(self):
        return hash((self._lat, self._long))

    def __repr__(self) -> str:
        return "{0.__class__.__name__}(lat={0.lat!r}, long={0.long!r})".format(self)
