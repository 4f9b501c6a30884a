from __future__ import annotations

from enum import Enum

__all__ = ("DEFAULT_ALGORITHM", "GeoDistanceAlgorithm")


_algorithm_to_string: dict[GeoDistanceAlgorithm, str] = {}


class GeoDistanceAlgorithm(Enum):
    """Enum representing the formulas that can be used to calculate the
    great-circle distance of two points on a sphere.
    """

    # Cheap but fractionally less accurate; the acos() call loses precision
    # when the two points are very close to each other
    HAVERSINE = "haversine"

    # Numerically more stable below ~1m; uses the same sphere model
    VINCENTY = "vincenty"

    def describe(self) -> str:
        result = _algorithm_to_string.get(self)
        return result or f"unknown algorithm: {self!r}"


_algorithm_to_string[GeoDistanceAlgorithm.HAVERSINE] = "Haversine"
_algorithm_to_string[GeoDistanceAlgorithm.VINCENTY] = "Vincenty"


DEFAULT_ALGORITHM = GeoDistanceAlgorithm.HAVERSINE
"""Algorithm used by the distance functions when none is specified."""
