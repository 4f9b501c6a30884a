"""Constants used in several places throughout the geodistance package."""

__all__ = ("KM_PER_DEGREE",)


KM_PER_DEGREE: float = 111.045
"""Conversion factor between degrees of rotation along a great circle and
kilometers on the surface of the Earth, assuming its mean radius.
"""
