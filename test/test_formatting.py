from typing import Optional
from pytest import mark, raises

from geodistance.errors import InvalidArgumentError
from geodistance.formatting import format_distance, format_point, parse_coordinate
from geodistance.point import Point


@mark.parametrize(
    ("degrees", "unit", "precision", "output"),
    [
        (1, "deg", None, "1.0000000°"),
        (2.5, "deg", 2, "2.50°"),
        (0, "km", None, "0.000 km"),
        (1, "km", None, "111.045 km"),
        (2, "km", 1, "222.1 km"),
        (180, "km", 0, "19988 km"),
    ],
)
def test_format_distance(
    degrees: float, unit: str, precision: Optional[int], output: str
):
    assert format_distance(degrees, unit, precision) == output


def test_format_distance_with_unknown_unit():
    with raises(InvalidArgumentError):
        format_distance(1, "mi")


def test_format_point():
    assert format_point(Point(-33.87, 151.21)) == "-33.8700000°, 151.2100000°"


@mark.parametrize(
    ("input", "output"),
    [
        ("53.556,6.492", Point(53.556, 6.492)),
        (" -33.87 , 151.21 ", Point(-33.87, 151.21)),
        ("0,0", Point(0, 0)),
    ],
)
def test_parse_coordinate(input: str, output: Point):
    assert parse_coordinate(input) == output


@mark.parametrize("input", ["", "53.556", "1,2,3", "north,east", "1,"])
def test_parse_invalid_coordinate(input: str):
    with raises(InvalidArgumentError):
        parse_coordinate(input)
