"""Command line interface for calculating the distance of two points."""

from __future__ import annotations

import click
import logging
import sys

from typing import Optional

from .distances import from_points
from .enums import DEFAULT_ALGORITHM, GeoDistanceAlgorithm
from .errors import InvalidArgumentError
from .formatting import format_distance, parse_coordinate
from .point import Point
from .version import __version__

__all__ = ("geodistance",)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Sets up logging for the command line interface.

    Args:
        verbose: whether to show debug messages

    Returns:
        the root logger of the package
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("geodistance")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)

    return logger


def _parse_coordinate_argument(ctx, param, value: str) -> Point:
    try:
        return parse_coordinate(value)
    except InvalidArgumentError as ex:
        raise click.BadParameter(str(ex)) from None


@click.command()
@click.version_option(version=__version__, prog_name="geodistance")
@click.argument("first", callback=_parse_coordinate_argument)
@click.argument("second", callback=_parse_coordinate_argument)
@click.option(
    "-a",
    "--algorithm",
    default=DEFAULT_ALGORITHM.value,
    type=click.Choice([algo.value for algo in GeoDistanceAlgorithm]),
    help="the formula to use for calculating the distance",
)
@click.option(
    "-u",
    "--unit",
    default="deg",
    type=click.Choice(["deg", "km"]),
    help="the unit to print the distance in; degrees of rotation or kilometers",
)
@click.option(
    "--precision",
    default=None,
    type=click.IntRange(min=0),
    help="the number of decimal digits to print",
)
@click.option("-v", "--verbose", is_flag=True, help="show debug messages")
def geodistance(
    first: Point,
    second: Point,
    algorithm: str = DEFAULT_ALGORITHM.value,
    unit: str = "deg",
    precision: Optional[int] = None,
    verbose: bool = False,
):
    """Prints the great-circle distance of two points.

    FIRST and SECOND must be given as comma-separated latitude and longitude
    in decimal degrees, e.g. 53.556,6.492. Put '--' before the points if
    any of them starts with a negative latitude.
    """
    setup_logging(verbose)

    dist = from_points(first, second, GeoDistanceAlgorithm(algorithm))
    click.echo(format_distance(dist, unit, precision))


if __name__ == "__main__":
    geodistance()  # type: ignore
