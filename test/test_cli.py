"""Unit tests for ``geodistance.cli``."""

from click.testing import CliRunner

from geodistance import __version__
from geodistance.cli import geodistance
from geodistance.distances import deg2km, from_lat_lng
from geodistance.enums import GeoDistanceAlgorithm

import unittest


class GeoDistanceCommandTest(unittest.TestCase):
    """Unit tests for the ``geodistance`` command."""

    def setUp(self):
        self.runner = CliRunner()

    def test_default_output(self):
        result = self.runner.invoke(geodistance, ["53.556,6.492", "50.750,5.9149"])
        self.assertEqual(0, result.exit_code, result.output)

        expected = from_lat_lng(53.556, 6.492, 50.750, 5.9149)
        self.assertEqual(f"{expected:.7f}°\n", result.output)

    def test_vincenty_in_km(self):
        result = self.runner.invoke(
            geodistance,
            ["-a", "vincenty", "-u", "km", "--precision", "2", "0,0", "0,1"],
        )
        self.assertEqual(0, result.exit_code, result.output)

        expected = deg2km(
            from_lat_lng(0, 0, 0, 1, GeoDistanceAlgorithm.VINCENTY)
        )
        self.assertEqual(f"{expected:.2f} km\n", result.output)

    def test_negative_latitude(self):
        result = self.runner.invoke(geodistance, ["--", "-10,0", "10,0"])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual("20.0000000°\n", result.output)

    def test_invalid_coordinate(self):
        result = self.runner.invoke(geodistance, ["53.556", "50.750,5.9149"])
        self.assertEqual(2, result.exit_code)
        self.assertIn("Invalid coordinate", result.output)

    def test_invalid_algorithm(self):
        result = self.runner.invoke(geodistance, ["-a", "euclid", "0,0", "1,1"])
        self.assertEqual(2, result.exit_code)

    def test_version(self):
        result = self.runner.invoke(geodistance, ["--version"])
        self.assertEqual(0, result.exit_code)
        self.assertIn(__version__, result.output)
