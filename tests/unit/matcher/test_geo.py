#!/usr/bin/env python3
"""
Test suite for great-circle distance.
"""

import unittest

from carematch.matcher.geo import calculate_distance, distance_between
from carematch.matcher.models import Coordinates


class TestGeodistance(unittest.TestCase):

    def test_same_point_is_zero(self):
        point = Coordinates(-23.5505, -46.6333)
        self.assertEqual(calculate_distance(point, point), 0.0)

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is ~111.19 km on a 6371 km sphere."""
        d = calculate_distance(Coordinates(0.0, 0.0), Coordinates(1.0, 0.0))
        self.assertAlmostEqual(d, 111.19, places=2)

    def test_known_city_pair(self):
        """Sao Paulo to Rio de Janeiro is roughly 360 km."""
        sao_paulo = Coordinates(-23.5505, -46.6333)
        rio = Coordinates(-22.9068, -43.1729)
        d = calculate_distance(sao_paulo, rio)
        self.assertGreater(d, 350)
        self.assertLess(d, 365)

    def test_symmetric_and_rounded(self):
        a = Coordinates(-23.5505, -46.6333)
        b = Coordinates(-23.5605, -46.6433)
        self.assertEqual(calculate_distance(a, b), calculate_distance(b, a))
        self.assertEqual(calculate_distance(a, b), round(calculate_distance(a, b), 2))

    def test_missing_point_returns_none(self):
        point = Coordinates(-23.5505, -46.6333)
        self.assertIsNone(distance_between(None, point))
        self.assertIsNone(distance_between(point, None))
        self.assertIsNone(distance_between(None, None))


if __name__ == '__main__':
    unittest.main()
