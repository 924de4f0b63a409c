"""
Tests for the 3D vector.
"""

import math
import unittest

import numpy as np

from swarmsim.geo import ZERO, Vector3


class TestVector3(unittest.TestCase):
    """Test Vector3."""

    def test_distances(self):
        """Test 3D and horizontal distances."""
        a = Vector3(0, 0, 0)
        b = Vector3(3, 4, 12)
        self.assertEqual(a.distance_to(b), 13.0)
        self.assertEqual(a.distance_2d_to(b), 5.0)
        self.assertEqual(a.distance_to(b), b.distance_to(a))

    def test_depth_is_negated_z(self):
        """Test depth reporting."""
        self.assertEqual(Vector3(0, 0, -250).depth, 250.0)

    def test_normalized(self):
        """Test normalization, including the zero vector."""
        v = Vector3(3, 0, 4).normalized()
        self.assertAlmostEqual(v.norm(), 1.0)
        self.assertEqual(ZERO.normalized(), ZERO)

    def test_arithmetic(self):
        """Test vector operators."""
        v = Vector3(1, 2, 3)
        self.assertEqual(v + Vector3(1, 1, 1), Vector3(2, 3, 4))
        self.assertEqual(v - v, ZERO)
        self.assertEqual(v * 2, Vector3(2, 4, 6))
        self.assertEqual(2 * v, Vector3(2, 4, 6))
        self.assertEqual(-v, Vector3(-1, -2, -3))
        self.assertEqual(v.with_z(0), Vector3(1, 2, 0))

    def test_rejects_non_finite(self):
        """Test that NaN and infinite coordinates are refused."""
        with self.assertRaises(ValueError):
            Vector3(math.nan, 0, 0)
        with self.assertRaises(ValueError):
            Vector3(0, math.inf, 0)

    def test_numpy_round_trip(self):
        """Test conversion to and from numpy arrays."""
        v = Vector3(1.5, -2, 7)
        array = v.as_array()
        self.assertIsInstance(array, np.ndarray)
        self.assertEqual(Vector3.from_array(array), v)

    def test_str(self):
        """Test display format."""
        self.assertEqual(str(Vector3(1, 2.3, -3)), "(1.0, 2.3, -3.0)")


if __name__ == "__main__":
    unittest.main()
