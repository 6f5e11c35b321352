"""
 Title: test_friction.py
 Description: Test the frictional inflow angle in vortex/friction.py
"""

import sys
import unittest
import numpy as np

from tests import pathLocate

# Add parent folder to python path
sys.path.append(pathLocate.getRootDirectory())
from vortex.friction import fang


class TestInflowAngle(unittest.TestCase):

    rmx = 10.

    def test_values(self):
        """Inflow angle at selected radii"""
        self.assertAlmostEqual(fang(0., self.rmx), 0.)
        self.assertAlmostEqual(fang(5., self.rmx), 5.)
        self.assertAlmostEqual(fang(10., self.rmx), 10.)
        self.assertAlmostEqual(fang(11., self.rmx), 17.5)
        self.assertAlmostEqual(fang(12., self.rmx), 25.)
        self.assertAlmostEqual(fang(50., self.rmx), 25.)

    def test_negativeRadius(self):
        """No inflow for a negative radius"""
        self.assertEqual(fang(-1., self.rmx), 0.)

    def test_scalar(self):
        """Scalar input returns a float"""
        self.assertIsInstance(fang(3., self.rmx), float)

    def test_monotonic(self):
        """Inflow angle does not decrease with radius"""
        r = np.linspace(0., 50., 501)
        angle = fang(r, self.rmx)
        self.assertEqual(angle.shape, r.shape)
        self.assertTrue(np.all(np.diff(angle) >= -1e-10))
        self.assertTrue(np.all(angle <= 25.))


if __name__ == "__main__":
    unittest.main()
