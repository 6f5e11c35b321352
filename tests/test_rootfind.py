"""
 Title: test_rootfind.py
 Description: Test the bracketing root finder in Utilities/rootfind.py
"""

import sys
import unittest
import numpy as np

from tests import pathLocate

# Add parent folder to python path
sys.path.append(pathLocate.getRootDirectory())
from Utilities.rootfind import findRoot, zoomRoot, ROOT_ERROR


class TestFindRoot(unittest.TestCase):

    def test_signChange(self):
        """Marching stops at the first sign change"""
        root, a, b = findRoot(lambda x: x - 2.5, 0., 10., 1.)
        self.assertEqual(root, 3.)
        self.assertEqual((a, b), (2., 3.))

    def test_closestApproach(self):
        """Marching stops where |f| starts to grow"""
        root, a, b = findRoot(lambda x: (x - 3.) ** 2 + 1., 0., 10., 1.)
        self.assertEqual(root, 3.)
        self.assertEqual((a, b), (3., 4.))

    def test_marchBeyondInterval(self):
        """The march is not stopped at the end of the interval"""
        root, a, b = findRoot(lambda x: x - 20., 0., 10., 1.)
        self.assertEqual(root, 20.)

    def test_iterationLimit(self):
        """Return the error value if the march does not terminate"""
        root, a, b = findRoot(lambda x: 1. / x, 1., 10., 1., itmax=100)
        self.assertEqual(root, ROOT_ERROR)


class TestZoomRoot(unittest.TestCase):

    def test_sqrt2(self):
        """Zoom in on the square root of 2"""
        root = zoomRoot(lambda x: x * x - 2., 0., 10., 1.)
        self.assertAlmostEqual(root, np.sqrt(2.), places=3)

    def test_morePasses(self):
        """Additional passes refine the root"""
        coarse = zoomRoot(lambda x: x * x - 2., 0., 10., 1., passes=1)
        fine = zoomRoot(lambda x: x * x - 2., 0., 10., 1., passes=3)
        self.assertTrue(abs(fine - np.sqrt(2.)) < abs(coarse - np.sqrt(2.)))

    def test_failure(self):
        """Return the error value if any pass fails"""
        root = zoomRoot(lambda x: 1. / x, 1., 10., 1., itmax=100)
        self.assertEqual(root, ROOT_ERROR)


if __name__ == "__main__":
    unittest.main()
