"""
 Title: test_vortex.py
 Description: Test the vortex driver: building the vortex from a
              configuration, calibration and output of the wind field.
"""

import os
import sys
import shutil
import tempfile
import unittest
from os.path import join as pjoin

import numpy as np

from tests import NumpyTestCase
from tests import pathLocate

# Add parent folder to python path
unittest_dir = pathLocate.getUnitTestDirectory()
sys.path.append(pathLocate.getRootDirectory())

import vortex
from Utilities.config import ConfigParser, reset as forgetAllSingletons
from Utilities.files import flLoadFile
from Utilities.metutils import DEG2RAD, REARTH, MB2PA


class TestVortexGenerator(NumpyTestCase.NumpyTestCase):

    def setUp(self):
        forgetAllSingletons()
        self.configFile = pjoin(unittest_dir, 'test_data', 'test_vortex.ini')
        self.config = ConfigParser()
        self.config.read(self.configFile)

    def tearDown(self):
        forgetAllSingletons()

    def test_buildVortex(self):
        """Build the vortex from the storm settings"""
        vg = vortex.VortexGenerator(self.config)
        v = vg.buildVortex()
        self.assertEqual(v.Pc, 950.)
        self.assertEqual(v.cLat, 25.)
        self.assertFalse(v.getUseQuadrantVr())
        self.assertEqual(v.referenceWind(0), 34.)
        self.numpyAssertAlmostEqual(v.radius, np.array([200.] * 4))

    def test_quadrantSpeeds(self):
        """Four reference speeds select quadrant wind speeds"""
        self.config.set('Storm', 'IsotachWindSpeed', [34., 34., 50., 50.])
        v = vortex.VortexGenerator(self.config).buildVortex()
        self.assertTrue(v.getUseQuadrantVr())
        self.assertEqual(v.referenceWind(3), 50.)

    def test_badSpeeds(self):
        """Reference speeds must have one or four values"""
        self.config.set('Storm', 'IsotachWindSpeed', [34., 50.])
        vg = vortex.VortexGenerator(self.config)
        self.assertRaises(ValueError, vg.buildVortex)

    def test_translation(self):
        """Translation velocity from the previous centre fix"""
        u, v = vortex.VortexGenerator(self.config).translation()
        self.assertAlmostEqual(u, 0.)
        self.assertAlmostEqual(v, DEG2RAD * REARTH * 0.5 / 21600.)

    def test_noTrack(self):
        """No previous centre fix gives zero translation"""
        self.config.remove_section('Track')
        u, v = vortex.VortexGenerator(self.config).translation()
        self.assertEqual((u, v), (0., 0.))

    def test_calibrationSettings(self):
        """Calibration settings are passed to the calibrator"""
        self.config.set('Calibration', 'Passes', '2')
        vg = vortex.VortexGenerator(self.config)
        calib = vg.calibrator(vg.buildVortex())
        self.assertEqual(calib.passes, 2)
        self.assertEqual(calib.outerRadius, 100.)


class TestRun(NumpyTestCase.NumpyTestCase):

    def setUp(self):
        forgetAllSingletons()
        self.tmpdir = tempfile.mkdtemp()
        self.configFile = pjoin(unittest_dir, 'test_data', 'test_vortex.ini')
        config = ConfigParser()
        config.read(self.configFile)
        config.set('Input', 'PointFile',
                   pjoin(unittest_dir, 'test_data', 'points.csv'))
        config.set('Output', 'Path', pjoin(self.tmpdir, 'output'))

    def tearDown(self):
        forgetAllSingletons()
        shutil.rmtree(self.tmpdir)

    def test_run(self):
        """Run the vortex model and save the wind field"""
        calls = []
        U, V, P = vortex.run(self.configFile,
                             callback=lambda d, t: calls.append((d, t)))
        outputFile = pjoin(self.tmpdir, 'output', 'uvp.csv')
        self.assertTrue(os.path.isfile(outputFile))
        self.assertEqual(calls, [(n, 10) for n in range(1, 11)])

        data = flLoadFile(outputFile)
        self.assertEqual(data.shape, (10, 5))
        self.assertTrue(np.allclose(data[:, 2], U, atol=1e-5))
        self.assertTrue(np.allclose(data[:, 4], P, atol=1e-5))
        # First point is the storm centre
        self.assertEqual(data[0, 2], 0.)
        self.assertEqual(data[0, 3], 0.)
        self.assertAlmostEqual(data[0, 4], 950. * MB2PA)
        self.assertTrue(np.all(P[1:] > 950. * MB2PA))
        self.assertTrue(np.all(P < 1013. * MB2PA))


if __name__ == "__main__":
    unittest.main()
