import unittest

from Utilities.error import CalibrationError


class TestCalibrationError(unittest.TestCase):

    def test_message(self):
        """Error message includes the failed quadrants"""
        err = CalibrationError("No radius of maximum winds found", [0, 2])
        self.assertEqual(err.quadrants, [0, 2])
        self.assertEqual(str(err), "Calibration error: No radius of maximum "
                                   "winds found (quadrants 0, 2)")

    def test_noQuadrants(self):
        """Error without quadrants"""
        err = CalibrationError("Curve not fitted")
        self.assertEqual(err.quadrants, [])
        self.assertEqual(str(err), "Calibration error: Curve not fitted")


if __name__ == '__main__':
    unittest.main()
