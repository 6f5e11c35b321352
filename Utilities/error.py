"""
:mod:`error` -- exceptions raised by the vortex model
=====================================================

.. module:: error
    :synopsis: Exception classes for the vortex model.

"""


class CalibrationError(Exception):
    """
    Raised when the radius of maximum winds cannot be determined for
    one or more storm quadrants, or when the fitted radius curve is
    used before it has been calibrated.

    :param str message: Description of the failure.
    :param list quadrants: Indices (0-3) of the quadrants that failed.

    """
    def __init__(self, message, quadrants=None):
        Exception.__init__(self, message)
        self.message = message
        self.quadrants = list(quadrants or [])

    def __str__(self):
        if self.quadrants:
            return "Calibration error: %s (quadrants %s)" % \
                (self.message, ", ".join(str(q) for q in self.quadrants))
        return "Calibration error: %s" % self.message
