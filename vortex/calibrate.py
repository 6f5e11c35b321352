"""
:mod:`calibrate` -- radius of maximum winds in each storm quadrant
==================================================================

.. module:: calibrate
    :synopsis: Solve for the radius of maximum winds that makes the
               Holland profile pass through the isotach radius of each
               storm quadrant, then close the curve over azimuth.

For each quadrant the search looks for the radius of maximum winds
`x` for which the gradient wind at the isotach radius equals the
isotach (reference) wind speed:

.. math::

    |V_h(r_{iso}, x)| - V_r = 0

When the solution lies close to the isotach radius itself (or no
solution is found), the quadrant is solved again with the Coriolis term
neglected, which is appropriate near the radius of maximum winds.

"""

import logging

from Utilities.rootfind import zoomRoot, ROOT_ERROR, MAX_ITERATIONS
from Utilities.error import CalibrationError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


def fitRmaxes(Rmaxes):
    """
    Generate the two additional points of the closed (periodic) radius
    curve. The curve is updated in place.

    :param Rmaxes: :class:`numpy.ndarray` of six values; the quadrant
                   values are in elements 1-4.

    :returns: The updated array.

    """
    Rmaxes[0] = Rmaxes[4]
    Rmaxes[5] = Rmaxes[1]
    return Rmaxes


class RmaxCalibrator(object):
    """
    Calibrate the radius of maximum winds of a
    :class:`vortexmodel.VortexState` from its isotach radii and
    reference wind speeds.

    :param vortex: The vortex to calibrate.
    :param float innerRadius: Start of the search interval (nm).
    :param float outerRadius: End of the search interval (nm).
    :param float initialStep: Step size of the first pass (nm).
    :param float zoom: Step size reduction between passes.
    :param int passes: Number of passes of the root finder.
    :param float vicinityTolerance: Relative distance between the
                                    solution and the isotach radius at
                                    or below which the quadrant is
                                    solved again without the Coriolis
                                    term.
    :param int maxIterations: Iteration cap of each pass.

    """

    innerRadius = 1.
    outerRadius = 100.
    initialStep = 1.
    zoom = 0.01
    passes = 3
    vicinityTolerance = 0.1
    maxIterations = MAX_ITERATIONS

    def __init__(self, vortex, innerRadius=None, outerRadius=None,
                 initialStep=None, zoom=None, passes=None,
                 vicinityTolerance=None, maxIterations=None):
        self.vortex = vortex
        if innerRadius is not None:
            self.innerRadius = innerRadius
        if outerRadius is not None:
            self.outerRadius = outerRadius
        if initialStep is not None:
            self.initialStep = initialStep
        if zoom is not None:
            self.zoom = zoom
        if passes is not None:
            self.passes = passes
        if vicinityTolerance is not None:
            self.vicinityTolerance = vicinityTolerance
        if maxIterations is not None:
            self.maxIterations = maxIterations

    def withCoriolis(self, quad):
        """
        Target function for quadrant `quad`, using the full gradient
        wind equation.
        """
        r = self.vortex.radius[quad]
        vr = self.vortex.referenceWind(quad)

        def func(x):
            return abs(self.vortex.Vh(r, x)) - vr
        return func

    def noCoriolis(self, quad):
        """
        Target function for quadrant `quad`, neglecting the Coriolis
        term.
        """
        r = self.vortex.radius[quad]
        vr = self.vortex.referenceWind(quad)

        def func(x):
            return abs(self.vortex.VhNoCoriolis(r, x)) - vr
        return func

    def solve(self, func):
        return zoomRoot(func, self.innerRadius, self.outerRadius,
                        self.initialStep, self.passes, self.zoom,
                        self.maxIterations)

    def calcRmax(self, quad):
        """
        Radius of maximum winds (nm) for a single quadrant.

        :param int quad: Quadrant index (0-3).

        :returns: The radius of maximum winds, or
                  :data:`Utilities.rootfind.ROOT_ERROR` if no solution
                  was found.

        """
        radius = self.vortex.radius[quad]
        if radius <= 0:
            raise ValueError("Isotach radius of quadrant {0} must be "
                             "positive: {1}".format(quad, radius))

        root = self.solve(self.withCoriolis(quad))
        vicinity = abs(root - radius) / root
        if root < 0. or vicinity <= self.vicinityTolerance:
            log.info("Quadrant %d: Rmax %g is close to the isotach radius %g;"
                     " solving again neglecting Coriolis", quad, root, radius)
            root = self.solve(self.noCoriolis(quad))

        log.debug("Quadrant %d: isotach radius %g nm, Vr %g kts, "
                  "Rmax %g nm", quad, radius,
                  self.vortex.referenceWind(quad), root)
        return root

    def calcRmaxes(self):
        """
        Calculate the radius of maximum winds for all storm quadrants
        and store them on the vortex.

        :returns: Radius of maximum winds (nm) in each quadrant.
        :raises CalibrationError: If any quadrant has no solution. The
                                  values of the other quadrants are
                                  still stored.

        """
        failed = []
        for quad in range(len(self.vortex.radius)):
            root = self.calcRmax(quad)
            if root == ROOT_ERROR:
                log.error("No radius of maximum winds found for "
                          "quadrant %d", quad)
                failed.append(quad)
            self.vortex.Rmaxes[quad + 1] = root

        if failed:
            raise CalibrationError("No radius of maximum winds found",
                                   failed)
        return self.vortex.getRmaxes()
