"""
This provides the asymmetric Holland (1980) vortex used to force a
storm surge model from forecast advisories. A :class:`VortexState` is
created from the ambient and central pressure, centre position and
maximum sustained wind of one advisory. The radius of maximum winds is
then calibrated separately in each storm quadrant so that the profile
passes through the advisory's isotach radii, and the calibrated vortex
returns surface wind velocity and pressure at any point.

The gradient level profile is

.. math::

    V(r) = \\sqrt{V_m^2 (R_m/r)^B e^{1 - (R_m/r)^B} + (r f / 2)^2} - r f / 2

in which :math:`V_m` is the maximum sustained wind, :math:`R_m` the
radius of maximum winds at the azimuth of the point and :math:`B` the
Holland shape parameter, derived from :math:`V_m` and the pressure
deficit.

The surface wind is the gradient wind normalised so the peak equals
:math:`V_m`, reduced to the surface, turned across the isobars by the
frictional inflow angle and augmented by the storm translation (tapered
by the same radial profile), then converted from a 1-minute sustained
wind to a 10-minute mean wind.

Distances passed to and from the profile methods are in nautical
miles, speeds in knots unless stated otherwise. :meth:`VortexState.uvp`
returns winds in m/s and pressure in Pa.

:Note: The circulation is cyclonic for the northern hemisphere. The
       frictional inflow is turned according to the hemisphere of the
       storm centre.

"""

import logging

import numpy as np

from Utilities.metutils import (KT2MS, MS2KT, MB2PA, M2NM, NM2M, DEG2RAD,
                                WIND_REDUCTION, ONE2TEN, coriolis, hollandB)
from Utilities.maputils import latlon2xy, xy2r, xy2bearing, rotate
from Utilities.error import CalibrationError
from .friction import fang
from . import calibrate

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

NQUADS = 4

# Azimuths (degrees) of the points on the closed radius curve: the four
# quadrant anchors plus one wrap point at each end.
ANCHORS = np.array([-45., 45., 135., 225., 315., 405.])

# Points closer than this to the centre (nm) are in the eye.
EYE_RADIUS = 1.


class VortexState(object):

    """
    An asymmetric hurricane vortex for a single forecast advisory.

    :param float pn: Ambient surface pressure (hPa).
    :param float pc: Surface pressure at the centre of the storm (hPa).
    :param float lat: Latitude of the storm centre (degrees north).
    :param float lon: Longitude of the storm centre (degrees east).
    :param float vmax: Maximum sustained wind speed (knots).

    """

    def __init__(self, pn, pc, lat, lon, vmax):
        self.Pn = pn
        self.Pc = pc
        self.cLat = lat
        self.cLon = lon
        self.Vmax = vmax

        self.corio = float(coriolis(lat))
        self.B, rawB = hollandB(vmax, pn, pc)
        if self.B != rawB:
            log.debug("Shape parameter %g limited to %g", rawB, self.B)

        self.Vr = None
        self.VrQuadrant = np.zeros(NQUADS)
        self.useQuadrantVr = False
        self.radius = np.zeros(NQUADS)

        # Quadrant anchors live in Rmaxes[1:5]; Rmaxes[0] and Rmaxes[5]
        # are the wrap points set by fitRmaxes
        self.Rmaxes = np.full(NQUADS + 2, np.nan)

        self.latestRmax = None
        self.latestAngle = None

    def __repr__(self):
        return ("VortexState(Pn={0}, Pc={1}, lat={2}, lon={3}, vmax={4}, "
                "B={5:.4f})".format(self.Pn, self.Pc, self.cLat, self.cLon,
                                    self.Vmax, self.B))

    # Accessors

    def getShapeParameter(self):
        return self.B

    def setShapeParameter(self, param):
        """
        Override the Holland shape parameter. The value is used as
        given, without limiting it.
        """
        self.B = param

    def getUseQuadrantVr(self):
        return self.useQuadrantVr

    def setUseQuadrantVr(self, flag):
        self.useQuadrantVr = bool(flag)

    def setIsotachWindSpeed(self, speed):
        """Set a single reference wind speed (knots) for all quadrants."""
        self.Vr = float(speed)

    def setIsotachWindSpeeds(self, speeds):
        """Set the reference wind speeds (knots) of the four quadrants."""
        self.VrQuadrant = _quadrantArray(speeds, "isotach wind speeds")

    def setIsotachRadii(self, radii):
        """Set the isotach radii (nm) of the four quadrants."""
        self.radius = _quadrantArray(radii, "isotach radii")

    def getRmaxes(self):
        """Radius of maximum winds (nm) in the four quadrants."""
        return self.Rmaxes[1:NQUADS + 1].copy()

    def setRmaxes(self, rmaxes):
        """
        Set the radius of maximum winds (nm) in the four quadrants
        directly, and close the curve.
        """
        self.Rmaxes[1:NQUADS + 1] = _quadrantArray(rmaxes, "Rmax values")
        self.fitRmaxes()

    rmaxes = property(getRmaxes, setRmaxes)

    def getLatestRmax(self):
        return self.latestRmax

    def getLatestAngle(self):
        return self.latestAngle

    def referenceWind(self, quad):
        """
        Reference wind speed (knots) at the isotach radius of quadrant
        `quad`.
        """
        if self.useQuadrantVr:
            return self.VrQuadrant[quad]
        if self.Vr is None:
            raise ValueError("Isotach wind speed has not been set")
        return self.Vr

    # Radial profile

    def gradientWind(self, r, rmax, withCoriolis=True):
        """
        Gradient level wind speed of the Holland profile.

        :param r: Distance from the centre of the storm (nm).
        :param rmax: Radius of maximum winds (nm).
        :param bool withCoriolis: Include the Coriolis term.

        :returns: Wind speed (m/s).

        """
        ratio = (rmax / r) ** self.B
        if withCoriolis:
            rf = NM2M * r * self.corio / 2.
        else:
            rf = 0.
        vm = self.Vmax * KT2MS
        return np.sqrt(vm ** 2 * ratio * np.exp(1. - ratio) + rf ** 2) - rf

    def Vh(self, r, rmax):
        """
        Gradient wind speed (knots) at distance `r` (nm) for a radius of
        maximum winds `rmax` (nm).
        """
        return MS2KT * self.gradientWind(r, rmax)

    def VhNoCoriolis(self, r, rmax):
        """
        As :meth:`Vh`, neglecting the Coriolis term. Valid near the
        radius of maximum winds.
        """
        return MS2KT * self.gradientWind(r, rmax, withCoriolis=False)

    # Calibration

    def calcRmaxes(self, calibrator=None):
        """
        Calculate the radius of maximum winds in all quadrants.

        :param calibrator: Optional :class:`calibrate.RmaxCalibrator`
                           bound to this vortex, for non-default
                           search settings.

        :raises CalibrationError: If any quadrant could not be solved.
        """
        if calibrator is None:
            calibrator = calibrate.RmaxCalibrator(self)
        return calibrator.calcRmaxes()

    def fitRmaxes(self):
        """Close the radius curve so it is periodic in azimuth."""
        calibrate.fitRmaxes(self.Rmaxes)

    def calibrate(self, calibrator=None):
        """
        Calibrate the vortex: solve every quadrant, then close the
        radius curve.

        :returns: Radius of maximum winds (nm) in the four quadrants.
        """
        self.calcRmaxes(calibrator)
        self.fitRmaxes()
        return self.getRmaxes()

    # Wind field

    def rmw(self, angle):
        """
        Radius of maximum winds at an azimuth, interpolated linearly
        between the quadrant values.

        :param angle: Azimuth (degrees, clockwise from north) in the
                      range [0, 360].

        :returns: Radius of maximum winds (nm).
        :raises CalibrationError: If the curve has not been fitted.

        """
        if not np.all(self.Rmaxes > 0.):
            raise CalibrationError("Radius of maximum winds curve has not "
                                   "been fitted")
        return np.interp(angle, ANCHORS, self.Rmaxes)

    def uvpDiagnostics(self, lat, lon, uTrans, vTrans):
        """
        Wind velocity and pressure at a point, with the radius of
        maximum winds and azimuth used to calculate them. Does not
        modify the vortex.

        :param float lat: Latitude of the point (degrees north).
        :param float lon: Longitude of the point (degrees east).
        :param float uTrans: x component of translational velocity (m/s).
        :param float vTrans: y component of translational velocity (m/s).

        :returns: u, v (m/s), p (Pa), Rmax (nm) and azimuth (degrees).
                  Rmax and azimuth are ``None`` in the eye.

        """
        dx, dy = latlon2xy(lat, lon, self.cLat, self.cLon)
        dist = M2NM * float(xy2r(dx, dy))

        # No wind (and no translation) in the eye
        if dist < EYE_RADIUS:
            return 0., 0., self.Pc * MB2PA, None, None

        angle = float(xy2bearing(dx, dy))
        rmx = float(self.rmw(angle))

        speed = self.gradientWind(dist, rmx)
        speedAtRmax = self.gradientWind(dist, dist)
        vmaxFactor = self.Vmax * KT2MS / speedAtRmax

        # Translation tapered in the same way as the vortex
        damp = abs(speed / speedAtRmax)
        transX = damp * uTrans
        transY = damp * vTrans

        speed = speed * vmaxFactor * WIND_REDUCTION

        u = -speed * np.cos(DEG2RAD * angle)
        v = speed * np.sin(DEG2RAD * angle)
        u, v = rotate(u, v, fang(dist, rmx), self.cLat)

        u = (u + transX) * ONE2TEN
        v = (v + transY) * ONE2TEN

        p = MB2PA * (self.Pc + (self.Pn - self.Pc) *
                     np.exp(-(rmx / dist) ** self.B))

        return float(u), float(v), float(p), rmx, angle

    def uvp(self, lat, lon, uTrans, vTrans):
        """
        Calculate (u, v) wind components and surface pressure from the
        asymmetric vortex. The radius of maximum winds and azimuth of
        the point are kept as :attr:`latestRmax` and
        :attr:`latestAngle`.

        :param float lat: Latitude of the point (degrees north).
        :param float lon: Longitude of the point (degrees east).
        :param float uTrans: x component of translational velocity (m/s).
        :param float vTrans: y component of translational velocity (m/s).

        :returns: u, v (m/s) and p (Pa) at the point.

        """
        u, v, p, rmx, angle = self.uvpDiagnostics(lat, lon, uTrans, vTrans)
        if rmx is not None:
            self.latestRmax = rmx
            self.latestAngle = angle
        return u, v, p

    def uvpField(self, lats, lons, uTrans, vTrans, callback=None):
        """
        Evaluate :meth:`uvp` at a set of points.

        :param lats: :class:`numpy.ndarray` of latitudes.
        :param lons: :class:`numpy.ndarray` of longitudes.
        :param float uTrans: x component of translational velocity (m/s).
        :param float vTrans: y component of translational velocity (m/s).
        :param callback: Optional function called as
                         ``callback(done, total)`` after each point.

        :returns: Arrays of u, v (m/s) and p (Pa).

        """
        lats = np.atleast_1d(np.asarray(lats, dtype=float))
        lons = np.atleast_1d(np.asarray(lons, dtype=float))
        if lats.shape != lons.shape:
            raise ValueError("Latitude and longitude arrays differ in shape")

        U = np.zeros(lats.shape)
        V = np.zeros(lats.shape)
        P = np.zeros(lats.shape)
        total = lats.size
        for n, idx in enumerate(np.ndindex(lats.shape)):
            U[idx], V[idx], P[idx] = self.uvp(lats[idx], lons[idx],
                                              uTrans, vTrans)
            if callback is not None:
                callback(n + 1, total)
        return U, V, P


def _quadrantArray(values, name):
    values = np.asarray(values, dtype=float).ravel()
    if values.size != NQUADS:
        raise ValueError("Expected {0} {1}, got {2}".format(NQUADS, name,
                                                            values.size))
    return values.copy()
