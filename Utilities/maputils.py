"""
:mod:`maputils` -- mapping functions
====================================

.. module:: maputils
    :synopsis: Local planar projection about a storm centre, vector
               rotation and storm translation velocity.

Contains the local equirectangular projection used to place points
relative to the storm centre, and the helpers built on it. All
functions accept scalars or :class:`numpy.ndarray` arguments.

"""

import logging

import numpy as np
from . import metutils
from .metutils import DEG2RAD, RAD2DEG, REARTH

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def xy2r(x, y):
    """
    Given x and y arrays, returns the distance of each point from the
    origin.

    :param x: x-coordinate of points.
    :param y: y-coordinate of points.
    :type x: :class:`numpy.ndarray`
    :type y: :class:`numpy.ndarray`

    :returns: Distance (in native units) from the origin.
    :rtype: :class:`numpy.ndarray`
    """
    return np.sqrt(x**2 + y**2)


def xy2bearing(x, y):
    """
    Bearing of the point (x, y) as seen from the origin.

    :param x: Eastward offset.
    :param y: Northward offset.

    :returns: Bearing (degrees, +ve clockwise from north) in the range
              (0, 360].

    """
    angle = 360. + RAD2DEG * np.arctan2(x, y)
    return np.where(angle > 360., angle - 360., angle)


def latlon2xy(lat, lon, lat0, lon0):
    """
    Transform (lat, lon) to (x, y) with a local equirectangular
    projection that is true at (lat0, lon0).

    :param lat: Latitude (degrees north).
    :param lon: Longitude (degrees east).
    :param float lat0: Latitude where the projection is true.
    :param float lon0: Longitude where the projection is true.

    :returns: x and y (metres) relative to (lat0, lon0).

    """
    x = DEG2RAD * REARTH * (np.asarray(lon) - lon0) * np.cos(DEG2RAD * lat0)
    y = DEG2RAD * REARTH * (np.asarray(lat) - lat0)
    return x, y


def xy2latlon(x, y, lat0, lon0):
    """
    Transform (x, y) to (lat, lon). Inverse of :func:`latlon2xy`.

    :param x: x (metres) relative to (lat0, lon0).
    :param y: y (metres) relative to (lat0, lon0).
    :param float lat0: Latitude where the projection is true.
    :param float lon0: Longitude where the projection is true.

    :returns: Latitude (degrees north) and longitude (degrees east).

    """
    lat = lat0 + np.asarray(y) / (DEG2RAD * REARTH)
    lon = lon0 + np.asarray(x) / (DEG2RAD * REARTH * np.cos(DEG2RAD * lat0))
    return lat, lon


def rotate(x, y, angle, direction):
    """
    Rotate a 2D vector (x, y) by an angle.

    :param x: x component of the vector.
    :param y: y component of the vector.
    :param angle: Angle to rotate the vector (degrees).
    :param direction: Direction of rotation. Only the sign is used:
                      negative is clockwise, positive (or zero) is
                      counter-clockwise.

    :returns: x and y components of the rotated vector.

    """
    A = np.where(np.asarray(direction) < 0, -1., 1.) * DEG2RAD * angle
    cosA = np.cos(A)
    sinA = np.sin(A)

    xr = x * cosA - y * sinA
    yr = x * sinA + y * cosA
    return xr, yr


def uvtrans(latOld, lonOld, latNew, lonNew, tOld, tNew):
    """
    Calculate the translational velocity of a moving storm from two
    consecutive centre fixes. The displacement is projected at the mean
    latitude of the two fixes.

    :param float latOld: Previous latitude of the centre (degrees north).
    :param float lonOld: Previous longitude of the centre (degrees east).
    :param float latNew: Current latitude of the centre (degrees north).
    :param float lonNew: Current longitude of the centre (degrees east).
    :param float tOld: Previous time (seconds).
    :param float tNew: Current time (seconds).

    :returns: x and y components of the translational velocity (m/s).
    :raises ValueError: If the two fixes are at the same time.

    """
    dt = tNew - tOld
    if dt == 0:
        raise ValueError("Storm centre fixes must be at different times")

    dx, _ = latlon2xy(latNew, lonNew, 0.5 * (latOld + latNew), lonOld)
    _, dy = latlon2xy(latNew, lonNew, latOld, lonOld)

    uTrans = float(dx / dt)
    vTrans = float(dy / dt)
    logger.debug("Translation velocity: (%.3f, %.3f) m/s, %.2f kts",
                 uTrans, vTrans, xy2r(uTrans, vTrans) * metutils.MS2KT)
    return uTrans, vTrans
