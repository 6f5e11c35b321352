"""
:mod:`friction` -- frictional inflow angle
==========================================

.. module:: friction
    :synopsis: Inflow angle that turns the surface wind across the
               isobars towards the storm centre.

The inflow angle is piecewise linear in the normalised radius
``r / rmx``: it grows from 0 at the centre to 10 degrees at the radius
of maximum winds, ramps to 25 degrees at ``1.2 * rmx`` and is constant
beyond that.

"""

import numpy as np


def fang(r, rmx):
    """
    Compute a wind angle to parameterise frictional inflow across
    isobars.

    :param r: Distance from the centre of the storm.
    :type  r: float or :class:`numpy.ndarray`
    :param float rmx: Radius of maximum winds (same units as `r`).

    :returns: Frictional inflow angle (degrees). Zero for negative `r`.

    """
    r = np.asarray(r, dtype=float)
    ratio = r / rmx
    inflow = np.where(ratio >= 1.2, 25., 10. + 75. * (ratio - 1.))
    inflow = np.where(ratio < 1., 10. * ratio, inflow)
    inflow = np.where(r < 0., 0., inflow)
    if inflow.ndim == 0:
        return float(inflow)
    return inflow
