"""
:mod:`metutils` -- unit conversions and basic meteorological quantities
=======================================================================

.. module:: metutils
    :synopsis: Fixed unit conversion constants, unit conversion and
               basic meteorological calculations used by the vortex
               model.

The conversion constants are fixed, named values. They are the only
place in the code where the relation between knots, metres per second,
millibars, Pascals, nautical miles, metres and degrees is defined, so
the vortex model and the driver always agree on the unit contract.

"""

import math
import numpy as np
import numpy.ma as ma

# Speed
KT2MS = 1852. / 3600.
MS2KT = 1. / KT2MS

# Pressure
MB2PA = 100.
PA2MB = 1. / MB2PA

# Distance
NM2M = 1852.
M2NM = 1. / NM2M

# Angle
DEG2RAD = math.pi / 180.
RAD2DEG = 180. / math.pi

# Earth and atmosphere
REARTH = 6378206.4   # metres
OMEGA = 7.29212e-5   # 1/s
RHO_AIR = 1.15       # kg/m^3

# Top of the surface layer -> 10 m
WIND_REDUCTION = 0.9

# 1-minute sustained -> 10-minute mean
ONE2TEN = 0.8928


def coriolis(lat):
    """
    Calculate the Coriolis factor (f) for a given latitude (degrees).
    If an array is passed, return an array, else return a single value.

    :param lat: Latitude (degrees).
    :type  lat: Array-like.

    :returns: Coriolis factor (1/s).

    """
    return 2. * OMEGA * np.sin(DEG2RAD * np.asarray(lat, dtype=float))


def hollandB(vMax, pEnv, pCentre, bmin=1.0, bmax=2.5):
    """
    Holland (1980) shape parameter from the maximum wind speed and the
    pressure deficit, limited to the range [`bmin`, `bmax`].

    A non-physical value is not an error; it falls into the nearest
    limit. A negative deficit (``pEnv < pCentre``) gives the lower
    limit, no deficit at all gives the upper limit.

    :param float vMax: Maximum sustained wind speed (knots).
    :param float pEnv: Ambient pressure (hPa).
    :param float pCentre: Central pressure (hPa).
    :param float bmin: Lower limit of the shape parameter.
    :param float bmax: Upper limit of the shape parameter.

    :returns: Shape parameter and the unclamped value.
    :rtype: tuple

    """
    dP = (pEnv - pCentre) * MB2PA
    num = (vMax * KT2MS) ** 2 * RHO_AIR * math.e
    if dP != 0:
        raw = num / dP
    else:
        raw = math.inf
    return max(min(raw, bmax), bmin), raw


def convert(value, inunits, outunits):
    """
    Convert value from input units to output units.

    Only the units that make up the vortex model's unit contract are
    supported: speeds (``kts``, ``mps``, ``kph``), pressures (``hPa``,
    ``mb``, ``Pa``), lengths (``nm``, ``m``, ``km``) and angles
    (``deg``, ``rad``).

    :param value: Value to be converted
    :param str inunits: Input units.
    :param str outunits: Output units.

    :returns: Value converted to ``outunits`` units.
    :raises ValueError: If there is no conversion between the units.

    """
    value = ma.array(value, dtype=float)
    if inunits == outunits:
        # Do nothing:
        return value
    if inunits == "m/s":
        inunits = "mps"
    if outunits == "m/s":
        outunits = "mps"
    if inunits == "mb":
        inunits = "hPa"
    if outunits == "mb":
        outunits = "hPa"

    # Speeds:
    kts = {"mps": KT2MS, "kph": NM2M / 1000.}
    mps = {"kts": MS2KT, "kph": 3.6}
    kph = {"mps": 1. / 3.6, "kts": 1000. / NM2M}

    # Pressures:
    hPa = {"Pa": MB2PA, "kPa": 0.1}
    Pa = {"hPa": PA2MB, "kPa": 0.001}
    kPa = {"hPa": 10., "Pa": 1000.}

    # Lengths:
    nm = {"m": NM2M, "km": NM2M / 1000.}
    m = {"nm": M2NM, "km": 0.001}
    km = {"m": 1000., "nm": 1000. * M2NM}

    # Angles:
    deg = {"rad": DEG2RAD}
    rad = {"deg": RAD2DEG}

    convert = {"kts": kts,
               "mps": mps,
               "kph": kph,
               "hPa": hPa,
               "Pa": Pa,
               "kPa": kPa,
               "nm": nm,
               "m": m,
               "km": km,
               "deg": deg,
               "rad": rad}

    try:
        factor = convert[inunits][outunits]
    except KeyError:
        raise ValueError("No conversion from {0} to {1}".format(inunits,
                                                                 outunits))
    return value * factor
