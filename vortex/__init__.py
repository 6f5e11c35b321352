"""
:mod:`vortex` -- Asymmetric hurricane vortex
============================================

This module builds an asymmetric Holland vortex from the parameters of
a single forecast advisory, calibrates the radius of maximum winds in
each storm quadrant against the advisory's isotach radii, and evaluates
the surface wind velocity and pressure at a set of points. The output
is a delimited text file of latitude, longitude, u, v (m/s) and
pressure (Pa) for use as storm surge forcing.

The storm parameters are read from a configuration file. The storm
translation velocity is derived from the previous and current centre
fixes in the ``[Track]`` section, when present.

:class:`vortex` can be correctly initialised and started by calling
:meth:`run` with the location of a *configFile*::

    >>> import vortex
    >>> vortex.run('advisory.ini')

"""

import logging as log
from os.path import join as pjoin

import numpy as np
import tqdm

from Utilities.config import ConfigParser
from Utilities.files import flLoadFile, flSaveFile
from Utilities.maputils import uvtrans

from .vortexmodel import VortexState
from .calibrate import RmaxCalibrator

CALIBRATION_OPTIONS = {
    'innerradius': 'innerRadius',
    'outerradius': 'outerRadius',
    'initialstep': 'initialStep',
    'zoom': 'zoom',
    'passes': 'passes',
    'vicinitytolerance': 'vicinityTolerance',
    'maxiterations': 'maxIterations',
}


class VortexGenerator(object):
    """
    Build, calibrate and evaluate the vortex described by a
    configuration.

    :type  config: :class:`Utilities.config._ConfigParser`
    :param config: the configuration.

    :type  progressbar: bool
    :param progressbar: show a progress bar while evaluating points.

    :param callback: optional function called as ``callback(done, total)``
                     after each point is evaluated.

    """

    def __init__(self, config, progressbar=False, callback=None):
        self.config = config
        self.progressbar = progressbar
        self.callback = callback
        self.vortex = None

    def buildVortex(self):
        """
        Create the vortex from the ``[Storm]`` section and set its
        isotach radii and reference wind speed(s). Four reference
        wind speeds select quadrant-specific speeds.

        :returns: :class:`vortexmodel.VortexState`
        """
        config = self.config
        vortex = VortexState(config.getparsed('Storm', 'EnvPressure'),
                             config.getparsed('Storm', 'CentralPressure'),
                             config.getparsed('Storm', 'Latitude'),
                             config.getparsed('Storm', 'Longitude'),
                             config.getparsed('Storm', 'Vmax'))
        vortex.setIsotachRadii(config.getparsed('Storm', 'IsotachRadii'))

        speeds = config.getparsed('Storm', 'IsotachWindSpeed')
        if len(speeds) == 4:
            vortex.setIsotachWindSpeeds(speeds)
            vortex.setUseQuadrantVr(True)
        elif len(speeds) == 1:
            vortex.setIsotachWindSpeed(speeds[0])
            vortex.setUseQuadrantVr(False)
        else:
            raise ValueError("IsotachWindSpeed needs 1 or 4 values, "
                             "got {0}".format(len(speeds)))

        log.info("Created %r", vortex)
        return vortex

    def calibrator(self, vortex):
        """
        :class:`calibrate.RmaxCalibrator` for `vortex`, with the search
        settings from the ``[Calibration]`` section.
        """
        kwargs = {}
        for name, value in self.config.items('Calibration'):
            if name in CALIBRATION_OPTIONS:
                kwargs[CALIBRATION_OPTIONS[name]] = value
        return RmaxCalibrator(vortex, **kwargs)

    def translation(self):
        """
        Storm translation velocity (m/s) from the previous and current
        centre fixes. Zero if there is no ``[Track]`` section.
        """
        config = self.config
        if not config.has_section('Track'):
            log.info("No previous centre fix: storm translation is zero")
            return 0., 0.

        return uvtrans(config.getparsed('Track', 'PreviousLatitude'),
                       config.getparsed('Track', 'PreviousLongitude'),
                       config.getparsed('Storm', 'Latitude'),
                       config.getparsed('Storm', 'Longitude'),
                       config.getparsed('Track', 'PreviousTime'),
                       config.getparsed('Track', 'CurrentTime'))

    def calculateField(self, lats, lons):
        """
        Calibrate the vortex and evaluate wind and pressure at the
        points (`lats`, `lons`).

        :returns: Arrays of u, v (m/s) and p (Pa).
        """
        self.vortex = self.buildVortex()
        rmaxes = self.vortex.calibrate(self.calibrator(self.vortex))
        log.info("Radius of maximum winds (nm) by quadrant: %s",
                 ", ".join("{0:.2f}".format(r) for r in rmaxes))

        uTrans, vTrans = self.translation()

        pbar = tqdm.tqdm(total=np.size(lats), disable=not self.progressbar)

        def status(done, total):
            pbar.update(done - pbar.n)
            if self.callback is not None:
                self.callback(done, total)

        try:
            U, V, P = self.vortex.uvpField(lats, lons, uTrans, vTrans,
                                           callback=status)
        finally:
            pbar.close()
        return U, V, P

    def dumpFieldToFile(self, pointFile, outputFile):
        """
        Evaluate the field at the points listed in `pointFile`
        (latitude, longitude) and save it to `outputFile`.
        """
        points = np.atleast_2d(flLoadFile(pointFile))
        lats, lons = points[:, 0], points[:, 1]
        log.info("Evaluating wind field at %d points", lats.size)

        U, V, P = self.calculateField(lats, lons)
        flSaveFile(outputFile, np.column_stack((lats, lons, U, V, P)),
                   header='lat,lon,u,v,p', fmt='%.6f')
        log.info("Saved wind field to %s", outputFile)
        return U, V, P


def run(configFile, callback=None):
    """
    Run the vortex wind field calculation.

    :param str configFile: path to a configuration file.
    :param func callback: optional function called as
                          ``callback(done, total)`` after each point
                          is evaluated.

    """

    log.info('Loading vortex settings')

    config = ConfigParser()
    config.read(configFile)

    pointFile = config.get('Input', 'PointFile')
    outputPath = config.get('Output', 'Path')
    showProgressBar = config.getboolean('Logging', 'ProgressBar')

    vg = VortexGenerator(config, progressbar=showProgressBar,
                         callback=callback)
    outputFile = pjoin(outputPath, 'uvp.csv')
    return vg.dumpFieldToFile(pointFile, outputFile)
