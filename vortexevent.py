"""
:mod:`vortexevent` -- run the vortex model for a single advisory
================================================================

.. module:: vortexevent
    :synopsis: Calibrate the asymmetric vortex for a single forecast
               advisory and evaluate the surface wind and pressure.

Run the :mod:`vortex` module to build the asymmetric Holland vortex
described by a configuration file, calibrate the radius of maximum
winds in each storm quadrant and evaluate wind velocity and pressure at
the points listed in the input point file.

Usage::

    python vortexevent.py -c advisory.ini

"""

import logging as log
from functools import reduce

import os
import time
import argparse
import traceback

from functools import wraps
from os.path import join as pjoin, realpath, isdir, dirname

from Utilities.config import ConfigParser
from Utilities.files import flStartLog, flLogFatalError
from Utilities.version import version

__version__ = version()


def timer(f):
    """
    Basic timing functions for entire process
    """
    @wraps(f)
    def wrap(*args, **kwargs):
        t1 = time.time()
        res = f(*args, **kwargs)

        tottime = time.time() - t1
        msg = "%02d:%02d:%02d " % \
          reduce(lambda ll, b : divmod(ll[0], b) + ll[1:],
                        [(tottime,), 60, 60])

        log.info("Time for {0}: {1}".format(f.__name__, msg))
        return res

    return wrap


def doOutputDirectoryCreation(configFile):
    """
    Create the output folder.

    :param str configFile: Name of configuration file.
    :raises OSError: If the directory cannot be created.

    """

    config = ConfigParser()
    config.read(configFile)

    outputPath = config.get('Output', 'Path')

    log.info('Output will be stored under %s', outputPath)

    if not isdir(outputPath):
        os.makedirs(outputPath)


@timer
def main(configFile):
    """
    Main function to execute the :mod:`vortex`.

    :param str configFile: Path to configuration file.

    """
    log.info("Vortex model version %s", __version__)
    doOutputDirectoryCreation(configFile)

    import vortex
    vortex.run(configFile)


def startup():
    """
    Parse the command line arguments and call the :func:`main`
    function.

    """
    parser = argparse.ArgumentParser()
    parser.add_argument('-c', '--config_file',
                        help='Path to configuration file')
    parser.add_argument('-v', '--verbose', help='Verbose output',
                        action='store_true')
    parser.add_argument('-d', '--debug', help='Allow pdb traces',
                        action='store_true')
    args = parser.parse_args()

    configFile = args.config_file
    config = ConfigParser()
    config.read(configFile)

    logfile = config.get('Logging', 'LogFile')
    logdir = dirname(realpath(logfile))

    # If log file directory does not exist, create it
    if not isdir(logdir):
        try:
            os.makedirs(logdir)
        except OSError:
            logfile = pjoin(os.getcwd(), 'vortex.log')

    logLevel = config.get('Logging', 'LogLevel')
    verbose = config.getboolean('Logging', 'Verbose')
    datestamp = config.getboolean('Logging', 'Datestamp')
    debug = False

    if args.verbose:
        verbose = True

    if args.debug:
        debug = True

    flStartLog(logfile, logLevel, verbose, datestamp)

    if debug:
        main(configFile)
    else:
        try:
            main(configFile)
        except ImportError as e:
            log.critical("Missing module: {0}".format(e))
        except Exception:  # pylint: disable=W0703
            # Catch any exceptions that occur and log them (nicely):
            tblines = traceback.format_exc().splitlines()
            flLogFatalError(tblines)


if __name__ == "__main__":
    startup()
