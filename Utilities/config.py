"""
:mod:`config` -- reading configuration files
============================================

.. module:: config
    :synopsis: Provides functions for manipulating configuration files
               e.g. reading setting from a configuration file.

"""

import io
from configparser import RawConfigParser
import os.path


def parseBool(txt):
    """
    Parser for boolean options

    :param str txt: String from config file to parse.

    :returns: ``True`` if the string is 'True', ``False`` otherwise.
    :rtype: boolean

    """

    return txt == 'True'


def parseList(txt):
    """
    Parse a comma-separated line into a list.

    :param str txt: String from config file to parse.

    :return: List, based on the input string.
    :rtype: list

    """

    return txt.split(',')


def parseFloatList(txt):
    """
    Parse a comma-separated line into a list of floats.

    :param str txt: String from config file to parse.

    :return: List of floats, based on the input string.
    :rtype: list

    """

    return [float(v) for v in parseList(txt)]


def formatList(lst):
    """
    Convert a list into a comma-joined string.

    :param list lst: Input list to join.

    :return: A string comprised of the list elements joined by commas.
    :rtype: str

    """

    return ','.join([str(l) for l in lst])


FORMATERS = {
    'Storm_isotachradii': formatList,
    'Storm_isotachwindspeed': formatList,
}

PARSERS = {
    'Calibration_innerradius': float,
    'Calibration_outerradius': float,
    'Calibration_initialstep': float,
    'Calibration_zoom': float,
    'Calibration_passes': int,
    'Calibration_vicinitytolerance': float,
    'Calibration_maxiterations': int,
    'Input_pointfile': str,
    'Logging_logfile': str,
    'Logging_loglevel': str,
    'Logging_progressbar': parseBool,
    'Logging_verbose': parseBool,
    'Logging_datestamp': parseBool,
    'Output_path': str,
    'Storm_envpressure': float,
    'Storm_centralpressure': float,
    'Storm_latitude': float,
    'Storm_longitude': float,
    'Storm_vmax': float,
    'Storm_isotachradii': parseFloatList,
    'Storm_isotachwindspeed': parseFloatList,
    'Track_previouslatitude': float,
    'Track_previouslongitude': float,
    'Track_previoustime': float,
    'Track_currenttime': float}

DEFAULTS = """
[Storm]
EnvPressure=1013.0

[Calibration]
InnerRadius=1.0
OuterRadius=100.0
InitialStep=1.0
Zoom=0.01
Passes=3
VicinityTolerance=0.1
MaxIterations=1000000

[Input]
PointFile=input/points.csv

[Output]
Path=output

[Logging]
ProgressBar=False
LogFile=vortex.log
LogLevel=INFO
Verbose=False
Datestamp=False

"""


class _ConfigParser(RawConfigParser):

    """
    A configuration file parser that extends
    :class:`configparser.RawConfigParser` with a few helper functions
    and default options.
    """

    def __init__(self, defaults=DEFAULTS):
        RawConfigParser.__init__(self)
        self.read_file(io.StringIO(defaults))
        self.readonce = False

    def read(self, filename):
        """
        Read a configuration file, and set the :attr:`readonce` attribute
        to ``True``.

        :param str filename: Path to the configuration file to read.

        """

        if filename is None:
            return
        if self.readonce:
            return
        if not os.path.exists(filename):
            raise ValueError("config file does not exist: {}".format(filename))
        RawConfigParser.read(self, filename)
        self.readonce = True

    def getparsed(self, section, option):
        """
        Return the value of an option, converted with the parser
        registered for it.

        :param str section: Section name.
        :param str option: Option name.

        """
        value = self.get(section, option)
        try:
            parse = PARSERS['%s_%s' % (section, option.lower())]
        except KeyError:
            return value
        return parse(value)

    def items(self, section):
        """
        Return the parsed option, value pairs for a section of the configuration.

        :param str section: Section name.

        :returns: (Option, value) tuple pairs for the given section.
        :rtype: list

        """

        raw = RawConfigParser.items(self, section)
        parsed = {}
        for name, value in raw:
            try:
                parse = PARSERS['%s_%s' % (section, name)]
                parsed[name] = parse(value)
            except KeyError:
                parsed[name] = value
        return list(parsed.items())

    def set(self, section, option, value=None):
        """
        Set the value of a specific section and option in the configuration.

        :param str section: Section to be updated.
        :param str option: Option to be updated.
        :param value: Value to set.

        """

        try:
            formatter = FORMATERS['%s_%s' % (section, option.lower())]
            newvalue = formatter(value)
        except KeyError:
            newvalue = value
        RawConfigParser.set(self, section, option, newvalue)


singleton = _ConfigParser(defaults=DEFAULTS)


def ConfigParser():
    return singleton


def reset():
    """Re-instantiate ConfigParser (only for use in tests)"""
    global singleton
    singleton = _ConfigParser(defaults=DEFAULTS)
