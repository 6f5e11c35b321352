import os
import sys
import logging

import time
import datetime
import numpy as np

LOGGER = logging.getLogger()


def flLoadFile(filename, comments='%', delimiter=',', skiprows=0):
    """
    Load a delimited text file -- uses :func:`numpy.genfromtxt`

    :param filename: File, filename, or generator to read
    :type  filename: file or str
    :param comments: (default '%') indicator
    :type  comments: str, optional
    :param delimiter: The string used to separate values.
    :type  delimiter: str, int or sequence, optional

    """
    return np.genfromtxt(filename, comments=comments,
                         delimiter=delimiter,
                         skip_header=skiprows)


def flSaveFile(filename, data, header='', delimiter=',', fmt='%.18e'):
    """
    Save data to a file.

    Does some basic checks to ensure the path exists before attempting
    to write the file. Uses :class:`numpy.savetxt` to save the data.

    :param str filename: Path to the destination file.
    :param data: Array data to be written to file.
    :param str header: Column headers (optional).
    :param str delimiter: Field delimiter (default ',').
    :param str fmt: Format statement for writing the data.

    """

    directory, fname = os.path.split(filename)
    if directory and not os.path.isdir(directory):
        os.makedirs(directory)

    np.savetxt(filename, data, header=header, delimiter=delimiter, fmt=fmt,
               comments='%')


def flLogFileName(logFile, datestamp=False):
    """
    Name of the log file, with the current date and time inserted
    before the extension if `datestamp` is ``True``
    (e.g. ``vortex.202610191530.log``).

    :param str logFile: Path to the log file.
    :param boolean datestamp: Insert a timestamp in the file name.

    """
    if not datestamp:
        return logFile
    base, ext = os.path.splitext(logFile)
    curdatestr = datetime.datetime.now().strftime('%Y%m%d%H%M')
    return "%s.%s%s" % (base, curdatestr, ext)


def flStartLog(logFile, logLevel, verbose=False, datestamp=False):
    """
    Start a new log file recording all messages of logLevel and higher.
    Setting ``verbose=True`` echoes the messages to STDOUT as well. The
    directory of the log file must exist.

    :param str logFile: Full path to log file.
    :param str logLevel: Name of one of the standard Python logging
                         levels ('DEBUG', 'INFO', 'WARNING', 'ERROR',
                         'CRITICAL')
    :param boolean verbose: ``True`` will echo all logging calls to STDOUT
    :param boolean datestamp: ``True`` will include a timestamp of the
                              creation time in the filename.

    :returns: :class:`logging.logger` object.

    Example: flStartLog('/home/user/log/vortex.log', 'INFO', verbose=True)
    """
    logFile = flLogFileName(logFile, datestamp)
    level = getattr(logging, logLevel)
    logging.basicConfig(level=level,
                        format='%(asctime)s: %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S',
                        filename=logFile,
                        filemode='w')
    LOGGER = logging.getLogger()

    # Only one console handler, however often this is called
    if verbose and len(LOGGER.handlers) < 2:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(logging.Formatter('%(asctime)s: %(message)s',
                                               '%H:%M:%S'))
        LOGGER.addHandler(console)

    LOGGER.info('Started log file %s (detail level %s)', logFile, logLevel)
    LOGGER.info('Running %s (pid %d)', sys.argv[0], os.getpid())
    return LOGGER


def flLogFatalError(tblines):
    """
    Log the error messages normally reported in a traceback so that
    all error messages can be caught, then exit. The input 'tblines'
    is created by calling ``traceback.format_exc().splitlines()``.

    :param list tblines: List of lines from the traceback.

    """
    for line in tblines:
        LOGGER.critical(line.lstrip())
    sys.exit(1)


def flModDate(filename, dateformat='%Y-%m-%d %H:%M:%S'):
    """
    Return the last modified date of the input file

    :param str filename: file name (full path).
    :param str dateformat: Format string for the date (default
                           '%Y-%m-%d %H:%M:%S')
    :returns: File modification date/time as a string
    :rtype: str

    Example: modDate = flModDate( '/foo/bar.csv' , dateformat='%Y-%m-%dT%H:%M:%S' )
    """
    try:
        si = os.stat(filename)
    except OSError:
        LOGGER.exception('Input file is not a valid file: %s' % (filename))
        raise IOError('Input file is not a valid file: %s' % (filename))
    moddate = time.localtime(si.st_mtime)

    return time.strftime(dateformat, moddate)
