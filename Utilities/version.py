"""
:mod:`version` -- provide details of software version
=====================================================

.. module:: version
    :synopsis: Provide ways to determine the version of
               the currently executing code.

"""

import os
import subprocess
from .files import flModDate

VERSION = '1.0.0'


def git(command):
    """
    Execute the given command with git

    :param str command: A valid git command.
    :return: Output from the given command.
    :rtype: str

    """
    with open(os.devnull, 'w') as devnull:
        return subprocess.check_output('git ' + command,
                                       shell=True,
                                       stderr=devnull).decode().strip()


def version():
    """
    Version of the vortex code.

    :returns: Release number and the current git commit hash. Outside
              a git checkout, the release number and the modification
              date of this module.

    :rtype: str

    .. note:: The commit hash requires ``git`` to be installed.
    """

    try:
        commit = git('log -1 --date=iso --pretty=format:"%H"')
    except (subprocess.CalledProcessError, OSError):
        commit = ''

    if commit:
        return '{0} ({1})'.format(VERSION, commit)
    return '{0} modified {1}'.format(VERSION, flModDate(__file__))
