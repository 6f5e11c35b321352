"""
Title: pathLocate.py
Description: Locate the root directory of the code and the unit test
             directory, so tests can find their data files from
             wherever they are run.
"""
import os


def getRootDirectory():
    return os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def getUnitTestDirectory():
    return os.path.join(getRootDirectory(), 'tests')
