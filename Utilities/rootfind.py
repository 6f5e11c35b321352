"""
:mod:`rootfind` -- brute-force bracketing root finder
=====================================================

.. module:: rootfind
    :synopsis: March along an interval to bracket the root of a scalar
               function, then zoom in on the bracket.

The target function does not need to be smooth or monotonic. The march
stops at the first sign change, or as soon as the magnitude of the
function starts to grow again (a local minimum of ``|f|``), so it also
returns the closest approach when ``f`` never crosses zero.

Example::

    >>> from Utilities.rootfind import zoomRoot
    >>> root = zoomRoot(lambda x: x * x - 2., 0., 10., 1.)

"""

import logging

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

ROOT_ERROR = -99999.
MAX_ITERATIONS = 1000000


def findRoot(func, x1, x2, dx, itmax=MAX_ITERATIONS):
    """
    Use brute-force marching to find a root in the interval [x1, x2].

    :param func: Function f(x) for which a root is sought.
    :type  func: callable
    :param float x1: Left side of the interval (start of the march).
    :param float x2: Nominal right side of the interval. The march is
                     not stopped here.
    :param float dx: Increment for the march.
    :param int itmax: Maximum number of steps.

    :returns: The root (or :data:`ROOT_ERROR` if the march did not
              terminate within `itmax` steps) and the left and right
              sides of the final bracket.
    :rtype: tuple

    """
    a = x1
    fa = func(a)
    b = a
    for i in range(1, itmax + 1):
        b = x1 + i * dx
        fb = func(b)
        if (fa * fb < 0.) or (abs(fb) > abs(fa)):
            if b > x2:
                log.debug("Root search marched beyond %g to %g", x2, b)
            if abs(fb) > abs(fa):
                return a, a, b
            return b, a, b
        a, fa = b, fb

    log.warning("findRoot: exceeded %d iterations from x=%g, step %g",
                itmax, x1, dx)
    return ROOT_ERROR, a, b


def zoomRoot(func, x1, x2, dx, passes=3, zoom=0.01, itmax=MAX_ITERATIONS):
    """
    Coarse-to-fine root search. Run :func:`findRoot` `passes` times,
    each time restarting on the bracket found by the previous pass
    with the step size multiplied by `zoom`.

    :param func: Function f(x) for which a root is sought.
    :param float x1: Left side of the initial interval.
    :param float x2: Right side of the initial interval.
    :param float dx: Initial increment for the march.
    :param int passes: Number of marches.
    :param float zoom: Step size reduction applied after each pass.
    :param int itmax: Maximum number of steps in each pass.

    :returns: The root, or :data:`ROOT_ERROR` if any pass failed.
    :rtype: float

    """
    root = ROOT_ERROR
    for n in range(passes):
        root, x1, x2 = findRoot(func, x1, x2, dx, itmax)
        log.debug("Pass %d: [%g, %g], step %g, root %g",
                  n + 1, x1, x2, dx, root)
        if root == ROOT_ERROR:
            break
        dx = dx * zoom
    return root
