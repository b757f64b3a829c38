import typing

import numpy as np

import surfpy
from surfpy.core import Point, compose
from .Surface_class import Surface, assurface, _broadcast_full

__all__ = ['LiftedSurface', 'evaluate', 'compose']


class LiftedSurface(Surface):
    """ A function of the heights of several surfaces at the same point

    Parameters
    ----------
    host: callable
        A function taking one argument for each surface
    functions: Surface
        Any number of surfaces, or functions of a point

    Notes
    -----
    Calling the surface with a point passes the raw result of each function to host and returns the result of host
    unchanged, so host may return any type. The vectorised height method needs host to return a number: numpy ufuncs
    are called with the full arrays, anything else is applied element wise.

    With no functions the surface ignores the point and returns host().
    """

    def __init__(self, host: typing.Callable, *functions):
        self._host = host
        self._functions = tuple(functions)
        self._surfaces = tuple(assurface(f) for f in self._functions)
        if isinstance(host, np.ufunc):
            self._vectorised = host
        else:
            self._vectorised = np.vectorize(host, otypes=[surfpy.dtype])

    def __call__(self, point):
        x, y = point
        point = Point(x, y)
        return self._host(*(f(point) for f in self._functions))

    def _height(self, x_mesh, y_mesh):
        if not self._surfaces:
            return _broadcast_full(x_mesh, y_mesh, self._host())
        return self._vectorised(*(s.height(x_mesh, y_mesh) for s in self._surfaces))

    def __repr__(self):
        return 'LiftedSurface(' + ', '.join(repr(f) for f in (self._host,) + self._surfaces) + ')'


def evaluate(h: typing.Callable, *f) -> LiftedSurface:
    """ Lift a function of numbers to a function of surfaces

    Parameters
    ----------
    h: callable
        A function which takes as many arguments as surfaces are given
    f: Surface
        Any number of surfaces, each is sampled at the same point and the results passed to h in order

    Returns
    -------
    LiftedSurface
        A surface equivalent to p -> h(f[0](p), f[1](p), ...)

    Examples
    --------
    Blend two patterns by taking the larger height:

    >>> import surfpy.surface as s
    >>> my_surface = s.evaluate(max, s.stripes(1), s.rotate(s.stripes(1), 90))

    Mix two patterns with a weight surface:

    >>> lerp = lambda a, b, w: a + (b - a) * w
    >>> my_surface = s.evaluate(lerp, s.checker(), s.rings(), s.ellipse(3, 3))
    """
    return LiftedSurface(h, *f)
