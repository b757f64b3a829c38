import abc
import inspect
import operator
import typing
import warnings
from numbers import Number

import numpy as np

import surfpy
from surfpy.core import Point

__all__ = ['Surface', 'FunctionSurface', 'assurface', 'DegenerateSurfaceWarning']


class DegenerateSurfaceWarning(UserWarning):
    """Raised when a surface is built with parameters that make it blank or unbounded"""
    pass


def assurface(obj) -> 'Surface':
    """ make a surface from a function

    Parameters
    ----------
    obj: {Surface, callable}
        A surface or any function which takes a Point and returns a number

    Returns
    -------
    A surface object

    Examples
    --------
    >>> import surfpy.surface as s
    >>> my_surface = s.assurface(lambda p: p.x * p.y)
    >>> my_surface((2, 3))
    6.0
    """
    if isinstance(obj, Surface):
        return obj
    if callable(obj):
        return FunctionSurface(obj)
    raise ValueError(f"Cannot make a surface from object of type {type(obj)}, expected a callable")


def _warn_degenerate(msg: str):
    if not surfpy.WARN_ON_DEGENERATE:
        return
    # report against the first frame outside this package, classes are built directly or through factories
    stacklevel = 1
    frame = inspect.currentframe()
    while frame is not None and frame.f_globals.get('__name__', '').rpartition('.')[0] == __package__:
        stacklevel += 1
        frame = frame.f_back
    warnings.warn(msg, DegenerateSurfaceWarning, stacklevel=stacklevel)


def _broadcast_full(x_mesh, y_mesh, value):
    return np.full(np.broadcast(x_mesh, y_mesh).shape, value, dtype=surfpy.dtype)


class Surface(abc.ABC):
    """
    An abstract base class for surfaces, to extend the _height and __repr__ methods must be overwritten

    A surface is a pure function from a point on the plane to a real number. Surfaces own their parameters, nothing
    changes them after __init__, so a surface can be evaluated any number of times, from anywhere, with the same
    result.
    """
    __array_ufunc__ = None

    @abc.abstractmethod
    def _height(self, x_mesh, y_mesh):
        pass

    @abc.abstractmethod
    def __repr__(self):
        pass

    def height(self, x_mesh: typing.Union[np.ndarray, Number], y_mesh: typing.Union[np.ndarray, Number]) -> np.ndarray:
        """ Find the height of the surface at specified points

        Parameters
        ----------
        x_mesh: np.ndarray
            An n by m array of x co-ordinates
        y_mesh: np.ndarray
            An n by m array of y co-ordinates

        Returns
        -------
        height: np.ndarray
            An n by m array of surface heights

        Notes
        -----
        The inputs are broadcast against each other, scalars give a 0 dimensional array. Floating point errors are not
        reported: overflow gives inf and invalid operations give nan, as for any other IEEE 754 calculation.

        Examples
        --------
        >>> import numpy as np
        >>> import surfpy.surface as s
        >>> x_mesh, y_mesh = np.meshgrid(np.linspace(-2, 2, 64), np.linspace(-2, 2, 64))
        >>> z = s.checker(0.5).height(x_mesh, y_mesh)
        """
        x_mesh = np.asarray(x_mesh, dtype=surfpy.dtype)
        y_mesh = np.asarray(y_mesh, dtype=surfpy.dtype)
        with np.errstate(all='ignore'):
            return np.asarray(self._height(x_mesh, y_mesh), dtype=surfpy.dtype)

    def __call__(self, point: typing.Union[Point, typing.Sequence[float]]) -> float:
        x, y = point
        return float(self.height(x, y))

    def __add__(self, other):
        from .transforms import add
        from .combinators import evaluate
        if isinstance(other, Number):
            return add(self, other)
        if isinstance(other, Surface):
            return evaluate(operator.add, self, other)
        raise NotImplementedError(f"Addition between surfaces and {type(other)} not implemented")

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        from .transforms import add
        from .combinators import evaluate
        if isinstance(other, Number):
            return add(self, -other)
        if isinstance(other, Surface):
            return evaluate(operator.sub, self, other)
        raise NotImplementedError(f"Subtraction between surfaces and {type(other)} not implemented")

    def __rsub__(self, other):
        return (-self).__add__(other)

    def __mul__(self, other):
        from .transforms import mul
        from .combinators import evaluate
        if isinstance(other, Number):
            return mul(self, other)
        if isinstance(other, Surface):
            return evaluate(operator.mul, self, other)
        raise NotImplementedError(f"Multiplication between surfaces and {type(other)} not implemented")

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Number):
            if other == 0:
                _warn_degenerate("Surface divided by zero, surface will be infinite")
                return self * np.copysign(np.inf, other)
            return self * (1.0 / other)
        raise NotImplementedError(f"Division between surfaces and {type(other)} not implemented")

    def __neg__(self):
        return self * -1


class FunctionSurface(Surface):
    """ A surface defined by any function of a point

    Parameters
    ----------
    func: callable
        A function which takes a Point and returns a number, it should be pure

    Notes
    -----
    Vectorised evaluation calls func once per point, this is much slower than the built in surfaces.
    """

    def __init__(self, func: typing.Callable[[Point], float]):
        self._func = func
        self._vectorised = np.vectorize(lambda x, y: func(Point(x, y)), otypes=[surfpy.dtype])

    def __call__(self, point):
        x, y = point
        return float(self._func(Point(x, y)))

    def _height(self, x_mesh, y_mesh):
        return self._vectorised(x_mesh, y_mesh)

    def __repr__(self):
        return 'FunctionSurface(func=' + repr(self._func) + ')'
