"""
Classes for generating simple geometric surfaces:
    ===========================================================================
    ===========================================================================
    Each class inherits functionality from the Surface class but changes the
    __init__, _height and __repr__ functions

    Functions with the same name in lower case build the surfaces with
    default parameters where they make sense
    ===========================================================================
    ===========================================================================

    PlainSurface:
        Zero everywhere
    SlopeSurface:
        Height equal to the x co-ordinate
    SquareSurface:
        Height equal to the square of the x co-ordinate
    SineSurface, CosineSurface:
        Waves along the x axis with period 2 pi
    EllipseSurface:
        1 inside an axis aligned ellipse centred on the origin, 0 outside
    RectangleSurface:
        1 inside an axis aligned rectangle centred on the origin, 0 outside

    ===========================================================================
    ===========================================================================

"""
import numpy as np

from .Surface_class import Surface, _broadcast_full, _warn_degenerate

__all__ = ['PlainSurface', 'SlopeSurface', 'SquareSurface', 'SineSurface', 'CosineSurface', 'EllipseSurface',
           'RectangleSurface', 'plain', 'slope', 'sqr', 'sin_wave', 'cos_wave', 'ellipse', 'rectangle']


class PlainSurface(Surface):
    """ A flat surface at zero height

    Examples
    --------
    >>> import surfpy.surface as s
    >>> s.plain()((3, 4))
    0.0
    """

    def _height(self, x_mesh, y_mesh):
        return _broadcast_full(x_mesh, y_mesh, 0.0)

    def __repr__(self):
        return 'PlainSurface()'


class SlopeSurface(Surface):
    """ A surface with a unit slope in the x direction, the height is the x co-ordinate
    """

    def _height(self, x_mesh, y_mesh):
        return x_mesh + np.zeros_like(y_mesh)

    def __repr__(self):
        return 'SlopeSurface()'


class SquareSurface(Surface):
    """ A parabolic trough along the y axis, the height is the square of the x co-ordinate
    """

    def _height(self, x_mesh, y_mesh):
        return x_mesh * x_mesh + np.zeros_like(y_mesh)

    def __repr__(self):
        return 'SquareSurface()'


class SineSurface(Surface):
    def _height(self, x_mesh, y_mesh):
        return np.sin(x_mesh) + np.zeros_like(y_mesh)

    def __repr__(self):
        return 'SineSurface()'


class CosineSurface(Surface):
    def _height(self, x_mesh, y_mesh):
        return np.cos(x_mesh) + np.zeros_like(y_mesh)

    def __repr__(self):
        return 'CosineSurface()'


class EllipseSurface(Surface):
    """ Indicator surface of an ellipse centred on the origin

    Parameters
    ----------
    a: float, optional (1)
        The semi axis in the x direction
    b: float, optional (1)
        The semi axis in the y direction

    Notes
    -----
    The height is 1 for points inside the ellipse or on its boundary and 0 outside. If either semi axis is not
    positive the surface is 0 everywhere.

    Examples
    --------
    >>> import surfpy.surface as s
    >>> my_surface = s.EllipseSurface(2, 1)
    >>> my_surface((2, 0))
    1.0
    """

    def __init__(self, a: float = 1, b: float = 1):
        self._a = float(a)
        self._b = float(b)
        if self._a <= 0 or self._b <= 0:
            _warn_degenerate(f"Ellipse semi axes should be positive, received a={a}, b={b}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._a <= 0 or self._b <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        inside = (x_mesh * x_mesh) / (self._a * self._a) + (y_mesh * y_mesh) / (self._b * self._b) <= 1.0
        return np.where(inside, 1.0, 0.0)

    def __repr__(self):
        return f'EllipseSurface(a={self._a!r}, b={self._b!r})'


class RectangleSurface(Surface):
    """ Indicator surface of a rectangle centred on the origin

    Parameters
    ----------
    a: float, optional (1)
        Half the width of the rectangle in the x direction
    b: float, optional (1)
        Half the height of the rectangle in the y direction

    Notes
    -----
    The height is 1 for points inside the rectangle or on its edges and 0 outside. If either half width is not
    positive the surface is 0 everywhere.
    """

    def __init__(self, a: float = 1, b: float = 1):
        self._a = float(a)
        self._b = float(b)
        if self._a <= 0 or self._b <= 0:
            _warn_degenerate(f"Rectangle half widths should be positive, received a={a}, b={b}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._a <= 0 or self._b <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        inside = np.logical_and(np.abs(x_mesh) <= self._a, np.abs(y_mesh) <= self._b)
        return np.where(inside, 1.0, 0.0)

    def __repr__(self):
        return f'RectangleSurface(a={self._a!r}, b={self._b!r})'


def plain() -> PlainSurface:
    return PlainSurface()


def slope() -> SlopeSurface:
    return SlopeSurface()


def sqr() -> SquareSurface:
    return SquareSurface()


def sin_wave() -> SineSurface:
    return SineSurface()


def cos_wave() -> CosineSurface:
    return CosineSurface()


def ellipse(a: float = 1, b: float = 1) -> EllipseSurface:
    return EllipseSurface(a, b)


def rectangle(a: float = 1, b: float = 1) -> RectangleSurface:
    return RectangleSurface(a, b)
