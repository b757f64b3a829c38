"""
Surfaces made by transforming other surfaces

The geometric transforms move the point a surface is sampled at by the inverse of the transform, eg: rotating a
surface by 30 degrees samples the original surface at points rotated by -30 degrees. As the wrapped surface is never
changed transforms can be nested in any order.

mul and add change the height of the surface instead of the point.
"""
import typing
from numbers import Number

import numpy as np

from surfpy.core import Point, as_point
from .Surface_class import Surface, assurface, _broadcast_full, _warn_degenerate

__all__ = ['RotatedSurface', 'TranslatedSurface', 'ScaledSurface', 'InvertedSurface', 'FlippedSurface',
           'MultipliedSurface', 'OffsetSurface', 'rotate', 'translate', 'scale', 'invert', 'flip', 'mul', 'add']

_PointLike = typing.Union[Point, typing.Sequence[float]]


class _TransformedSurface(Surface):
    """Base for surfaces which wrap exactly one other surface"""

    def __init__(self, surface):
        self._surface = assurface(surface)


class RotatedSurface(_TransformedSurface):
    """ A surface rotated about the origin

    Parameters
    ----------
    surface: Surface
        The surface to rotate
    degrees: float
        The anticlockwise rotation in degrees

    Examples
    --------
    >>> import surfpy.surface as s
    >>> diagonal_stripes = s.RotatedSurface(s.stripes(1), 45)
    """

    def __init__(self, surface, degrees: float):
        super().__init__(surface)
        self._degrees = float(degrees)
        radians = (self._degrees / 180.0) * np.pi
        self._cos = np.cos(radians)
        self._sin = np.sin(radians)

    def _height(self, x_mesh, y_mesh):
        x = x_mesh * self._cos + y_mesh * self._sin
        y = y_mesh * self._cos - x_mesh * self._sin
        return self._surface.height(x, y)

    def __repr__(self):
        return f'RotatedSurface(surface={self._surface!r}, degrees={self._degrees!r})'


class TranslatedSurface(_TransformedSurface):
    """ A surface moved by a fixed offset

    Parameters
    ----------
    surface: Surface
        The surface to move
    offset: Point
        The distance to move the surface in the x and y directions
    """

    def __init__(self, surface, offset: _PointLike):
        super().__init__(surface)
        self._offset = as_point(offset)

    def _height(self, x_mesh, y_mesh):
        return self._surface.height(x_mesh - self._offset.x, y_mesh - self._offset.y)

    def __repr__(self):
        return f'TranslatedSurface(surface={self._surface!r}, offset={self._offset!r})'


class ScaledSurface(_TransformedSurface):
    """ A surface stretched away from the origin

    Parameters
    ----------
    surface: Surface
        The surface to scale
    factors: Point
        The scale factor in the x and y directions

    Notes
    -----
    If either factor is 0 the transform is undefined and the height is inf everywhere, the wrapped surface is never
    evaluated. Negative factors mirror the surface.
    """

    def __init__(self, surface, factors: _PointLike):
        super().__init__(surface)
        self._factors = as_point(factors)
        if self._factors.x == 0 or self._factors.y == 0:
            _warn_degenerate(f"Scale factors should be non zero, received {self._factors}, surface will be infinite")

    def _height(self, x_mesh, y_mesh):
        if self._factors.x == 0 or self._factors.y == 0:
            return _broadcast_full(x_mesh, y_mesh, np.inf)
        return self._surface.height(x_mesh / self._factors.x, y_mesh / self._factors.y)

    def __repr__(self):
        return f'ScaledSurface(surface={self._surface!r}, factors={self._factors!r})'


class InvertedSurface(_TransformedSurface):
    """A surface reflected in the line y = x, the x and y co-ordinates are swapped"""

    def _height(self, x_mesh, y_mesh):
        return self._surface.height(y_mesh, x_mesh)

    def __repr__(self):
        return f'InvertedSurface(surface={self._surface!r})'


class FlippedSurface(_TransformedSurface):
    """A surface reflected in the y axis"""

    def _height(self, x_mesh, y_mesh):
        return self._surface.height(-x_mesh, y_mesh)

    def __repr__(self):
        return f'FlippedSurface(surface={self._surface!r})'


class MultipliedSurface(_TransformedSurface):
    """ A surface with every height multiplied by a constant

    Parameters
    ----------
    surface: Surface
        The surface to multiply
    factor: float
        The multiplier
    """

    def __init__(self, surface, factor: Number):
        super().__init__(surface)
        self._factor = float(factor)

    def _height(self, x_mesh, y_mesh):
        return self._surface.height(x_mesh, y_mesh) * self._factor

    def __repr__(self):
        return f'MultipliedSurface(surface={self._surface!r}, factor={self._factor!r})'


class OffsetSurface(_TransformedSurface):
    """ A surface with a constant added to every height

    Parameters
    ----------
    surface: Surface
        The surface to offset
    offset: float
        The value added to the height
    """

    def __init__(self, surface, offset: Number):
        super().__init__(surface)
        self._offset = float(offset)

    def _height(self, x_mesh, y_mesh):
        return self._surface.height(x_mesh, y_mesh) + self._offset

    def __repr__(self):
        return f'OffsetSurface(surface={self._surface!r}, offset={self._offset!r})'


def rotate(f, deg: float) -> RotatedSurface:
    """ Rotate a surface anticlockwise about the origin

    Parameters
    ----------
    f: Surface
        The surface to rotate, any function of a point is also accepted
    deg: float
        The rotation in degrees

    Returns
    -------
    RotatedSurface
        The new surface, f is not changed

    Examples
    --------
    >>> import surfpy.surface as s
    >>> my_surface = s.rotate(s.slope(), 90)
    >>> round(my_surface((0, 1)), 12)
    1.0
    """
    return RotatedSurface(f, deg)


def translate(f, v: _PointLike) -> TranslatedSurface:
    """Move a surface by v"""
    return TranslatedSurface(f, v)


def scale(f, s: _PointLike) -> ScaledSurface:
    """ Scale a surface about the origin

    Parameters
    ----------
    f: Surface
        The surface to scale
    s: Point
        Scale factors in the x and y directions, if either is 0 the result is inf everywhere

    Returns
    -------
    ScaledSurface
    """
    return ScaledSurface(f, s)


def invert(f) -> InvertedSurface:
    """Swap the x and y axes of a surface"""
    return InvertedSurface(f)


def flip(f) -> FlippedSurface:
    """Mirror a surface in the y axis"""
    return FlippedSurface(f)


def mul(f, c: Number) -> MultipliedSurface:
    return MultipliedSurface(f, c)


def add(f, c: Number) -> OffsetSurface:
    return OffsetSurface(f, c)
