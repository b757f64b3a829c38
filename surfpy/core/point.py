"""
The point type used to sample surfaces
"""
from collections import namedtuple
from collections.abc import Sequence

__all__ = ['Point', 'as_point']


class Point(namedtuple('Point', ['x', 'y'])):
    """ An immutable location on the plane

    Parameters
    ----------
    x, y: float
        The co-ordinates of the point, both must be given

    Notes
    -----
    Points are values: two points with the same co-ordinates are equal and hash equally. Printing a point gives the
    co-ordinates separated by a space, this is for debugging only.

    Examples
    --------
    >>> p = Point(1, 2.5)
    >>> print(p)
    1 2.5
    >>> x, y = p
    """
    __slots__ = ()

    def __new__(cls, x, y):
        return super().__new__(cls, float(x), float(y))

    def __str__(self):
        return f'{self.x:g} {self.y:g}'


def as_point(value) -> Point:
    """ Make a point from a length 2 sequence

    Parameters
    ----------
    value: {Point, Sequence}
        A point or a sequence of two numbers

    Returns
    -------
    Point
        The input if it is already a point, otherwise a new point
    """
    if isinstance(value, Point):
        return value
    if not isinstance(value, Sequence) or len(value) != 2:
        raise ValueError(f"Point should be a sequence of length 2, received: {value!r}")
    return Point(*value)
