"""
Classes for generating banded surfaces:
    ===========================================================================
    ===========================================================================
    StepSurface:
        A staircase rising by 1 every period in the x direction
    StripeSurface:
        Alternating bands of 0 and 1 across the x direction
    CheckerSurface:
        A checker board made from stripes in the x and y directions
    RingSurface:
        Alternating rings of 0 and 1 around the origin

    A period which is not positive gives a surface which is 0 everywhere
    ===========================================================================
    ===========================================================================

"""
import numpy as np

from .Surface_class import Surface, _broadcast_full, _warn_degenerate

__all__ = ['StepSurface', 'StripeSurface', 'CheckerSurface', 'RingSurface', 'steps', 'stripes', 'checker', 'rings']


def _stripe_parity(x_mesh, period: float):
    """ Parity of the band containing each x co-ordinate

    Parameters
    ----------
    x_mesh: np.ndarray
        Array of x co-ordinates
    period: float
        The width of each band, must be positive

    Returns
    -------
    np.ndarray
        0 or 1 for each co-ordinate

    Notes
    -----
    Positive co-ordinates are in band ceil(x/period), others in band floor(-x/period). The bands either side of the
    origin therefore differ: (0, period] is band 1 while (-period, 0] is band 0.
    """
    band = np.where(x_mesh > 0, np.ceil(x_mesh / period), np.floor(-x_mesh / period))
    return np.fmod(band, 2.0)


class StepSurface(Surface):
    """ A staircase surface, the height is floor(x/period)

    Parameters
    ----------
    period: float, optional (1)
        The width of each step
    """

    def __init__(self, period: float = 1):
        self._period = float(period)
        if self._period <= 0:
            _warn_degenerate(f"Step width should be positive, received {period}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._period <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        return np.floor(x_mesh / self._period) + np.zeros_like(y_mesh)

    def __repr__(self):
        return f'StepSurface(period={self._period!r})'


class StripeSurface(Surface):
    """ Stripes parallel to the y axis

    Parameters
    ----------
    period: float
        The width of each stripe

    Notes
    -----
    The height is 1 on odd bands and 0 on even bands. Band n covers ((n-1)*period, n*period] for positive x and
    (-(n+1)*period, -n*period] otherwise, so points just either side of the origin are on different stripes.

    Examples
    --------
    >>> import surfpy.surface as s
    >>> my_surface = s.StripeSurface(1)
    >>> my_surface((0.5, 0)), my_surface((-0.5, 0))
    (1.0, 0.0)
    """

    def __init__(self, period: float):
        self._period = float(period)
        if self._period <= 0:
            _warn_degenerate(f"Stripe width should be positive, received {period}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._period <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        return _stripe_parity(x_mesh, self._period) + np.zeros_like(y_mesh)

    def __repr__(self):
        return f'StripeSurface(period={self._period!r})'


class CheckerSurface(Surface):
    """ A checker board pattern of 0 and 1

    Parameters
    ----------
    period: float, optional (1)
        The side length of each square

    Notes
    -----
    Made by adding stripes across the x direction to stripes across the y direction, both sampled at the negated
    point, adding 1 and taking the result mod 2.
    """

    def __init__(self, period: float = 1):
        self._period = float(period)
        if self._period <= 0:
            _warn_degenerate(f"Checker square size should be positive, received {period}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._period <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        return np.fmod(_stripe_parity(-x_mesh, self._period) + _stripe_parity(-y_mesh, self._period) + 1, 2.0)

    def __repr__(self):
        return f'CheckerSurface(period={self._period!r})'


class RingSurface(Surface):
    """ Concentric rings around the origin

    Parameters
    ----------
    period: float, optional (1)
        The width of each ring

    Notes
    -----
    The radius of each point is banded in the same way as the x co-ordinate of a stripe surface, the origin itself
    has a height of 1.

    Examples
    --------
    >>> import surfpy.surface as s
    >>> s.rings(2)((0, 0))
    1.0
    """

    def __init__(self, period: float = 1):
        self._period = float(period)
        if self._period <= 0:
            _warn_degenerate(f"Ring width should be positive, received {period}, surface will be flat")

    def _height(self, x_mesh, y_mesh):
        if self._period <= 0:
            return _broadcast_full(x_mesh, y_mesh, 0.0)
        radius = np.sqrt(x_mesh * x_mesh + y_mesh * y_mesh)
        origin = np.logical_and(x_mesh == 0, y_mesh == 0)
        return np.where(origin, 1.0, _stripe_parity(radius, self._period))

    def __repr__(self):
        return f'RingSurface(period={self._period!r})'


def steps(s: float = 1) -> StepSurface:
    return StepSurface(s)


def stripes(s: float) -> StripeSurface:
    return StripeSurface(s)


def checker(s: float = 1) -> CheckerSurface:
    return CheckerSurface(s)


def rings(s: float = 1) -> RingSurface:
    return RingSurface(s)
