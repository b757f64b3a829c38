"""
Value types and generic function helpers used by the surface package
"""

from .point import Point, as_point
from .functional import compose

__all__ = ['Point', 'as_point', 'compose']
