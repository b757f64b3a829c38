"""
========================================================
Procedural surfaces on the plane (:mod:`surfpy.surface`)
========================================================

.. currentmodule:: surfpy.surface

This package contains functions and classes for building surfaces: pure functions from a point on the plane to a
real number, for use as textures and patterns. Surfaces are built by nesting calls to generators, transforms and
combinators, nothing is evaluated until the resulting surface is called with a point:

>>> import surfpy.surface as s
>>> from surfpy.core import Point
>>> my_surface = s.rotate(s.scale(s.checker(), Point(2, 1)), 30)
>>> height = my_surface(Point(0.3, 1.2))

Or evaluated on a grid of points with the height method:

>>> import numpy as np
>>> x_mesh, y_mesh = np.meshgrid(np.linspace(-5, 5, 256), np.linspace(-5, 5, 256))
>>> profile = my_surface.height(x_mesh, y_mesh)

The Surface class
=================

.. autosummary::
   :toctree: generated/

   Surface          -- Abstract base class of all surfaces
   FunctionSurface  -- A surface from any function of a point
   assurface        -- Make a surface object

Generators
==========

Surfaces made from scratch, banded surfaces are 0 everywhere if their period is not positive, indicator surfaces are 0
everywhere if either size is not positive.

.. autosummary::
   :toctree: generated/

   plain      -- 0 everywhere
   slope      -- the x co-ordinate
   steps      -- floor(x/s)
   sqr        -- the x co-ordinate squared
   sin_wave   -- sin(x)
   cos_wave   -- cos(x)
   stripes    -- alternating stripes of 0 and 1
   checker    -- a checker board of 0 and 1
   rings      -- concentric rings of 0 and 1
   ellipse    -- 1 inside an ellipse
   rectangle  -- 1 inside a rectangle

Transforms
==========

Surfaces made by changing another surface, the original is not modified.

.. autosummary::
   :toctree: generated/

   rotate     -- Rotate about the origin
   translate  -- Move by a fixed offset
   scale      -- Scale about the origin, 0 factors give inf everywhere
   invert     -- Swap the x and y axes
   flip       -- Mirror in the y axis
   mul        -- Multiply the height
   add        -- Add to the height

Combinators
===========

.. autosummary::
   :toctree: generated/

   evaluate   -- Apply a function to the heights of several surfaces
   compose    -- Chain functions left to right
"""

from .Surface_class import Surface, FunctionSurface, assurface, DegenerateSurfaceWarning
from .Geometric import (PlainSurface, SlopeSurface, SquareSurface, SineSurface, CosineSurface, EllipseSurface,
                        RectangleSurface, plain, slope, sqr, sin_wave, cos_wave, ellipse, rectangle)
from .Periodic import StepSurface, StripeSurface, CheckerSurface, RingSurface, steps, stripes, checker, rings
from .transforms import (RotatedSurface, TranslatedSurface, ScaledSurface, InvertedSurface, FlippedSurface,
                         MultipliedSurface, OffsetSurface, rotate, translate, scale, invert, flip, mul, add)
from .combinators import LiftedSurface, evaluate, compose

__all__ = ['Surface', 'FunctionSurface', 'assurface', 'DegenerateSurfaceWarning',
           'PlainSurface', 'SlopeSurface', 'SquareSurface', 'SineSurface', 'CosineSurface', 'EllipseSurface',
           'RectangleSurface', 'plain', 'slope', 'sqr', 'sin_wave', 'cos_wave', 'ellipse', 'rectangle',
           'StepSurface', 'StripeSurface', 'CheckerSurface', 'RingSurface', 'steps', 'stripes', 'checker', 'rings',
           'RotatedSurface', 'TranslatedSurface', 'ScaledSurface', 'InvertedSurface', 'FlippedSurface',
           'MultipliedSurface', 'OffsetSurface', 'rotate', 'translate', 'scale', 'invert', 'flip', 'mul', 'add',
           'LiftedSurface', 'evaluate', 'compose']
