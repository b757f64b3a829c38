import warnings

import pytest

import surfpy
import surfpy.surface as s
from surfpy.core import Point


def test_silent_by_default():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        s.stripes(-1)
        s.ellipse(0, 1)
        s.scale(s.plain(), Point(0, 1))


def test_warn_on_degenerate():
    with surfpy.WarnOnDegenerate():
        with pytest.warns(s.DegenerateSurfaceWarning):
            s.steps(0)
        with pytest.warns(s.DegenerateSurfaceWarning):
            s.checker(-1)
        with pytest.warns(s.DegenerateSurfaceWarning):
            s.rings(0)
        with pytest.warns(s.DegenerateSurfaceWarning):
            s.rectangle(1, -1)
        with pytest.warns(s.DegenerateSurfaceWarning):
            s.scale(s.plain(), Point(1, 0))
    assert surfpy.WARN_ON_DEGENERATE is False


def test_valid_parameters_never_warn():
    with surfpy.WarnOnDegenerate():
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            my_surface = s.rotate(s.scale(s.checker(0.5), Point(2, 1)), 30)
            my_surface(Point(1, 1))


def test_warning_points_at_caller():
    with surfpy.WarnOnDegenerate():
        with pytest.warns(s.DegenerateSurfaceWarning) as record:
            s.stripes(-1)
        assert record[0].filename == __file__
        with pytest.warns(s.DegenerateSurfaceWarning) as record:
            s.StripeSurface(-1)
        assert record[0].filename == __file__
        with pytest.warns(s.DegenerateSurfaceWarning) as record:
            s.scale(s.plain(), (0, 0))
        assert record[0].filename == __file__
        with pytest.warns(s.DegenerateSurfaceWarning) as record:
            s.slope() / 0
        assert record[0].filename == __file__
