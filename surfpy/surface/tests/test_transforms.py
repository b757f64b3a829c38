"""
Tests for the surface transforms
"""
import numpy as np
import numpy.testing as npt
import pytest

import surfpy.surface as s
from surfpy.core import Point

points = [Point(0, 0), Point(0.5, -0.25), Point(-3.2, 7.1), Point(10, 10), Point(-1e-9, 4), Point(123.4, -56.7)]


def asymmetric():
    # different in every direction so swapped or mirrored axes show up
    return s.assurface(lambda p: 3 * p.x + 7 * p.y * p.y + p.x * p.y)


def test_rotate():
    my_surface = s.rotate(s.slope(), 90)
    npt.assert_allclose(my_surface(Point(0, 1)), 1, atol=1e-12)
    npt.assert_allclose(my_surface(Point(1, 0)), 0, atol=1e-12)
    npt.assert_allclose(s.rotate(s.slope(), 180)(Point(2, 0)), -2, atol=1e-12)
    npt.assert_allclose(s.rotate(s.slope(), 45)(Point(1, 1)), 2 ** 0.5, atol=1e-12)


def test_rotate_round_trip():
    base = asymmetric()
    for deg in [0, 15, 90, -37.5, 400]:
        round_trip = s.rotate(s.rotate(base, deg), -deg)
        for p in points:
            npt.assert_allclose(round_trip(p), base(p), rtol=1e-9, atol=1e-9)


def test_translate():
    my_surface = s.translate(s.ellipse(1, 1), Point(5, -2))
    assert my_surface(Point(5, -2)) == 1
    assert my_surface(Point(6, -2)) == 1
    assert my_surface(Point(0, 0)) == 0
    # plain tuples are accepted
    assert s.translate(s.slope(), (1, 0))(Point(3, 0)) == 2


def test_translate_zero():
    base = asymmetric()
    my_surface = s.translate(base, Point(0, 0))
    for p in points:
        assert my_surface(p) == base(p)


def test_scale():
    my_surface = s.scale(s.slope(), Point(2, 1))
    assert my_surface(Point(4, 0)) == 2
    my_surface = s.scale(s.rectangle(1, 1), Point(3, 0.5))
    assert my_surface(Point(3, 0.5)) == 1
    assert my_surface(Point(3, 0.6)) == 0


def test_scale_singular():
    for factors in [Point(0, 1), Point(1, 0), Point(0, 0)]:
        for base in [s.plain(), s.checker(), asymmetric()]:
            my_surface = s.scale(base, factors)
            for p in points:
                assert my_surface(p) == np.inf
    heights = s.scale(s.plain(), Point(0, 1)).height(np.zeros((3, 4)), np.zeros((3, 4)))
    assert heights.shape == (3, 4)
    assert np.all(np.isposinf(heights))


def test_invert():
    base = asymmetric()
    my_surface = s.invert(base)
    for p in points:
        assert my_surface(p) == base(Point(p.y, p.x))
        assert s.invert(my_surface)(p) == base(p)


def test_flip():
    base = asymmetric()
    my_surface = s.flip(base)
    for p in points:
        assert my_surface(p) == base(Point(-p.x, p.y))
        assert s.flip(my_surface)(p) == base(p)


def test_mul_add():
    base = asymmetric()
    for p in points:
        assert s.mul(base, 2.5)(p) == base(p) * 2.5
        assert s.add(base, -1.5)(p) == base(p) - 1.5
    assert s.add(s.scale(s.plain(), Point(0, 1)), -1)(Point(1, 1)) == np.inf


def test_transforms_leave_original_unchanged():
    base = s.stripes(1)
    before = [base(p) for p in points]
    s.rotate(base, 30)
    s.translate(base, Point(0.5, 0))
    s.scale(base, Point(2, 2))
    s.flip(base)
    s.mul(base, 10)
    assert [base(p) for p in points] == before


def test_nested_transforms_vectorised():
    my_surface = s.add(s.mul(s.flip(s.invert(s.scale(s.translate(s.rotate(s.checker(0.5), 20), Point(0.3, -0.1)),
                                                             Point(1.5, 0.75)))), 2), 1)
    x_mesh, y_mesh = np.meshgrid(np.linspace(-2, 2, 11), np.linspace(-1, 3, 13))
    heights = my_surface.height(x_mesh, y_mesh)
    expected = [[my_surface(Point(x, y)) for x, y in zip(x_row, y_row)] for x_row, y_row in zip(x_mesh, y_mesh)]
    npt.assert_allclose(heights, expected)
    assert set(np.unique(heights)) <= {1.0, 3.0}


def test_bad_points():
    with pytest.raises(ValueError):
        s.translate(s.plain(), (1, 2, 3))
    with pytest.raises(ValueError):
        s.scale(s.plain(), 2)
    with pytest.raises(ValueError):
        s.rotate(5, 30)
