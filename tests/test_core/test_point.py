"""Tests for the Point value type."""

import math

import numpy as np
import pytest

from epicycles.core.point import I, ZERO, Point, finite_or_zero, to_complex_array


def test_complex_multiplication():
    assert Point(1, 2) * Point(3, 4) == Point(-5, 10)
    assert I * I == Point(-1, 0)


def test_scalar_ops():
    p = Point(1.5, -2.0)
    assert p * 2 == Point(3.0, -4.0)
    assert 2 * p == Point(3.0, -4.0)
    assert p / 2 == Point(0.75, -1.0)
    assert -p == Point(-1.5, 2.0)
    assert p + Point(0.5, 2.0) == Point(2.0, 0.0)
    assert p - p == ZERO


def test_conjugate_and_magnitude():
    p = Point(3, 4)
    assert p.conjugate() == Point(3, -4)
    assert p.squared_magnitude() == 25
    assert p.magnitude() == 5
    assert abs(p) == 5


def test_ei_is_unit():
    p = Point.ei(math.pi / 3)
    assert p.magnitude() == pytest.approx(1.0)
    assert p.x == pytest.approx(0.5)


def test_division_by_zero_is_degenerate_not_error():
    assert (Point(1, 0) / 0.0).is_degenerate()
    assert (Point(0, 0) / 0.0).is_degenerate()
    assert (Point(-1, 2) / 0.0) == Point(-math.inf, math.inf)
    assert (Point(-1, 2) / -0.0) == Point(math.inf, -math.inf)
    assert (Point(3, 0) / 0).x == math.inf
    assert math.isnan((Point(3, 0) / 0).y)


def test_degenerate_checks_nan_and_infinity():
    assert Point(math.nan, 0).is_degenerate()
    assert Point(0, math.inf).is_degenerate()
    assert Point(-math.inf, 1).is_degenerate()
    assert not Point(1e308, -1e308).is_degenerate()


def test_or_zero():
    assert Point(math.nan, 1).or_zero() == ZERO
    assert Point(1, math.inf).or_zero() == ZERO
    assert Point(1, 2).or_zero() == Point(1, 2)


def test_finite_or_zero_vectorized():
    values = np.array([1 + 2j, complex(math.nan, 0), complex(0, math.inf), -3j])
    out = finite_or_zero(values)
    np.testing.assert_array_equal(out, [1 + 2j, 0, 0, -3j])


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_complex_round_trip():
    assert complex(Point(1, -2)) == 1 - 2j
    assert Point.from_complex(3 + 4j) == Point(3, 4)


def test_to_complex_array_accepts_all_path_forms():
    expected = np.array([0 + 0j, 1 + 0j, 1 + 1j])
    np.testing.assert_array_equal(to_complex_array([Point(0, 0), Point(1, 0), Point(1, 1)]), expected)
    np.testing.assert_array_equal(to_complex_array([0j, 1 + 0j, 1 + 1j]), expected)
    np.testing.assert_array_equal(to_complex_array([(0, 0), (1, 0), (1, 1)]), expected)
    np.testing.assert_array_equal(to_complex_array(np.array([[0, 0], [1, 0], [1, 1]])), expected)


def test_to_complex_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        to_complex_array(np.zeros((4, 3)))
