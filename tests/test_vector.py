import math

import pytest

from forcegraph.vector import Vec3, unit_vector


def test_zero_is_origin():
    assert Vec3.ZERO == Vec3(0, 0, 0)
    assert Vec3.ZERO.length() == 0


def test_add_then_subtract_round_trips():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-7.0, 0.5, 11.0)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vec3(4.0, -6.0, 2.0)
    assert a + (-a) == Vec3.ZERO


def test_scalar_multiplication_commutes():
    a = Vec3(1.0, 2.0, 3.0)
    assert a * 2 == 2 * a
    assert (a * 2) / 2 == a


def test_sum_of_vectors():
    vectors = [Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(-5, -7, -9)]
    assert sum(vectors) == Vec3.ZERO
    assert sum(vectors, Vec3.ZERO) == Vec3.ZERO


def test_distance_matches_squared_distance():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 9.0)
    assert a.distance(b) == pytest.approx(math.sqrt(a.distance_squared(b)))
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_distance_of_right_triangle():
    assert Vec3(0, 0, 0).distance(Vec3(3, 4, 0)) == pytest.approx(5.0)


def test_unit_vector_has_length_one_and_points_to_target():
    a = Vec3(1.0, -3.0, 2.0)
    b = Vec3(7.0, 4.0, -5.0)
    u = unit_vector(a, b)
    assert u.length() == pytest.approx(1.0)
    moved = a + u * a.distance(b)
    assert moved.x == pytest.approx(b.x)
    assert moved.y == pytest.approx(b.y)
    assert moved.z == pytest.approx(b.z)


def test_unit_vector_of_coincident_points_is_nan():
    a = Vec3(2.0, 2.0, 2.0)
    u = unit_vector(a, a)
    assert [math.isnan(u.x), math.isnan(u.y), math.isnan(u.z)] == [True, True, True]


def test_division_by_zero_gives_infinity():
    v = Vec3(1.0, -1.0, 0.0) / 0.0
    assert v.x == math.inf
    assert v.y == -math.inf
    assert math.isnan(v.z)


def test_iteration_unpacks_components():
    x, y, z = Vec3(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_vectors_are_immutable():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vec3(1.0, 2.0, 3.0)
    assert v.x == 1.0