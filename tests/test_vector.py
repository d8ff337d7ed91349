import math

import pytest

from mobakit.vector import Vector2, Vector3


def test_direction_constants():
    assert (Vector2.up().x, Vector2.up().y) == (0.0, -1.0)
    assert (Vector2.down().x, Vector2.down().y) == (0.0, 1.0)
    assert (Vector2.left().x, Vector2.left().y) == (-1.0, 0.0)
    assert (Vector2.right().x, Vector2.right().y) == (1.0, 0.0)
    assert (Vector2.zero().x, Vector2.zero().y) == (0.0, 0.0)
    assert (Vector2.identity().x, Vector2.identity().y) == (1.0, 1.0)


def test_default_is_zero():
    assert Vector2() == Vector2.zero()


def test_arithmetic_round_trips():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.25, 4.0)
    assert (a + b) - b == a
    assert -a + a == Vector2.zero()
    assert +a == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 3) / 3 == a


def test_up_and_down_cancel():
    assert Vector2.up() + Vector2.down() == Vector2.zero()
    assert -Vector2.left() == Vector2.right()


def test_equality_tolerance():
    assert Vector2(1.0, 1.0) == Vector2(1.0 + 1e-4, 1.0)
    assert Vector2(1.0, 1.0) != Vector2(1.01, 1.0)


def test_equality_with_other_types():
    assert (Vector2(1.0, 2.0) == (1.0, 2.0)) is False


def test_subscript_read_and_write():
    v = Vector2(4.0, 5.0)
    assert v[0] == 4.0
    assert v[1] == 5.0
    v[0] = 7.0
    v[1] = -1.0
    assert (v.x, v.y) == (7.0, -1.0)


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_subscript_read_out_of_range(index):
    v = Vector2(1.0, 2.0)
    with pytest.raises(IndexError, match="range"):
        v.__getitem__(index)
    assert (v[0], v[1]) == (1.0, 2.0)


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_subscript_write_out_of_range(index):
    v = Vector2(1.0, 2.0)
    with pytest.raises(IndexError, match="range"):
        v.__setitem__(index, 3.0)
    assert (v[0], v[1]) == (1.0, 2.0)


def test_rotate_up_quarter_turn_is_right():
    assert Vector2.up().rotate(90) == Vector2.right()
    assert Vector2.right().rotate(90) == Vector2.down()


@pytest.mark.parametrize("degrees", [0, 33.3, 90, 181, -45])
def test_rotate_preserves_magnitude(degrees):
    v = Vector2(2.0, -3.0)
    assert math.isclose(v.rotate(degrees).magnitude(), v.magnitude(), rel_tol=1e-9)


def test_rotate_full_turn_is_identity():
    v = Vector2(2.0, -3.0)
    assert v.rotate(360) == v


def test_rotate_by_vector_uses_its_angle():
    v = Vector2(0.5, 2.0)
    direction = Vector2(1.0, 1.0)
    assert v.rotate(direction) == v.rotate(direction.angle_degree())
    assert v.rotate(Vector2.up()) == v


def test_angles_of_directions():
    assert Vector2.up().angle_degree() == 0.0
    assert math.isclose(Vector2.right().angle_degree(), 90.0)
    assert math.isclose(Vector2.right().angle_radian(), math.pi / 2)


def test_angle_degree_matches_radian():
    v = Vector2(-1.0, 2.5)
    assert math.isclose(v.angle_degree(), math.degrees(v.angle_radian()))


def test_from_angles():
    assert Vector2.from_degree(0) == Vector2.right()
    assert Vector2.from_radian(math.pi / 2) == Vector2.down()
    assert Vector2.from_degree(180) == Vector2.left()


def test_magnitudes_and_distances():
    a = Vector2(3.0, 4.0)
    b = Vector2(-1.0, 2.0)
    assert math.isclose(a.magnitude() ** 2, a.sqr_magnitude())
    assert math.isclose(Vector2.distance(a, b), (a - b).magnitude())
    assert math.isclose(Vector2.squared_distance(a, b), Vector2.distance(a, b) ** 2)
    assert Vector2.distance(a, b) == Vector2.distance(b, a)


def test_normalized_is_unit_length():
    v = Vector2(-6.0, 8.0).normalized()
    assert math.isclose(v.magnitude(), 1.0)
    assert v * Vector2(-6.0, 8.0).magnitude() == Vector2(-6.0, 8.0)


def test_normalized_zero_stays_zero():
    assert Vector2.zero().normalized() == Vector2.zero()


def test_random_within_bounds():
    for _ in range(100):
        v = Vector2.random(-2.0, 2.0)
        assert -2.0 <= v.x <= 2.0
        assert -2.0 <= v.y <= 2.0


def test_random_equal_bounds():
    assert Vector2.random(1.0, 1.0) == Vector2.identity()


def test_unpacking():
    x, y = Vector2(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


def test_vector3_defaults_and_values():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)