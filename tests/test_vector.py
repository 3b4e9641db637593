from __future__ import annotations

import math

import pytest

from mc_patterns.vector import Vector3


def test_arithmetic_returns_new_vectors() -> None:
    a = Vector3(1, 2, 3)
    b = Vector3(4, -5, 6)

    assert a.add(b) == Vector3(5, -3, 9)
    assert a.subtract(b) == Vector3(-3, 7, -3)
    assert a.multiply(2) == Vector3(2, 4, 6)
    assert Vector3(2, 4, 6).divide(2) == Vector3(1, 2, 3)
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a == Vector3(1, 2, 3)


def test_default_is_origin() -> None:
    assert Vector3() == Vector3(0, 0, 0)
    assert Vector3().magnitude() == 0


def test_equality_is_exact() -> None:
    assert Vector3(1, 2, 3).equals(Vector3(1, 2, 3))
    assert not Vector3(0.1 + 0.2, 0, 0).equals(Vector3(0.3, 0, 0))


@pytest.mark.parametrize("vector", [Vector3(), Vector3(1, 0, 0), Vector3(-2, 5, 7)])
def test_divide_by_zero_raises(vector: Vector3) -> None:
    with pytest.raises(ZeroDivisionError):
        vector.divide(0)


def test_normalize_zero_vector_raises() -> None:
    with pytest.raises(ZeroDivisionError, match="zero vector"):
        Vector3(0, 0, 0).normalize()


def test_normalize_gives_unit_length() -> None:
    unit = Vector3(3, 0, 4).normalize()

    assert unit == Vector3(0.6, 0, 0.8)
    assert math.isclose(unit.magnitude(), 1.0)


def test_magnitude_zero_only_for_origin() -> None:
    assert Vector3(0, 0, 0).magnitude() == 0
    for vector in (Vector3(1, 0, 0), Vector3(0, -1, 0), Vector3(0, 0, 0.5)):
        assert vector.magnitude() > 0


def test_dot_and_cross() -> None:
    x_axis = Vector3(1, 0, 0)
    y_axis = Vector3(0, 1, 0)

    assert x_axis.dot(y_axis) == 0
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32
    assert x_axis.cross(y_axis) == Vector3(0, 0, 1)
    assert y_axis.cross(x_axis) == Vector3(0, 0, -1)


def test_distance_is_symmetric() -> None:
    a = Vector3(1, 2, 3)
    b = Vector3(-4, 6, 3)

    assert a.distance(b) == b.distance(a)
    assert a.distance(b) == math.sqrt(41)


def test_string_and_block_position() -> None:
    assert str(Vector3(1, -2, 3)) == "Vector3(1, -2, 3)"
    assert Vector3(1.7, -0.2, 3).block_position() == (1, -1, 3)


def test_tiny_vector_keeps_nonzero_magnitude() -> None:
    tiny = Vector3(1e-200, 0, 0)

    assert tiny.magnitude() > 0
    assert tiny.normalize() == Vector3(1.0, 0, 0)


def test_huge_components_do_not_overflow() -> None:
    huge = Vector3(1e200, 0, 0)

    assert huge.magnitude() == 1e200
    assert huge.distance(Vector3()) == 1e200
    assert Vector3().distance(huge) == 1e200
