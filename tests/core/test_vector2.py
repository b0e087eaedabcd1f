"""Tests for the Vector2 container."""

import math

import jax.numpy as jnp
import pytest

from glmath.core import matrix
from glmath.core.config import configure
from glmath.core.errors import ValidationError
from glmath.core.vector2 import Vector2


def test_construction() -> None:
    """Test component and array construction."""
    assert Vector2().exact_equals([0.0, 0.0])
    assert Vector2(1, 2).exact_equals([1.0, 2.0])
    assert Vector2([3.0, 4.0]).exact_equals([3.0, 4.0])
    assert len(Vector2()) == 2

    configure(debug_checks=True)
    with pytest.raises(ValidationError):
        Vector2(math.inf, 0.0)


def test_objects() -> None:
    """Test conversion to and from objects with x, y fields."""
    v = Vector2().from_object({"x": 1.5, "y": -2.0})
    assert (v.x, v.y) == (1.5, -2.0)
    assert v.to_object({}) == {"x": 1.5, "y": -2.0}
    assert v.set(3, 4).length() == 5.0


def test_angles() -> None:
    """Test horizontal and vertical angles."""
    # Standard case 1 - angle from the x-axis
    assert Vector2(1.0, 0.0).horizontal_angle() == 0.0
    assert Vector2(0.0, 1.0).horizontal_angle() == pytest.approx(math.pi / 2)

    # Standard case 2 - angle from the y-axis
    assert Vector2(0.0, 1.0).vertical_angle() == 0.0
    assert Vector2(1.0, 0.0).vertical_angle() == pytest.approx(math.pi / 2)


def test_transforms() -> None:
    """Test 2D transforms by 4x4, 3x3, 2x3 and 2x2 matrices."""
    translation = matrix.from_translation(jnp.array([1.0, 2.0, 3.0]))

    # Standard case 1 - 4x4 point and direction
    assert Vector2(1.0, 1.0).transform(translation).exact_equals([2.0, 3.0])
    assert Vector2(1.0, 1.0).transform_as_point(translation).exact_equals([2.0, 3.0])
    assert Vector2(1.0, 1.0).transform_as_vector(translation).exact_equals([1.0, 1.0])

    # Standard case 2 - 3x3 affine with translation in the last column
    m3 = matrix.from_rows([[1.0, 0.0, 5.0], [0.0, 1.0, 6.0], [0.0, 0.0, 1.0]])
    assert Vector2(1.0, 1.0).transform_by_matrix3(m3).exact_equals([6.0, 7.0])

    # Standard case 3 - 2x3 affine [a, b, c, d, tx, ty]
    assert Vector2(1.0, 1.0).transform_by_matrix2x3([2.0, 0.0, 0.0, 3.0, 5.0, 6.0]).exact_equals([7.0, 9.0])

    # Standard case 4 - 2x2 rotation
    m2 = matrix.from_rows([[0.0, -1.0], [1.0, 0.0]])
    assert Vector2(1.0, 0.0).transform_by_matrix2(m2).exact_equals([0.0, 1.0])

    # Edge case 1 - wrong matrix size in debug mode
    configure(debug_checks=True)
    with pytest.raises(ValidationError, match="transform_by_matrix2x3"):
        Vector2(1.0, 1.0).transform_by_matrix2x3([1.0, 0.0, 0.0, 1.0])
