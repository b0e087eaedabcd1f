"""Tests for common module."""

import math

import jax.numpy as jnp
import pytest

from glmath.core import common
from glmath.core.config import MathConfig, configure
from glmath.core.vector2 import Vector2
from glmath.core.vector3 import Vector3


def test_format_value() -> None:
    """Test significant digits and trailing zero removal."""
    # Standard case 1 - integers print without decimal point
    assert common.format_value(1.0) == "1"
    assert common.format_value(-3) == "-3"

    # Standard case 2 - precision 4 significant digits
    assert common.format_value(1 / 3) == "0.3333"
    assert common.format_value(2.5) == "2.5"
    assert common.format_value(12346.0) == "12350"

    # Standard case 3 - explicit options
    assert common.format_value(math.pi, MathConfig(precision=2)) == "3.1"

    # Edge case 1 - values below epsilon snap to zero
    assert common.format_value(1e-13) == "0"
    assert common.format_value(-0.0) == "0"

    # Edge case 2 - non-finite values
    assert common.format_value(math.inf) == "inf"
    assert common.format_value(math.nan) == "nan"

    # Edge case 3 - zero epsilon skips rounding
    assert common.format_value(0.5, MathConfig(epsilon=0.0)) == "0.5"


def test_is_array() -> None:
    """Test array detection."""
    assert common.is_array([1, 2])
    assert common.is_array((1, 2))
    assert common.is_array(Vector3())
    assert common.is_array(jnp.zeros(3))
    assert not common.is_array(jnp.float64(1.0))
    assert not common.is_array(1.0)
    assert not common.is_array("abc")
    assert not common.is_array({"x": 1})


def test_equals_scalars() -> None:
    """Test tolerant scalar equality."""
    # Standard case 1 - within absolute tolerance near zero
    assert common.equals(0.0, 1e-13)
    assert not common.equals(0.0, 1e-11)

    # Standard case 2 - relative tolerance for large magnitudes
    assert common.equals(1e6, 1e6 + 1e-7)
    assert not common.equals(1e6, 1e6 + 1e-5)

    # Standard case 3 - explicit epsilon
    assert common.equals(1.0, 1.05, 0.1)
    assert not common.equals(1.0, 1.05)

    # Edge case 1 - non-finite values
    assert common.equals(math.inf, math.inf)
    assert not common.equals(math.nan, math.nan)
    assert not common.equals(math.inf, 1e308)

    # Edge case 2 - zero epsilon is exact
    configure(epsilon=0.0)
    assert common.equals(0.1 + 0.2, 0.1 + 0.2)
    assert not common.equals(0.1 + 0.2, 0.3)


def test_equals_arrays_and_containers() -> None:
    """Test equality dispatch for arrays and containers."""
    # Standard case 1 - plain arrays compared element-wise
    assert common.equals([1.0, 2.0], (1.0, 2.0 + 1e-14))
    assert not common.equals([1.0, 2.0], [1.0, 2.0, 3.0])

    # Standard case 2 - containers use their equals method on either side
    v = Vector3(1.0, 2.0, 3.0)
    assert common.equals(v, [1.0, 2.0, 3.0])
    assert common.equals([1.0, 2.0, 3.0], v)

    # Standard case 3 - nested arrays
    assert common.equals([[1.0], [2.0]], [[1.0], [2.0]])

    # Edge case 1 - mismatched kinds
    assert not common.equals(1.0, [1.0])
    assert not common.equals(None, 1.0)


def test_exact_equals() -> None:
    """Test exact equality dispatch."""
    assert common.exact_equals(0.3, 0.3)
    assert not common.exact_equals(0.1 + 0.2, 0.3)
    assert common.exact_equals([1.0, 2.0], [1.0, 2.0])
    assert not common.exact_equals([1.0, 2.0], [1.0])
    assert common.exact_equals(Vector3(1, 2, 3), Vector3(1, 2, 3))

    # Edge case 1 - different container types never match
    assert not common.exact_equals(Vector3(1, 2, 0), Vector2(1, 2))
    assert not common.exact_equals(Vector3(1, 2, 3), [1.0, 2.0, 3.0])


def test_clone() -> None:
    """Test clone of containers and plain arrays."""
    v = Vector3(1, 2, 3)
    copied = common.clone(v)
    assert isinstance(copied, Vector3)
    assert copied is not v
    assert copied == v

    values = [1.0, 2.0]
    copied_values = common.clone(values)
    assert copied_values == values
    assert copied_values is not values


def test_radians_and_degrees() -> None:
    """Test angle conversion for scalars, lists and containers."""
    # Standard case 1 - scalars
    assert common.radians(180.0) == pytest.approx(math.pi)
    assert common.degrees(math.pi / 2) == pytest.approx(90.0)
    assert common.to_radians(90.0) == pytest.approx(math.pi / 2)
    assert common.to_degrees(math.pi) == pytest.approx(180.0)

    # Standard case 2 - lists map into new lists
    result = common.radians([0.0, 90.0])
    assert result == pytest.approx([0.0, math.pi / 2])

    # Standard case 3 - containers map into clones
    v = Vector2(180.0, 360.0)
    converted = common.radians(v)
    assert isinstance(converted, Vector2)
    assert converted.equals([math.pi, 2 * math.pi])
    assert v.exact_equals([180.0, 360.0])

    # Edge case 1 - explicit result target
    target = Vector2()
    assert common.degrees([math.pi, 0.0], target) is target
    assert target.equals([180.0, 0.0])


def test_trigonometry() -> None:
    """Test GLSL-style trigonometric helpers."""
    assert common.sin(math.pi / 2) == pytest.approx(1.0)
    assert common.cos([0.0, math.pi]) == pytest.approx([1.0, -1.0])
    assert common.tan(math.pi / 4) == pytest.approx(1.0)
    assert common.asin(1.0) == pytest.approx(math.pi / 2)
    assert common.acos([1.0]) == pytest.approx([0.0])
    assert common.atan(1.0) == pytest.approx(math.pi / 4)


def test_clamp_and_lerp() -> None:
    """Test GLSL-style clamp and lerp."""
    # Standard case 1 - scalars
    assert common.clamp(5.0, 0.0, 1.0) == 1.0
    assert common.clamp(-5.0, 0.0, 1.0) == 0.0
    assert common.lerp(2.0, 4.0, 0.5) == 3.0

    # Standard case 2 - arrays
    assert common.clamp([-1.0, 0.5, 2.0], 0.0, 1.0) == [0.0, 0.5, 1.0]
    assert common.lerp([0.0, 10.0], [10.0, 20.0], 0.25) == [2.5, 12.5]

    # Edge case 1 - endpoints are exact
    assert common.lerp(0.1, 0.7, 0.0) == 0.1
    assert common.lerp(0.1, 0.7, 1.0) == 0.7
