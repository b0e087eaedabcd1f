"""Tests for validators module."""

import logging
import math

import jax.numpy as jnp
import pytest

from glmath.core.config import configure
from glmath.core.errors import ValidationError
from glmath.core.validators import (
    check_number,
    check_vector,
    deprecated,
    is_finite_number,
    validate_vector,
)


def test_is_finite_number() -> None:
    """Test finite number detection."""
    assert is_finite_number(0)
    assert is_finite_number(-1.5)
    assert is_finite_number(jnp.float64(2.0))
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number(-math.inf)
    assert not is_finite_number(None)
    assert not is_finite_number("1.0")
    assert not is_finite_number(True)


def test_validate_vector() -> None:
    """Test length and finiteness validation."""
    assert validate_vector([1.0, 2.0, 3.0], 3)
    assert not validate_vector([1.0, 2.0], 3)
    assert not validate_vector([1.0, math.nan, 3.0], 3)
    assert validate_vector(jnp.zeros(16), 16)


def test_check_number() -> None:
    """Test check_number returns valid values and rejects others."""
    assert check_number(3.5) == 3.5

    with pytest.raises(ValidationError, match="Invalid number"):
        check_number(math.nan)

    with pytest.raises(ValueError):
        check_number(math.inf)


def test_check_vector_only_in_debug_mode() -> None:
    """Test check_vector is a no-op unless debug checks are enabled."""
    bad = [1.0, math.nan]
    assert check_vector(bad, 2, "caller") is bad

    configure(debug_checks=True)
    with pytest.raises(ValidationError, match="caller"):
        check_vector(bad, 2, "caller")
    with pytest.raises(ValidationError):
        check_vector([1.0, 2.0, 3.0], 2)


def test_deprecated_warns_once(caplog: pytest.LogCaptureFixture) -> None:
    """Test deprecation warnings are logged once per method."""
    with caplog.at_level(logging.WARNING, logger="glmath"):
        deprecated("test_deprecated_warns_once.method", "3.0")
        deprecated("test_deprecated_warns_once.method", "3.0")

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert "test_deprecated_warns_once.method" in messages[0]
    assert "3.0" in messages[0]
