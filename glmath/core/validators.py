"""Finite-number validation helpers shared by the containers."""

import logging
import math
from collections.abc import Sequence

from .config import get_config
from .errors import ValidationError

logger = logging.getLogger(__name__)

_deprecation_warnings_issued: set[str] = set()


def is_finite_number(value) -> bool:
    """Return True if ``value`` is a real number other than NaN or +/-infinity."""
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def validate_vector(v: Sequence[float], length: int) -> bool:
    """Return True if ``v`` has exactly ``length`` elements, all finite."""
    if len(v) != length:
        return False
    return all(is_finite_number(value) for value in v)


def check_number(value):
    """Return ``value`` unchanged, or raise ``ValidationError`` if it is not a finite number."""
    if not is_finite_number(value):
        raise ValidationError(f"Invalid number {value!r}")
    return value


def check_vector(v: Sequence[float], length: int, caller_name: str = ""):
    """In debug mode, raise ``ValidationError`` unless ``v`` is a valid ``length`` vector."""
    if get_config().debug_checks and not validate_vector(v, length):
        raise ValidationError(f"glmath: {caller_name} some fields set to invalid numbers")
    return v


def deprecated(method: str, version: int | str) -> None:
    """Log a one-time warning that ``method`` is deprecated."""
    if method not in _deprecation_warnings_issued:
        _deprecation_warnings_issued.add(method)
        logger.warning(
            "%s is deprecated and will be removed in version %s, see upgrade guide for more information",
            method,
            version,
        )
