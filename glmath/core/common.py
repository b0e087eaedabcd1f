"""
Common helpers: value formatting, tolerant equality and GLSL-style functions.

The GLSL-style functions accept either a single number or an array. Arrays
are mapped element-wise into a new container of the same kind (a clone for
``MathArray`` instances, a list otherwise).
"""

import math
from collections.abc import Callable, Sequence
from numbers import Real

from .config import MathConfig, get_config, with_epsilon

RADIANS_TO_DEGREES = 180.0 / math.pi
DEGREES_TO_RADIANS = math.pi / 180.0

__all__ = [
    "acos",
    "asin",
    "atan",
    "clamp",
    "clone",
    "cos",
    "degrees",
    "equals",
    "exact_equals",
    "format_value",
    "is_array",
    "lerp",
    "radians",
    "sin",
    "tan",
    "to_degrees",
    "to_radians",
    "with_epsilon",
]


def is_array(value) -> bool:
    """
    Check if a value is an "array".

    Returns True for sequences (lists, tuples, containers) and for JAX or
    NumPy arrays with at least one dimension. Strings and bytes are not arrays.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if isinstance(value, Sequence):
        return True
    return getattr(value, "ndim", 0) >= 1


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, Real) or getattr(value, "ndim", None) == 0


def _round(value: float, epsilon: float) -> float:
    # Snap to the epsilon grid, keeping values that cannot be snapped
    if epsilon <= 0:
        return value
    scaled = value / epsilon
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) * epsilon


def format_value(value: float, config: MathConfig | None = None) -> str:
    """
    Format a value using ``config.precision`` significant digits, without trailing zeros.

    Parameters
    ----------
    value : float
        Value to format.
    config : MathConfig, optional
        Formatting options, defaults to the active configuration.

    Returns
    -------
    text : str
        E.g. ``"1"``, ``"0.3333"`` or ``"12350"`` with precision 4.
    """
    config = config or get_config()
    precision = config.precision or 4
    value = float(f"{_round(float(value), config.epsilon):.{precision}g}")
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def clone(array):
    """Return a copy of ``array``, using its own ``clone`` method when it has one."""
    if hasattr(array, "clone"):
        return array.clone()
    return list(array)


def _duplicate(array):
    if hasattr(array, "clone"):
        return array.clone()
    return [0.0] * len(array)


def _map(value, func: Callable[[float], float], result=None):
    # Element-wise for arrays, direct call for scalars
    if is_array(value):
        result = result if result is not None else _duplicate(value)
        for i in range(min(len(result), len(value))):
            result[i] = func(value[i])
        return result
    return func(value)


def radians(degrees, result=None):
    """GLSL equivalent of ``radians``: works on single values and vectors."""
    return _map(degrees, lambda angle: angle * DEGREES_TO_RADIANS, result)


def degrees(radians, result=None):
    """GLSL equivalent of ``degrees``: works on single values and vectors."""
    return _map(radians, lambda angle: angle * RADIANS_TO_DEGREES, result)


def to_radians(degrees):
    return radians(degrees)


def to_degrees(radians):
    return degrees(radians)


def sin(radians):
    return _map(radians, math.sin)


def cos(radians):
    return _map(radians, math.cos)


def tan(radians):
    return _map(radians, math.tan)


def asin(value):
    return _map(value, math.asin)


def acos(value):
    return _map(value, math.acos)


def atan(value):
    return _map(value, math.atan)


def clamp(value, min_value: float, max_value: float):
    """GLSL style value clamping: works on single values and vectors."""
    return _map(value, lambda v: max(min_value, min(max_value, v)))


def lerp(a, b, t: float):
    """Interpolate between two numbers or two arrays."""
    if is_array(a):
        return [lerp(ai, b[i], t) for i, ai in enumerate(a)]
    return t * b + (1 - t) * a


def _scalar_equals(a, b, epsilon: float) -> bool:
    a, b = float(a), float(b)
    if a == b:
        return True
    if math.isfinite(a) and math.isfinite(b):
        return abs(a - b) <= epsilon * max(1.0, abs(a), abs(b))
    return False


def equals(a, b, epsilon: float | None = None) -> bool:
    """
    Compare two numbers, arrays or containers with the configured tolerance.

    Parameters
    ----------
    a, b : float | Sequence[float] | MathArray
        Values to compare.
    epsilon : float, optional
        Tolerance overriding the configured epsilon for this comparison.

    Returns
    -------
    equal : bool
        True if every pair of values satisfies
        ``|a - b| <= epsilon * max(1, |a|, |b|)``.
    """
    if epsilon:
        return with_epsilon(epsilon, lambda: equals(a, b))
    if a is b:
        return True
    if hasattr(a, "equals"):
        return a.equals(b)
    if hasattr(b, "equals"):
        return b.equals(a)
    if _is_number(a) and _is_number(b):
        return _scalar_equals(a, b, get_config().epsilon)
    if is_array(a) and is_array(b):
        if len(a) != len(b):
            return False
        return all(equals(a[i], b[i]) for i in range(len(a)))
    return False


def exact_equals(a, b) -> bool:
    """Compare two numbers, arrays or containers without tolerance."""
    if a is b:
        return True
    if hasattr(a, "exact_equals") or hasattr(b, "exact_equals"):
        if type(a) is not type(b):
            return False
        return a.exact_equals(b)
    if _is_number(a) and _is_number(b):
        return float(a) == float(b)
    if is_array(a) and is_array(b):
        if len(a) != len(b):
            return False
        return all(exact_equals(a[i], b[i]) for i in range(len(a)))
    return False
