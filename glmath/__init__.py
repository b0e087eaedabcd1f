"""glmath - fixed-size vector algebra for geometry and graphics."""

from glmath.core.common import (
    acos,
    asin,
    atan,
    clamp,
    clone,
    cos,
    degrees,
    equals,
    exact_equals,
    format_value,
    is_array,
    lerp,
    radians,
    sin,
    tan,
    to_degrees,
    to_radians,
)
from glmath.core.config import (
    MathConfig,
    configure,
    get_config,
    override_config,
    reset_config,
    with_epsilon,
)
from glmath.core.errors import (
    ConstructionError,
    GLMathError,
    UnknownOptionError,
    ValidationError,
)
from glmath.core.math_array import MathArray
from glmath.core.validators import check_number
from glmath.core.vector import Vector
from glmath.core.vector2 import Vector2
from glmath.core.vector3 import Vector3
from glmath.logging_config import setup_logging
from glmath.web_mercator import normalize_viewport_props

__all__ = [
    # Configuration
    "MathConfig",
    "configure",
    "get_config",
    "override_config",
    "reset_config",
    "with_epsilon",
    # Errors
    "GLMathError",
    "ValidationError",
    "UnknownOptionError",
    "ConstructionError",
    # Containers
    "MathArray",
    "Vector",
    "Vector2",
    "Vector3",
    # Helpers
    "check_number",
    "clone",
    "equals",
    "exact_equals",
    "format_value",
    "is_array",
    "to_degrees",
    "to_radians",
    # GLSL-style functions
    "radians",
    "degrees",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "clamp",
    "lerp",
    # Geospatial
    "normalize_viewport_props",
    # Logging
    "setup_logging",
]
