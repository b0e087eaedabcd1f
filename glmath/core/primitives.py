"""
Primitives module for flat buffer aliases, numerical constants, and basic functions.

All buffers are double precision. Matrices are stored flat in column-major
order and quaternions are stored scalar-last [x, y, z, w].
"""

from collections.abc import Sequence

import jax
import jax.numpy as jnp
from jaxtyping import Array, Bool, Float, Scalar

# Containers hold doubles
jax.config.update("jax_enable_x64", True)

# Project precision settings
FLOAT_DTYPE = jnp.float64
EPS = 1e-12

# Project type aliases
Scalar = Scalar
BoolScalar = Bool[Array, ""]
FloatScalar = Float[Array, ""]
Vector = Float[Array, "N"]
Vector2 = Float[Array, "2"]
Vector3 = Float[Array, "3"]
Vector4 = Float[Array, "4"]
Quaternion = Float[Array, "4"]
Matrix2 = Float[Array, "4"]
Matrix2x3 = Float[Array, "6"]
Matrix3 = Float[Array, "9"]
Matrix4 = Float[Array, "16"]
Matrix = Float[Array, "N"]
Array = Array


def to_buffer(values) -> Vector:
    """
    Convert a container, sequence or array into a flat float buffer.

    Parameters
    ----------
    values : Sequence[float] | Array
        Numeric values, e.g. a ``MathArray``, a list or a JAX array.

    Returns
    -------
    buffer : Vector
        One-dimensional ``FLOAT_DTYPE`` array.
    """
    if isinstance(values, Sequence):
        values = [float(value) for value in values]
    return jnp.ravel(jnp.asarray(values, dtype=FLOAT_DTYPE))


def norm_2(v: Vector2) -> FloatScalar:
    """
    Compute the Euclidean norm of a 2D vector.

    Parameters
    ----------
    v : Vector2
        2D vector [x, y].

    Returns
    -------
    norm : FloatScalar
        L2 norm (magnitude) of the vector.
    """
    return jnp.sqrt(v[0] ** 2 + v[1] ** 2)


def norm_3(v: Vector3) -> FloatScalar:
    """
    Compute the Euclidean norm of a 3D vector.

    Parameters
    ----------
    v : Vector3
        3D vector [x, y, z].

    Returns
    -------
    norm : FloatScalar
        L2 norm (magnitude) of the vector.
    """
    return jnp.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)


def norm_4(v: Quaternion) -> FloatScalar:
    """
    Compute the Euclidean norm of a quaternion.

    Parameters
    ----------
    v : Quaternion
        Quaternion [x, y, z, w].

    Returns
    -------
    norm : FloatScalar
        L2 norm (magnitude) of the quaternion.
    """
    return jnp.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2 + v[3] ** 2)
