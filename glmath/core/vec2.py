"""2D vector kernels operating on flat column-major matrix buffers."""

import jax.numpy as jnp

from .primitives import FLOAT_DTYPE, Matrix2, Matrix2x3, Matrix3, Matrix4, Vector2


def transform_mat4(a: Vector2, m: Matrix4) -> Vector2:
    """Transform a 2D point (z = 0, w = 1) by a 4x4 matrix, without homogeneous divide."""
    x, y = a[0], a[1]
    return jnp.array(
        [
            m[0] * x + m[4] * y + m[12],
            m[1] * x + m[5] * y + m[13],
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat4_as_vector(a: Vector2, m: Matrix4) -> Vector2:
    """Transform a 2D direction (z = 0, w = 0) by a 4x4 matrix, ignoring translation."""
    x, y = a[0], a[1]
    w = m[3] * x + m[7] * y
    w = jnp.where((w == 0.0) | jnp.isnan(w), 1.0, w)
    return jnp.array(
        [
            (m[0] * x + m[4] * y) / w,
            (m[1] * x + m[5] * y) / w,
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat3(a: Vector2, m: Matrix3) -> Vector2:
    """Transform a 2D point by a 3x3 affine matrix (translation at m[6], m[7])."""
    x, y = a[0], a[1]
    return jnp.array(
        [
            m[0] * x + m[3] * y + m[6],
            m[1] * x + m[4] * y + m[7],
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat2d(a: Vector2, m: Matrix2x3) -> Vector2:
    """Transform a 2D point by a 2x3 affine matrix [a, b, c, d, tx, ty]."""
    x, y = a[0], a[1]
    return jnp.array(
        [
            m[0] * x + m[2] * y + m[4],
            m[1] * x + m[3] * y + m[5],
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat2(a: Vector2, m: Matrix2) -> Vector2:
    """Transform a 2D vector by a column-major 2x2 matrix."""
    x, y = a[0], a[1]
    return jnp.array(
        [
            m[0] * x + m[2] * y,
            m[1] * x + m[3] * y,
        ],
        dtype=FLOAT_DTYPE,
    )
