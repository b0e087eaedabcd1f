"""
3D vector kernels operating on flat buffers.

Matrices are column-major (translation at indices 12, 13, 14 of a 4x4) and
vectors are treated as column vectors multiplied on the right. Quaternions
are scalar-last [x, y, z, w]. All angles in radians.
"""

import jax.numpy as jnp

from . import quaternion
from .primitives import (
    FLOAT_DTYPE,
    FloatScalar,
    Matrix2,
    Matrix3,
    Matrix4,
    Quaternion,
    Vector3,
    norm_3,
)


def dot(a: Vector3, b: Vector3) -> FloatScalar:
    """Dot product of two 3D vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Cross product of two 3D vectors, right-handed.

    Parameters
    ----------
    a : (3,) Vector3
        Left operand.
    b : (3,) Vector3
        Right operand.

    Returns
    -------
    (3,) Vector3
        a x b, so that x cross y gives z.
    """
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    return jnp.array(
        [
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ],
        dtype=FLOAT_DTYPE,
    )


def angle(a: Vector3, b: Vector3) -> FloatScalar:
    """
    Unsigned angle between two 3D vectors.

    Parameters
    ----------
    a : (3,) Vector3
        First vector.
    b : (3,) Vector3
        Second vector.

    Returns
    -------
    angle : FloatScalar
        Angle in [0, pi] radians.

    Notes
    -----
    Uses atan2(|a x b|, a . b), which stays accurate for nearly parallel
    vectors. Zero-length inputs are not guarded: two zero vectors give 0.
    """
    return jnp.arctan2(norm_3(cross(a, b)), dot(a, b))


def _rotate_about_origin(a: Vector3, origin: Vector3, rotate) -> Vector3:
    # Translate to origin, rotate, translate back
    p = a - origin
    return rotate(p) + origin


def rotate_x(a: Vector3, origin: Vector3, radians: FloatScalar) -> Vector3:
    """Rotate ``a`` about the x-axis through ``origin`` (right-hand rule)."""
    c, s = jnp.cos(radians), jnp.sin(radians)
    return _rotate_about_origin(
        a,
        origin,
        lambda p: jnp.array([p[0], p[1] * c - p[2] * s, p[1] * s + p[2] * c], dtype=FLOAT_DTYPE),
    )


def rotate_y(a: Vector3, origin: Vector3, radians: FloatScalar) -> Vector3:
    """Rotate ``a`` about the y-axis through ``origin`` (right-hand rule)."""
    c, s = jnp.cos(radians), jnp.sin(radians)
    return _rotate_about_origin(
        a,
        origin,
        lambda p: jnp.array([p[2] * s + p[0] * c, p[1], p[2] * c - p[0] * s], dtype=FLOAT_DTYPE),
    )


def rotate_z(a: Vector3, origin: Vector3, radians: FloatScalar) -> Vector3:
    """Rotate ``a`` about the z-axis through ``origin`` (right-hand rule)."""
    c, s = jnp.cos(radians), jnp.sin(radians)
    return _rotate_about_origin(
        a,
        origin,
        lambda p: jnp.array([p[0] * c - p[1] * s, p[0] * s + p[1] * c, p[2]], dtype=FLOAT_DTYPE),
    )


def _safe_w(w: FloatScalar) -> FloatScalar:
    # A zero or NaN homogeneous coordinate is treated as 1
    return jnp.where((w == 0.0) | jnp.isnan(w), 1.0, w)


def transform_mat4(a: Vector3, m: Matrix4) -> Vector3:
    """
    Transform a 3D point by a 4x4 matrix (implicit w = 1).

    Parameters
    ----------
    a : (3,) Vector3
        Point to transform.
    m : (16,) Matrix4
        Column-major 4x4 transform.

    Returns
    -------
    (3,) Vector3
        Transformed point after the homogeneous divide. Translation applies.
    """
    x, y, z = a[0], a[1], a[2]
    w = _safe_w(m[3] * x + m[7] * y + m[11] * z + m[15])
    return jnp.array(
        [
            (m[0] * x + m[4] * y + m[8] * z + m[12]) / w,
            (m[1] * x + m[5] * y + m[9] * z + m[13]) / w,
            (m[2] * x + m[6] * y + m[10] * z + m[14]) / w,
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat4_as_vector(a: Vector3, m: Matrix4) -> Vector3:
    """
    Transform a 3D direction by a 4x4 matrix (implicit w = 0).

    Parameters
    ----------
    a : (3,) Vector3
        Direction to transform.
    m : (16,) Matrix4
        Column-major 4x4 transform.

    Returns
    -------
    (3,) Vector3
        Transformed direction. Translation (m[12:15]) never contributes.
    """
    x, y, z = a[0], a[1], a[2]
    w = _safe_w(m[3] * x + m[7] * y + m[11] * z)
    return jnp.array(
        [
            (m[0] * x + m[4] * y + m[8] * z) / w,
            (m[1] * x + m[5] * y + m[9] * z) / w,
            (m[2] * x + m[6] * y + m[10] * z) / w,
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat3(a: Vector3, m: Matrix3) -> Vector3:
    """Transform a 3D vector by a column-major 3x3 matrix."""
    x, y, z = a[0], a[1], a[2]
    return jnp.array(
        [
            x * m[0] + y * m[3] + z * m[6],
            x * m[1] + y * m[4] + z * m[7],
            x * m[2] + y * m[5] + z * m[8],
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_mat2(a: Vector3, m: Matrix2) -> Vector3:
    """Transform the x/y part of a 3D vector by a column-major 2x2 matrix, keeping z."""
    x, y = a[0], a[1]
    return jnp.array(
        [
            m[0] * x + m[2] * y,
            m[1] * x + m[3] * y,
            a[2],
        ],
        dtype=FLOAT_DTYPE,
    )


def transform_quat(a: Vector3, q: Quaternion) -> Vector3:
    """Rotate a 3D vector by a unit quaternion [x, y, z, w]."""
    return quaternion.rotate_vector(a, q)
