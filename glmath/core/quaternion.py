"""
Quaternion kernels for 3D rotation.

Uses scalar-last format [x, y, z, w] with Hamilton product and right-handed
rotations. All angles in radians.
https://blog.mbedded.ninja/mathematics/geometry/quaternions
"""

import jax
import jax.numpy as jnp

from .primitives import (
    EPS,
    FLOAT_DTYPE,
    FloatScalar,
    Matrix3,
    Quaternion,
    Vector3,
    norm_3,
    norm_4,
)


def identity() -> Quaternion:
    """Return the identity quaternion [0, 0, 0, 1]."""
    return jnp.array([0.0, 0.0, 0.0, 1.0], dtype=FLOAT_DTYPE)


def canonicalize(q: Quaternion) -> Quaternion:
    """
    Ensures a quaternion has a non-negative scalar component (w >= 0).

    Parameters
    ----------
    q: (4,) Quaternion
        Input quaternion [x, y, z, w].

    Returns
    -------
    (4,) Quaternion
        Canonical quaternion with w >= 0.
    """
    return jax.lax.cond(
        q[3] < 0.0,
        lambda: -q,
        lambda: q,
    )


def normalize(q: Quaternion) -> Quaternion:
    """
    Normalise a quaternion to unit length.

    Parameters
    ----------
    q : (4,) Quaternion
        Input quaternion [x, y, z, w].

    Returns
    -------
    (4,) Quaternion
        Unit quaternion, or identity if input magnitude is near zero.
    """
    magnitude = norm_4(q)
    q_normalized = jax.lax.cond(
        magnitude > EPS,
        lambda: q / magnitude,
        identity,
    )
    return canonicalize(q_normalized)


def multiply(q1: Quaternion, q2: Quaternion) -> Quaternion:
    """
    Multiply two quaternions (Hamilton product).

    Parameters
    ----------
    q1 : (4,) Quaternion
        First quaternion in [x, y, z, w] order.
    q2 : (4,) Quaternion
        Second quaternion in [x, y, z, w] order.

    Returns
    -------
    (4,) Quaternion
        The quaternion product q1 * q2.
    """
    x1, y1, z1, w1 = q1[0], q1[1], q1[2], q1[3]
    x2, y2, z2, w2 = q2[0], q2[1], q2[2], q2[3]
    return jnp.array(
        [
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        ],
        dtype=FLOAT_DTYPE,
    )


def conjugate(q: Quaternion) -> Quaternion:
    """Return the conjugate [-x, -y, -z, w] of a quaternion."""
    return jnp.array([-q[0], -q[1], -q[2], q[3]], dtype=FLOAT_DTYPE)


def inverse(q: Quaternion) -> Quaternion:
    """
    Return the inverse of a quaternion.

    Parameters
    ----------
    q : (4,) Quaternion
        Input quaternion [x, y, z, w].

    Returns
    -------
    (4,) Quaternion
        Inverse quaternion, or identity if input magnitude is near zero.
    """
    magnitude_sq = q[0] ** 2 + q[1] ** 2 + q[2] ** 2 + q[3] ** 2
    return jax.lax.cond(
        magnitude_sq > EPS,
        lambda: conjugate(q) / magnitude_sq,
        identity,
    )


def rotate_vector(v: Vector3, q: Quaternion) -> Vector3:
    """
    Rotate a 3D vector using a quaternion.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector to rotate.
    q : (4,) Quaternion
        Unit quaternion representing the rotation.

    Returns
    -------
    (3,) Vector3
        Vector part of q * v * q^-1.
    """
    # Pure quaternion, scalar last
    v_quat = jnp.array([v[0], v[1], v[2], 0.0], dtype=FLOAT_DTYPE)

    x, y, z, _ = multiply(multiply(q, v_quat), conjugate(q))
    return jnp.array([x, y, z], dtype=FLOAT_DTYPE)


def slerp(q1: Quaternion, q2: Quaternion, t: FloatScalar) -> Quaternion:
    """
    Perform spherical linear interpolation (SLERP) between two unit quaternions.

    Parameters
    ----------
    q1 : (4,) Quaternion
        Initial quaternion [x, y, z, w], must be unit length.
    q2 : (4,) Quaternion
        Final quaternion [x, y, z, w], must be unit length.
    t : FloatScalar
        Interpolation factor in range [0, 1].

    Returns
    -------
    (4,) Quaternion
        Interpolated unit quaternion.

    Notes
    -----
    If the dot product is negative, q2 is negated to take the shortest path.
    Nearly identical quaternions fall back to linear interpolation to avoid
    dividing by a near-zero sine.
    """
    cos_theta = jnp.dot(q1, q2)

    q2 = jnp.where(cos_theta < 0.0, -q2, q2)
    cos_theta = jnp.abs(cos_theta)

    def linear_interp() -> Quaternion:
        return (1.0 - t) * q1 + t * q2

    def spherical_interp() -> Quaternion:
        theta = jnp.arccos(jnp.clip(cos_theta, -1.0, 1.0))
        sin_theta = jnp.sin(theta)
        weight1 = jnp.sin((1.0 - t) * theta) / sin_theta
        weight2 = jnp.sin(t * theta) / sin_theta
        return weight1 * q1 + weight2 * q2

    q_interp = jax.lax.cond(
        cos_theta > 1.0 - EPS,
        linear_interp,
        spherical_interp,
    )
    return normalize(q_interp)


def from_axis_angle(axis: Vector3, angle: FloatScalar) -> Quaternion:
    """
    Create a quaternion from axis-angle representation.

    Parameters
    ----------
    axis : (3,) Vector3
        3D rotation axis.
    angle : FloatScalar
        Rotation angle in radians.

    Returns
    -------
    (4,) Quaternion
        Quaternion [x, y, z, w] representing the rotation.

    Notes
    -----
    A near-zero axis defaults to [1, 0, 0] (x-axis).
    """
    magnitude = norm_3(axis)
    unit_axis = jax.lax.cond(
        magnitude > EPS,
        lambda: axis / magnitude,
        lambda: jnp.array([1.0, 0.0, 0.0], dtype=FLOAT_DTYPE),
    )

    s, c = jnp.sin(0.5 * angle), jnp.cos(0.5 * angle)
    return jnp.array([unit_axis[0] * s, unit_axis[1] * s, unit_axis[2] * s, c], dtype=FLOAT_DTYPE)


def to_rotation_matrix(q: Quaternion) -> Matrix3:
    """
    Convert a unit quaternion to a column-major 3x3 rotation matrix.

    Parameters
    ----------
    q : (4,) Quaternion
        Unit quaternion [x, y, z, w].

    Returns
    -------
    (9,) Matrix3
        Flat column-major rotation matrix.
    """
    x, y, z, w = q[0], q[1], q[2], q[3]
    return jnp.array(
        [
            # Column 0
            1 - 2 * y * y - 2 * z * z,
            2 * x * y + 2 * z * w,
            2 * x * z - 2 * y * w,
            # Column 1
            2 * x * y - 2 * z * w,
            1 - 2 * x * x - 2 * z * z,
            2 * y * z + 2 * x * w,
            # Column 2
            2 * x * z + 2 * y * w,
            2 * y * z - 2 * x * w,
            1 - 2 * x * x - 2 * y * y,
        ],
        dtype=FLOAT_DTYPE,
    )
