"""
Matrix construction kernels.

Every matrix in glmath is a flat, column-major buffer (OpenGL layout): element
(row r, column c) of an n x n matrix lives at index ``c * n + r``. A 4x4
transform therefore keeps its translation at indices 12, 13 and 14. Vectors
are column vectors multiplied on the right, ``M @ v``. This convention is
fixed; the ``print_row_major`` configuration flag only changes display.
"""

import jax.numpy as jnp

from . import quaternion
from .primitives import FLOAT_DTYPE, FloatScalar, Matrix, Matrix2, Matrix4, Quaternion, Vector3


def identity(size: int = 4) -> Matrix:
    """Return a flat ``size`` x ``size`` identity matrix."""
    return jnp.eye(size, dtype=FLOAT_DTYPE).reshape(-1)


def from_rows(rows) -> Matrix:
    """
    Convert a row-major nested matrix into the flat column-major layout.

    Parameters
    ----------
    rows : (N, N) array-like
        Matrix written row by row, as it reads on paper.

    Returns
    -------
    (N * N,) Matrix
        Flat column-major buffer.
    """
    return jnp.asarray(rows, dtype=FLOAT_DTYPE).T.reshape(-1)


def from_translation(v: Vector3) -> Matrix4:
    """Return a 4x4 translation matrix."""
    return identity(4).at[12:15].set(v)


def from_scaling(v: Vector3) -> Matrix4:
    """Return a 4x4 scaling matrix."""
    return jnp.diag(jnp.array([v[0], v[1], v[2], 1.0], dtype=FLOAT_DTYPE)).reshape(-1)


def from_quaternion(q: Quaternion) -> Matrix4:
    """Return a 4x4 rotation matrix for a unit quaternion [x, y, z, w]."""
    rotation = quaternion.to_rotation_matrix(q).reshape(3, 3)
    return jnp.eye(4, dtype=FLOAT_DTYPE).at[:3, :3].set(rotation).reshape(-1)


def from_rotation_2d(radians: FloatScalar) -> Matrix2:
    """Return a 2x2 counter-clockwise rotation matrix."""
    c, s = jnp.cos(radians), jnp.sin(radians)
    return jnp.array([c, s, -s, c], dtype=FLOAT_DTYPE)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Multiply two flat column-major square matrices.

    Parameters
    ----------
    a : (N * N,) Matrix
        Left operand.
    b : (N * N,) Matrix
        Right operand, applied first to vectors.

    Returns
    -------
    (N * N,) Matrix
        Flat column-major product a @ b.
    """
    n = int(round(a.shape[0] ** 0.5))
    # Column-major flat buffers reshape to the transpose
    a_rows = a.reshape(n, n).T
    b_rows = b.reshape(n, n).T
    return (a_rows @ b_rows).T.reshape(-1)
