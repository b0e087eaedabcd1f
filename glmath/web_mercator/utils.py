"""
Web-mercator projection helpers.

World coordinates are pixels of a single 512 px tile at zoom 0: x grows
eastward from longitude -180, y grows northward from the southern edge.
All angles in degrees.
"""

import math

import jax.numpy as jnp

from glmath.core.primitives import FLOAT_DTYPE, Vector2

# Defined by mapbox-gl
TILE_SIZE = 512.0

PI = jnp.pi
PI_4 = jnp.pi / 4
DEGREES_TO_RADIANS = jnp.pi / 180
RADIANS_TO_DEGREES = 180 / jnp.pi


def mod(value: float, divisor: float) -> float:
    """Remainder of ``value / divisor`` with the sign of ``divisor``."""
    return value % divisor


def log2(value: float) -> float:
    return math.log2(value)


def lng_lat_to_world(lng_lat: Vector2) -> Vector2:
    """
    Project a longitude/latitude pair onto the zoom 0 tile.

    Parameters
    ----------
    lng_lat : (2,) Vector2
        [longitude, latitude] in degrees.

    Returns
    -------
    (2,) Vector2
        World pixel coordinates [x, y].
    """
    lambda2 = lng_lat[0] * DEGREES_TO_RADIANS
    phi2 = lng_lat[1] * DEGREES_TO_RADIANS
    x = (TILE_SIZE * (lambda2 + PI)) / (2 * PI)
    y = (TILE_SIZE * (PI + jnp.log(jnp.tan(PI_4 + phi2 * 0.5)))) / (2 * PI)
    return jnp.array([x, y], dtype=FLOAT_DTYPE)


def world_to_lng_lat(xy: Vector2) -> Vector2:
    """
    Unproject world pixel coordinates back to longitude/latitude.

    Parameters
    ----------
    xy : (2,) Vector2
        World pixel coordinates [x, y].

    Returns
    -------
    (2,) Vector2
        [longitude, latitude] in degrees.
    """
    lambda2 = (xy[0] / TILE_SIZE) * (2 * PI) - PI
    phi2 = 2 * (jnp.arctan(jnp.exp((xy[1] / TILE_SIZE) * (2 * PI) - PI)) - PI_4)
    return jnp.array([lambda2 * RADIANS_TO_DEGREES, phi2 * RADIANS_TO_DEGREES], dtype=FLOAT_DTYPE)
