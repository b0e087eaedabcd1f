"""Viewport constraints for web-mercator maps."""

import logging
import math
from dataclasses import dataclass

import jax.numpy as jnp

from glmath.core.primitives import FLOAT_DTYPE

from .utils import TILE_SIZE, log2, mod, world_to_lng_lat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportProps:
    """Map viewport parameters after normalization."""

    width: float
    """Viewport width [px]."""

    height: float
    """Viewport height [px]."""

    longitude: float
    """Center longitude [deg], in [-180, 180]."""

    latitude: float
    """Center latitude [deg]."""

    zoom: float
    """Zoom level, log2 of the scale relative to a single 512 px tile."""

    pitch: float = 0.0
    """Camera pitch [deg]."""

    bearing: float = 0.0
    """Map rotation [deg], in [-180, 180]."""


def _latitude_at(world_y: float) -> float:
    return float(world_to_lng_lat(jnp.array([0.0, world_y], dtype=FLOAT_DTYPE))[1])


def normalize_viewport_props(
    *,
    width: float,
    height: float,
    longitude: float,
    latitude: float,
    zoom: float,
    pitch: float = 0.0,
    bearing: float = 0.0,
) -> ViewportProps:
    """
    Apply mathematical constraints to viewport props.

    Parameters
    ----------
    width, height : float
        Viewport size [px].
    longitude, latitude : float
        Map center [deg].
    zoom : float
        Requested zoom level.
    pitch, bearing : float
        Camera pitch and map rotation [deg].

    Returns
    -------
    props : ViewportProps
        Longitude and bearing wrapped into [-180, 180]. Zoom is raised to
        the level where the map fills the viewport height (centering on the
        equator at that level), and latitude is clamped so no empty space
        shows above or below the map.
    """
    # Normalize degrees
    if longitude < -180 or longitude > 180:
        longitude = mod(longitude + 180, 360) - 180
    if bearing < -180 or bearing > 180:
        bearing = mod(bearing + 180, 360) - 180

    # Constrain zoom and shift center at low zoom levels
    min_zoom = log2(height / TILE_SIZE)
    if zoom <= min_zoom:
        logger.debug("Zoom %s below minimum %s for height %s", zoom, min_zoom, height)
        zoom = min_zoom
        latitude = 0.0
    else:
        # Eliminate white space above and below the map
        half_height_pixels = height / 2 / math.pow(2, zoom)
        min_latitude = _latitude_at(half_height_pixels)
        if latitude < min_latitude:
            latitude = min_latitude
        else:
            max_latitude = _latitude_at(TILE_SIZE - half_height_pixels)
            if latitude > max_latitude:
                latitude = max_latitude

    return ViewportProps(
        width=width,
        height=height,
        longitude=longitude,
        latitude=latitude,
        zoom=zoom,
        pitch=pitch,
        bearing=bearing,
    )
