"""Web-mercator viewport helpers."""

from .utils import TILE_SIZE, lng_lat_to_world, log2, mod, world_to_lng_lat
from .viewport import ViewportProps, normalize_viewport_props

__all__ = [
    "TILE_SIZE",
    "ViewportProps",
    "lng_lat_to_world",
    "log2",
    "mod",
    "normalize_viewport_props",
    "world_to_lng_lat",
]
