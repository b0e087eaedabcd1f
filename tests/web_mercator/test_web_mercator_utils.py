"""Tests for web-mercator projection helpers."""

import jax
import jax.numpy as jnp
import pytest

from glmath.web_mercator.utils import TILE_SIZE, lng_lat_to_world, log2, mod, world_to_lng_lat

ATOL = 1e-9


def test_mod() -> None:
    """Test remainder takes the sign of the divisor."""
    assert mod(370.0, 360.0) == 10.0
    assert mod(-20.0, 360.0) == 340.0
    assert mod(360.0, 360.0) == 0.0


def test_log2() -> None:
    """Test base-2 logarithm."""
    assert log2(1.0) == 0.0
    assert log2(1024.0 / TILE_SIZE) == 1.0
    assert log2(0.5) == -1.0


def test_lng_lat_to_world(jit_mode: str) -> None:
    """Test projection onto the zoom 0 tile."""
    func = jax.jit(lng_lat_to_world) if jit_mode == "jit" else lng_lat_to_world

    # Standard case 1 - null island is the tile center
    assert jnp.allclose(func(jnp.array([0.0, 0.0])), jnp.array([256.0, 256.0]), atol=ATOL)

    # Standard case 2 - antimeridian maps to tile edges
    assert jnp.allclose(func(jnp.array([-180.0, 0.0]))[0], 0.0, atol=ATOL)
    assert jnp.allclose(func(jnp.array([180.0, 0.0]))[0], TILE_SIZE, atol=ATOL)

    # Standard case 3 - north is up
    assert func(jnp.array([0.0, 45.0]))[1] > 256.0


def test_world_to_lng_lat(jit_mode: str) -> None:
    """Test unprojection inverts projection."""
    func = jax.jit(world_to_lng_lat) if jit_mode == "jit" else world_to_lng_lat

    assert jnp.allclose(func(jnp.array([256.0, 256.0])), jnp.array([0.0, 0.0]), atol=ATOL)

    lng_lat = jnp.array([-73.98, 40.75])
    assert jnp.allclose(func(lng_lat_to_world(lng_lat)), lng_lat, atol=ATOL)

    # Vectorized over many points
    points = jnp.array([[10.0, 20.0], [-120.0, -60.0], [179.0, 85.0]])
    world = jax.vmap(lng_lat_to_world)(points)
    assert jnp.allclose(jax.vmap(func)(world), points, atol=ATOL)


@pytest.mark.parametrize("latitude", [-85.0, 0.0, 85.0])
def test_round_trip_latitudes(latitude: float) -> None:
    """Test high latitudes survive the round trip."""
    lng_lat = jnp.array([0.0, latitude])
    assert jnp.allclose(world_to_lng_lat(lng_lat_to_world(lng_lat)), lng_lat, atol=ATOL)
