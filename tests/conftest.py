"""Test configuration for glmath tests."""

import jax
import pytest

from glmath.core.config import reset_config


def pytest_generate_tests(metafunc):
    """Run each kernel test with JIT enabled and disabled."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"], indirect=True)


@pytest.fixture
def jit_mode(request):
    """Set JAX JIT compilation mode."""
    jax.config.update("jax_disable_jit", request.param == "no_jit")
    yield request.param
    jax.config.update("jax_disable_jit", False)


@pytest.fixture(autouse=True)
def default_config():
    """Start and finish every test with the default numeric configuration."""
    reset_config()
    yield
    reset_config()
