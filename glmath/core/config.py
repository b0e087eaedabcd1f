"""Process-wide numeric configuration for equality, validation and formatting."""

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from .errors import UnknownOptionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class MathConfig:
    """Configuration for numeric tolerance, debug validation and display."""

    epsilon: float = 1e-12
    """Relative/absolute tolerance used by approximate equality and display rounding."""

    debug_checks: bool = False
    """Validate containers after every mutation and raise on non-finite values."""

    precision: int = 4
    """Significant digits used when formatting values."""

    print_types: bool = False
    """Prefix formatted containers with their class name."""

    print_degrees: bool = False
    """Display angles in degrees rather than radians."""

    print_row_major: bool = True
    """Display matrices row by row. Storage is always column-major."""


OPTION_NAMES = frozenset(field.name for field in fields(MathConfig))

_current: ContextVar[MathConfig] = ContextVar("glmath_config", default=MathConfig())


def get_config() -> MathConfig:
    """Return the configuration snapshot active in the current context."""
    return _current.get()


def configure(options: Mapping[str, Any] | None = None, /, **overrides: Any) -> MathConfig:
    """
    Update the active configuration with known options only.

    Parameters
    ----------
    options : Mapping[str, Any], optional
        Partial configuration, e.g. ``{"debug_checks": True}``.
    **overrides : Any
        Same as ``options``, given as keyword arguments.

    Returns
    -------
    config : MathConfig
        The updated configuration snapshot.

    Raises
    ------
    UnknownOptionError
        If any key is not a ``MathConfig`` field. No option is applied.
    """
    changes = {**(options or {}), **overrides}
    unknown = sorted(key for key in changes if key not in OPTION_NAMES)
    if unknown:
        raise UnknownOptionError(f"Unknown configuration option(s): {', '.join(unknown)}")

    config = replace(_current.get(), **changes)
    _current.set(config)
    if changes:
        logger.debug("Configuration updated: %s", changes)
    return config


def reset_config() -> MathConfig:
    """Restore the default configuration in the current context."""
    config = MathConfig()
    _current.set(config)
    return config


@contextmanager
def override_config(**options: Any) -> Iterator[MathConfig]:
    """Temporarily apply configuration options, restoring the previous snapshot on exit."""
    unknown = sorted(key for key in options if key not in OPTION_NAMES)
    if unknown:
        raise UnknownOptionError(f"Unknown configuration option(s): {', '.join(unknown)}")

    token = _current.set(replace(_current.get(), **options))
    try:
        yield _current.get()
    finally:
        _current.reset(token)


def with_epsilon(epsilon: float, func: Callable[[], T] | None = None):
    """
    Run ``func`` with a temporary epsilon and return its result.

    Without ``func`` this returns a context manager applying the same epsilon.
    """
    if func is None:
        return override_config(epsilon=epsilon)
    with override_config(epsilon=epsilon):
        return func()
