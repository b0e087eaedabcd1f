"""
Base class for fixed-length numeric containers.

Concrete types supply ``ELEMENTS`` and the ``copy``/``from_object``/``to_object``
hooks. Every mutator changes the container in place, returns ``self`` so calls
can be chained, and finishes with ``check``. When ``debug_checks`` is enabled,
``check`` raises on the first mutation that leaves a non-finite value behind.
Otherwise NaN and infinity propagate silently and no validation cost is paid.
"""

import math
from abc import abstractmethod
from collections.abc import Sequence
from typing import Self

import jax.numpy as jnp

from .common import equals as scalar_equals
from .common import format_value, is_array
from .config import MathConfig, get_config
from .errors import ConstructionError, ValidationError
from .validators import deprecated, is_finite_number


class MathArray(Sequence):
    """Fixed-length sequence of doubles with in-place arithmetic and validation."""

    __slots__ = ("_elements",)

    @property
    @abstractmethod
    def ELEMENTS(self) -> int:
        """Number of values held by this container type."""

    def __init__(self) -> None:
        self._elements = [0.0] * self.ELEMENTS

    @abstractmethod
    def copy(self, array) -> Self:
        """Overwrite every value from ``array``."""

    @abstractmethod
    def from_object(self, obj) -> Self:
        """Overwrite every value from named fields of ``obj``."""

    @abstractmethod
    def to_object(self, obj):
        """Write every value into named fields of ``obj`` and return it."""

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index: int, value) -> None:
        self._elements[index] = float(value)

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other) -> bool:
        if not is_array(other):
            return NotImplemented
        return self.exact_equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return self.to_string()

    __str__ = __repr__

    def _assign(self, values) -> None:
        # Write back a kernel result
        for i, value in enumerate(values.tolist() if hasattr(values, "tolist") else values):
            self._elements[i] = float(value)

    # Common methods

    def clone(self) -> Self:
        """Return a new container of the same type holding the same values."""
        try:
            instance = type(self)()
        except TypeError as exc:
            raise ConstructionError(
                f"{type(self).__name__} cannot be default-constructed for cloning"
            ) from exc
        return instance.copy(self)

    def set_from(self, array_or_object) -> Self:
        """Overwrite values from an array or from an object with named fields."""
        if is_array(array_or_object):
            return self.copy(array_or_object)
        return self.from_object(array_or_object)

    def from_array(self, array, offset: int = 0) -> Self:
        """
        Copy ``ELEMENTS`` values from ``array`` starting at ``offset``.

        Positions past the end of ``array`` read as NaN, which ``check``
        reports when debug checks are enabled.
        """
        for i in range(self.ELEMENTS):
            j = i + offset
            self._elements[i] = float(array[j]) if j < len(array) else math.nan
        return self.check("from_array")

    def to(self, target):
        """Write values into an array or an object with named fields and return it."""
        if target is self:
            return self
        if is_array(target):
            return self.to_array(target)
        return self.to_object(target)

    def to_target(self, target):
        return self.to(target) if target is not None else self

    def to_array(self, array=None, offset: int = 0):
        """
        Write ``ELEMENTS`` values into ``array`` starting at ``offset``.

        Parameters
        ----------
        array : list[float], optional
            Target buffer. A new list is created when omitted; a list that is
            too short is padded.
        offset : int
            First index written in ``array``.

        Returns
        -------
        array : list[float]
            The target buffer.
        """
        if array is None:
            array = []
        if isinstance(array, list) and len(array) < offset + self.ELEMENTS:
            array.extend([0.0] * (offset + self.ELEMENTS - len(array)))
        for i in range(self.ELEMENTS):
            array[offset + i] = self._elements[i]
        return array

    def to_float32_array(self):
        deprecated(f"{type(self).__name__}.to_float32_array", "2.0")
        return jnp.asarray(self._elements, dtype=jnp.float32)

    def to_string(self) -> str:
        return self.format_string(get_config())

    def format_string(self, opts: MathConfig) -> str:
        """Render as ``[v0, v1, ...]``, prefixed with the type name when ``opts.print_types`` is set."""
        values = ", ".join(format_value(value, opts) for value in self._elements)
        prefix = type(self).__name__ if opts.print_types else ""
        return f"{prefix}[{values}]"

    def equals(self, array) -> bool:
        """Approximate equality using the configured epsilon, relative to magnitude."""
        if array is None or not is_array(array) or len(self) != len(array):
            return False
        return all(scalar_equals(self._elements[i], array[i]) for i in range(self.ELEMENTS))

    def exact_equals(self, array) -> bool:
        """Element-wise equality without tolerance."""
        if array is None or not is_array(array) or len(self) != len(array):
            return False
        return all(self._elements[i] == array[i] for i in range(self.ELEMENTS))

    # Modifiers

    def negate(self) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = -self._elements[i]
        return self.check("negate")

    def lerp(self, a, b, t: float | None = None) -> Self:
        """
        Linearly interpolate between ``a`` and ``b``.

        With two arguments, ``lerp(b, t)`` interpolates from the current values.
        """
        if t is None:
            a, b, t = self, a, b
        for i in range(self.ELEMENTS):
            self._elements[i] = float((1 - t) * a[i] + t * b[i])
        return self.check("lerp")

    def min(self, vector) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = min(float(vector[i]), self._elements[i])
        return self.check("min")

    def max(self, vector) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = max(float(vector[i]), self._elements[i])
        return self.check("max")

    def clamp(self, min_vector, max_vector) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = min(max(self._elements[i], float(min_vector[i])), float(max_vector[i]))
        return self.check("clamp")

    def add(self, *vectors) -> Self:
        for vector in vectors:
            for i in range(self.ELEMENTS):
                self._elements[i] += float(vector[i])
        return self.check("add")

    def subtract(self, *vectors) -> Self:
        for vector in vectors:
            for i in range(self.ELEMENTS):
                self._elements[i] -= float(vector[i])
        return self.check("subtract")

    def multiply_by_scalar(self, scalar: float) -> Self:
        """Multiply every value by ``scalar``."""
        for i in range(self.ELEMENTS):
            self._elements[i] *= float(scalar)
        return self.check("multiply_by_scalar")

    # Debug checks

    def check(self, operation: str = "") -> Self:
        """Raise ``ValidationError`` in debug mode if the container holds invalid values."""
        if get_config().debug_checks and not self.validate():
            where = f"{type(self).__name__}.{operation}" if operation else type(self).__name__
            raise ValidationError(f"glmath: {where} some fields set to invalid numbers {self._elements}")
        return self

    def validate(self) -> bool:
        """Return False if the length is wrong or any value is not finite."""
        if len(self._elements) != self.ELEMENTS:
            return False
        return all(is_finite_number(value) for value in self._elements)

    # three.js compatibility

    def sub(self, a) -> Self:
        return self.subtract(a)

    def set_scalar(self, a: float) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = float(a)
        return self.check("set_scalar")

    def add_scalar(self, a: float) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] += float(a)
        return self.check("add_scalar")

    def sub_scalar(self, a: float) -> Self:
        return self.add_scalar(-a)

    def multiply_scalar(self, scalar: float) -> Self:
        return self.multiply_by_scalar(scalar)

    def divide_scalar(self, a: float) -> Self:
        return self.multiply_by_scalar(1 / a)

    def clamp_scalar(self, min_value: float, max_value: float) -> Self:
        for i in range(self.ELEMENTS):
            self._elements[i] = min(max(self._elements[i], float(min_value)), float(max_value))
        return self.check("clamp_scalar")

    @property
    def elements(self) -> Self:
        return self
