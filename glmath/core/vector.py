"""Base class for 2D/3D vectors: named accessors and length/distance helpers."""

import math
from collections.abc import Mapping, MutableMapping
from typing import Self

from .common import is_array
from .math_array import MathArray
from .validators import check_number


def read_field(obj, name: str):
    """Read ``name`` from a mapping key or an attribute."""
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def write_field(obj, name: str, value: float) -> None:
    """Write ``name`` as a mapping key or an attribute."""
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


class Vector(MathArray):
    """Vector with ``x``/``y`` accessors. Element count is left to subclasses."""

    __slots__ = ()

    @property
    def x(self) -> float:
        return self._elements[0]

    @x.setter
    def x(self, value: float) -> None:
        self._elements[0] = float(check_number(value))

    @property
    def y(self) -> float:
        return self._elements[1]

    @y.setter
    def y(self, value: float) -> None:
        self._elements[1] = float(check_number(value))

    # Accessors

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def magnitude(self) -> float:
        return self.length()

    def length_squared(self) -> float:
        return sum(value * value for value in self._elements)

    def magnitude_squared(self) -> float:
        return self.length_squared()

    def distance(self, vector) -> float:
        return math.sqrt(self.distance_squared(vector))

    def distance_squared(self, vector) -> float:
        return sum((self._elements[i] - float(vector[i])) ** 2 for i in range(self.ELEMENTS))

    def dot(self, vector) -> float:
        return sum(self._elements[i] * float(vector[i]) for i in range(self.ELEMENTS))

    # Modifiers

    def normalize(self) -> Self:
        """Scale to unit length. A zero vector is left unchanged."""
        length = self.magnitude()
        if length != 0:
            for i in range(self.ELEMENTS):
                self._elements[i] /= length
        return self.check("normalize")

    def multiply(self, *vectors) -> Self:
        for vector in vectors:
            for i in range(self.ELEMENTS):
                self._elements[i] *= float(vector[i])
        return self.check("multiply")

    def divide(self, *vectors) -> Self:
        for vector in vectors:
            for i in range(self.ELEMENTS):
                self._elements[i] /= float(vector[i])
        return self.check("divide")

    def scale(self, scale) -> Self:
        """Multiply by a scalar, or element-wise by a vector."""
        if is_array(scale):
            return self.multiply(scale)
        return self.multiply_by_scalar(scale)

    def get_component(self, i: int) -> float:
        if not 0 <= i < self.ELEMENTS:
            raise IndexError(f"index {i} is out of range for {type(self).__name__}")
        return check_number(self._elements[i])

    def set_component(self, i: int, value: float) -> Self:
        if not 0 <= i < self.ELEMENTS:
            raise IndexError(f"index {i} is out of range for {type(self).__name__}")
        self._elements[i] = float(check_number(value))
        return self.check("set_component")

    # three.js compatibility

    def add_vectors(self, a, b) -> Self:
        return self.copy(a).add(b)

    def sub_vectors(self, a, b) -> Self:
        return self.copy(a).subtract(b)

    def multiply_vectors(self, a, b) -> Self:
        return self.copy(a).multiply(b)

    def add_scaled_vector(self, a, b: float) -> Self:
        return self.add(type(self)(a).multiply_scalar(b))
