"""Two-element vector container."""

import math
from typing import Self

from . import vec2
from .common import is_array
from .config import get_config
from .primitives import to_buffer
from .validators import check_number, check_vector
from .vector import Vector, read_field, write_field


class Vector2(Vector):
    """Two-element vector, built from ``(x, y)`` or from a single array."""

    __slots__ = ()

    ELEMENTS = 2

    def __init__(self, x=0.0, y: float = 0.0) -> None:
        super().__init__()
        if is_array(x):
            self.copy(x)
        else:
            if get_config().debug_checks:
                check_number(x)
                check_number(y)
            self._elements[0] = float(x)
            self._elements[1] = float(y)

    def set(self, x: float, y: float) -> Self:
        self._elements[0] = float(x)
        self._elements[1] = float(y)
        return self.check("set")

    def copy(self, array) -> Self:
        self._elements[0] = float(array[0])
        self._elements[1] = float(array[1])
        return self.check("copy")

    def from_object(self, obj) -> Self:
        x, y = read_field(obj, "x"), read_field(obj, "y")
        if get_config().debug_checks:
            check_number(x)
            check_number(y)
        self._elements[0] = float(x)
        self._elements[1] = float(y)
        return self.check("from_object")

    def to_object(self, obj):
        write_field(obj, "x", self._elements[0])
        write_field(obj, "y", self._elements[1])
        return obj

    # Accessors

    def horizontal_angle(self) -> float:
        return math.atan2(self._elements[1], self._elements[0])

    def vertical_angle(self) -> float:
        return math.atan2(self._elements[0], self._elements[1])

    # Transforms

    def transform(self, matrix4) -> Self:
        return self.transform_as_point(matrix4)

    def transform_as_point(self, matrix4) -> Self:
        """Transform as a point (z = 0, w = 1). Translation applies."""
        check_vector(matrix4, 16, "Vector2.transform_as_point")
        self._assign(vec2.transform_mat4(to_buffer(self), to_buffer(matrix4)))
        return self.check("transform_as_point")

    def transform_as_vector(self, matrix4) -> Self:
        """Transform as a direction (z = 0, w = 0). Translation is ignored."""
        check_vector(matrix4, 16, "Vector2.transform_as_vector")
        self._assign(vec2.transform_mat4_as_vector(to_buffer(self), to_buffer(matrix4)))
        return self.check("transform_as_vector")

    def transform_by_matrix3(self, matrix3) -> Self:
        check_vector(matrix3, 9, "Vector2.transform_by_matrix3")
        self._assign(vec2.transform_mat3(to_buffer(self), to_buffer(matrix3)))
        return self.check("transform_by_matrix3")

    def transform_by_matrix2x3(self, matrix2x3) -> Self:
        check_vector(matrix2x3, 6, "Vector2.transform_by_matrix2x3")
        self._assign(vec2.transform_mat2d(to_buffer(self), to_buffer(matrix2x3)))
        return self.check("transform_by_matrix2x3")

    def transform_by_matrix2(self, matrix2) -> Self:
        check_vector(matrix2, 4, "Vector2.transform_by_matrix2")
        self._assign(vec2.transform_mat2(to_buffer(self), to_buffer(matrix2)))
        return self.check("transform_by_matrix2")
