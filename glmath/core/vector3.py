"""Three-element vector container."""

from typing import Self

from . import vec3
from .common import is_array
from .config import get_config
from .primitives import to_buffer
from .validators import check_number, check_vector
from .vector import Vector, read_field, write_field

ORIGIN = (0.0, 0.0, 0.0)


class Vector3(Vector):
    """
    Three-element vector.

    Built from three numbers, ``Vector3(1, 2, 3)``, or from a single array
    holding at least three values, ``Vector3([1, 2, 3])``. Transforms use the
    column-major matrix and scalar-last quaternion layout of ``glmath.core.matrix``.
    """

    __slots__ = ()

    ELEMENTS = 3

    def __init__(self, x=0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__()
        if is_array(x):
            self.copy(x)
        else:
            if get_config().debug_checks:
                check_number(x)
                check_number(y)
                check_number(z)
            self._elements[0] = float(x)
            self._elements[1] = float(y)
            self._elements[2] = float(z)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    def set(self, x: float, y: float, z: float) -> Self:
        self._elements[0] = float(x)
        self._elements[1] = float(y)
        self._elements[2] = float(z)
        return self.check("set")

    def copy(self, array) -> Self:
        self._elements[0] = float(array[0])
        self._elements[1] = float(array[1])
        self._elements[2] = float(array[2])
        return self.check("copy")

    def from_object(self, obj) -> Self:
        """Copy values from an ``{x, y, z}`` mapping or an object with those attributes."""
        x, y, z = read_field(obj, "x"), read_field(obj, "y"), read_field(obj, "z")
        if get_config().debug_checks:
            check_number(x)
            check_number(y)
            check_number(z)
        self._elements[0] = float(x)
        self._elements[1] = float(y)
        self._elements[2] = float(z)
        return self.check("from_object")

    def to_object(self, obj):
        write_field(obj, "x", self._elements[0])
        write_field(obj, "y", self._elements[1])
        write_field(obj, "z", self._elements[2])
        return obj

    @property
    def z(self) -> float:
        return self._elements[2]

    @z.setter
    def z(self, value: float) -> None:
        self._elements[2] = float(check_number(value))

    # Accessors

    def angle(self, vector) -> float:
        """Unsigned angle in radians between this vector and ``vector``."""
        return float(vec3.angle(to_buffer(self), to_buffer(vector)))

    # Modifiers

    def cross(self, vector) -> Self:
        """Replace this vector with ``self x vector`` (right-handed)."""
        self._assign(vec3.cross(to_buffer(self), to_buffer(vector)))
        return self.check("cross")

    def rotate_x(self, *, radians: float, origin=ORIGIN) -> Self:
        self._assign(vec3.rotate_x(to_buffer(self), to_buffer(origin), radians))
        return self.check("rotate_x")

    def rotate_y(self, *, radians: float, origin=ORIGIN) -> Self:
        self._assign(vec3.rotate_y(to_buffer(self), to_buffer(origin), radians))
        return self.check("rotate_y")

    def rotate_z(self, *, radians: float, origin=ORIGIN) -> Self:
        self._assign(vec3.rotate_z(to_buffer(self), to_buffer(origin), radians))
        return self.check("rotate_z")

    # Transforms

    def transform(self, matrix4) -> Self:
        """Transform as a point (4th component is implicitly 1)."""
        return self.transform_as_point(matrix4)

    def transform_as_point(self, matrix4) -> Self:
        """Transform as a point (4th component is implicitly 1), translation applies."""
        check_vector(matrix4, 16, "Vector3.transform_as_point")
        self._assign(vec3.transform_mat4(to_buffer(self), to_buffer(matrix4)))
        return self.check("transform_as_point")

    def transform_as_vector(self, matrix4) -> Self:
        """Transform as a direction (4th component is implicitly 0), translation is ignored."""
        check_vector(matrix4, 16, "Vector3.transform_as_vector")
        self._assign(vec3.transform_mat4_as_vector(to_buffer(self), to_buffer(matrix4)))
        return self.check("transform_as_vector")

    def transform_by_matrix3(self, matrix3) -> Self:
        check_vector(matrix3, 9, "Vector3.transform_by_matrix3")
        self._assign(vec3.transform_mat3(to_buffer(self), to_buffer(matrix3)))
        return self.check("transform_by_matrix3")

    def transform_by_matrix2(self, matrix2) -> Self:
        """Transform x and y by a 2x2 matrix. z is preserved."""
        check_vector(matrix2, 4, "Vector3.transform_by_matrix2")
        self._assign(vec3.transform_mat2(to_buffer(self), to_buffer(matrix2)))
        return self.check("transform_by_matrix2")

    def transform_by_quaternion(self, quaternion) -> Self:
        check_vector(quaternion, 4, "Vector3.transform_by_quaternion")
        self._assign(vec3.transform_quat(to_buffer(self), to_buffer(quaternion)))
        return self.check("transform_by_quaternion")
