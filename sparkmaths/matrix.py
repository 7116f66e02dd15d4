"""A 4x4 column-major float matrix."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .functions import to_radians
from .vectors import Vec3, Vec4

if TYPE_CHECKING:
    from .quaternion import Quaternion

__all__ = ["Mat4"]


def _fmt(value: float) -> str:
    return f"{value:g}"


class Mat4:
    """A 4x4 matrix stored column-major: element ``row + column * 4``."""

    __slots__ = ("elements",)

    def __init__(self, diagonal: float = 0.0) -> None:
        self.elements: list[float] = [0.0] * 16
        self.elements[::5] = [float(diagonal)] * 4

    @classmethod
    def identity(cls) -> Mat4:
        return cls(1.0)

    def _copy(self) -> Mat4:
        result = Mat4()
        result.elements = list(self.elements)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat4(elements={self.elements!r})"

    @staticmethod
    def _check_column(index: int) -> None:
        if not isinstance(index, int) or not 0 <= index < 4:
            raise IndexError(f"column index out of range: {index!r}")

    def column(self, index: int) -> Vec4:
        """Return a copy of column ``index``."""
        self._check_column(index)
        return Vec4(*self.elements[index * 4 : index * 4 + 4])

    def set_column(self, index: int, vector: Vec4) -> None:
        """Replace column ``index`` with the components of ``vector``."""
        self._check_column(index)
        self.elements[index * 4 : index * 4 + 4] = [vector.x, vector.y, vector.z, vector.w]

    def multiply(self, other):
        """Multiply by a matrix in place (returns ``self``), or transform a vector.

        A Vec3 is treated as a point (w = 1); a Vec4 is transformed as is.
        """
        if isinstance(other, Mat4):
            a, b = self.elements, other.elements
            self.elements = [
                sum(a[x + e * 4] * b[e + y * 4] for e in range(4))
                for y in range(4)
                for x in range(4)
            ]
            return self
        c0, c1, c2, c3 = (self.column(i) for i in range(4))
        if isinstance(other, Vec3):
            return Vec3(
                c0.x * other.x + c1.x * other.y + c2.x * other.z + c3.x,
                c0.y * other.x + c1.y * other.y + c2.y * other.z + c3.y,
                c0.z * other.x + c1.z * other.y + c2.z * other.z + c3.z,
            )
        if isinstance(other, Vec4):
            return Vec4(
                c0.x * other.x + c1.x * other.y + c2.x * other.z + c3.x * other.w,
                c0.y * other.x + c1.y * other.y + c2.y * other.z + c3.y * other.w,
                c0.z * other.x + c1.z * other.y + c2.z * other.z + c3.z * other.w,
                c0.w * other.x + c1.w * other.y + c2.w * other.z + c3.w * other.w,
            )
        raise TypeError(f"cannot multiply Mat4 by {type(other).__name__}")

    def __mul__(self, other):
        if isinstance(other, Mat4):
            return self._copy().multiply(other)
        if isinstance(other, (Vec3, Vec4)):
            return self.multiply(other)
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.multiply(other)

    def invert(self) -> Mat4:
        """Invert in place and return ``self``.

        Raises ZeroDivisionError for a singular matrix, leaving it unchanged.
        """
        e = self.elements
        t = [0.0] * 16
        t[0] = (e[5] * e[10] * e[15] - e[5] * e[11] * e[14] - e[9] * e[6] * e[15]
                + e[9] * e[7] * e[14] + e[13] * e[6] * e[11] - e[13] * e[7] * e[10])
        t[4] = (-e[4] * e[10] * e[15] + e[4] * e[11] * e[14] + e[8] * e[6] * e[15]
                - e[8] * e[7] * e[14] - e[12] * e[6] * e[11] + e[12] * e[7] * e[10])
        t[8] = (e[4] * e[9] * e[15] - e[4] * e[11] * e[13] - e[8] * e[5] * e[15]
                + e[8] * e[7] * e[13] + e[12] * e[5] * e[11] - e[12] * e[7] * e[9])
        t[12] = (-e[4] * e[9] * e[14] + e[4] * e[10] * e[13] + e[8] * e[5] * e[14]
                 - e[8] * e[6] * e[13] - e[12] * e[5] * e[10] + e[12] * e[6] * e[9])
        t[1] = (-e[1] * e[10] * e[15] + e[1] * e[11] * e[14] + e[9] * e[2] * e[15]
                - e[9] * e[3] * e[14] - e[13] * e[2] * e[11] + e[13] * e[3] * e[10])
        t[5] = (e[0] * e[10] * e[15] - e[0] * e[11] * e[14] - e[8] * e[2] * e[15]
                + e[8] * e[3] * e[14] + e[12] * e[2] * e[11] - e[12] * e[3] * e[10])
        t[9] = (-e[0] * e[9] * e[15] + e[0] * e[11] * e[13] + e[8] * e[1] * e[15]
                - e[8] * e[3] * e[13] - e[12] * e[1] * e[11] + e[12] * e[3] * e[9])
        t[13] = (e[0] * e[9] * e[14] - e[0] * e[10] * e[13] - e[8] * e[1] * e[14]
                 + e[8] * e[2] * e[13] + e[12] * e[1] * e[10] - e[12] * e[2] * e[9])
        t[2] = (e[1] * e[6] * e[15] - e[1] * e[7] * e[14] - e[5] * e[2] * e[15]
                + e[5] * e[3] * e[14] + e[13] * e[2] * e[7] - e[13] * e[3] * e[6])
        t[6] = (-e[0] * e[6] * e[15] + e[0] * e[7] * e[14] + e[4] * e[2] * e[15]
                - e[4] * e[3] * e[14] - e[12] * e[2] * e[7] + e[12] * e[3] * e[6])
        t[10] = (e[0] * e[5] * e[15] - e[0] * e[7] * e[13] - e[4] * e[1] * e[15]
                 + e[4] * e[3] * e[13] + e[12] * e[1] * e[7] - e[12] * e[3] * e[5])
        t[14] = (-e[0] * e[5] * e[14] + e[0] * e[6] * e[13] + e[4] * e[1] * e[14]
                 - e[4] * e[2] * e[13] - e[12] * e[1] * e[6] + e[12] * e[2] * e[5])
        t[3] = (-e[1] * e[6] * e[11] + e[1] * e[7] * e[10] + e[5] * e[2] * e[11]
                - e[5] * e[3] * e[10] - e[9] * e[2] * e[7] + e[9] * e[3] * e[6])
        t[7] = (e[0] * e[6] * e[11] - e[0] * e[7] * e[10] - e[4] * e[2] * e[11]
                + e[4] * e[3] * e[10] + e[8] * e[2] * e[7] - e[8] * e[3] * e[6])
        t[11] = (-e[0] * e[5] * e[11] + e[0] * e[7] * e[9] + e[4] * e[1] * e[11]
                 - e[4] * e[3] * e[9] - e[8] * e[1] * e[7] + e[8] * e[3] * e[5])
        t[15] = (e[0] * e[5] * e[10] - e[0] * e[6] * e[9] - e[4] * e[1] * e[10]
                 + e[4] * e[2] * e[9] + e[8] * e[1] * e[6] - e[8] * e[2] * e[5])

        determinant = e[0] * t[0] + e[1] * t[4] + e[2] * t[8] + e[3] * t[12]
        if determinant == 0:
            raise ZeroDivisionError("matrix is singular")
        inverse_det = 1.0 / determinant
        self.elements = [value * inverse_det for value in t]
        return self

    def inverse(self) -> Mat4:
        """Return the inverse as a new matrix."""
        return self._copy().invert()

    @classmethod
    def orthographic(cls, left, right, bottom, top, near, far) -> Mat4:
        """Orthographic projection."""
        result = cls(1.0)
        e = result.elements
        e[0] = 2.0 / (right - left)
        e[5] = 2.0 / (top - bottom)
        e[10] = 2.0 / (near - far)
        e[12] = (left + right) / (left - right)
        e[13] = (bottom + top) / (bottom - top)
        e[14] = (far + near) / (far - near)
        return result

    @classmethod
    def perspective(cls, fov, aspect_ratio, near, far) -> Mat4:
        """Perspective projection; ``fov`` is in degrees."""
        result = cls(1.0)
        q = 1.0 / math.tan(to_radians(0.5 * fov))
        e = result.elements
        e[0] = q / aspect_ratio
        e[5] = q
        e[10] = (near + far) / (near - far)
        e[11] = -1.0
        e[14] = (2.0 * near * far) / (near - far)
        return result

    @classmethod
    def translate(cls, translation: Vec3) -> Mat4:
        result = cls(1.0)
        result.elements[12:15] = [translation.x, translation.y, translation.z]
        return result

    @classmethod
    def rotate(cls, angle: float, axis: Vec3) -> Mat4:
        """Rotation of ``angle`` degrees about ``axis``."""
        result = cls(1.0)
        r = to_radians(angle)
        c = math.cos(r)
        s = math.sin(r)
        omc = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z
        e = result.elements
        e[0] = x * omc + c
        e[1] = y * x * omc + z * s
        e[2] = x * z * omc - y * s
        e[4] = x * y * omc - z * s
        e[5] = y * omc + c
        e[6] = y * z * omc + x * s
        e[8] = x * z * omc + y * s
        e[9] = y * z * omc - x * s
        e[10] = z * omc + c
        return result

    @classmethod
    def rotate_quaternion(cls, quat: Quaternion) -> Mat4:
        """Rotation matrix equivalent to a unit quaternion."""
        result = cls.identity()
        qx, qy, qz, qw = quat.x, quat.y, quat.z, quat.w
        qx2, qy2, qz2 = qx + qx, qy + qy, qz + qz
        qxqx2 = qx * qx2
        qxqy2 = qx * qy2
        qxqz2 = qx * qz2
        qxqw2 = qw * qx2
        qyqy2 = qy * qy2
        qyqz2 = qy * qz2
        qyqw2 = qw * qy2
        qzqz2 = qz * qz2
        qzqw2 = qw * qz2
        result.set_column(0, Vec4(1.0 - qyqy2 - qzqz2, qxqy2 + qzqw2, qxqz2 - qyqw2, 0.0))
        result.set_column(1, Vec4(qxqy2 - qzqw2, 1.0 - qxqx2 - qzqz2, qyqz2 + qxqw2, 0.0))
        result.set_column(2, Vec4(qxqz2 + qyqw2, qyqz2 - qxqw2, 1.0 - qxqx2 - qyqy2, 0.0))
        return result

    @classmethod
    def scale(cls, scale: Vec3) -> Mat4:
        result = cls(1.0)
        result.elements[0] = scale.x
        result.elements[5] = scale.y
        result.elements[10] = scale.z
        return result

    def __str__(self) -> str:
        rows = (
            "(" + ", ".join(_fmt(self.elements[row + col * 4]) for col in range(4)) + ")"
            for row in range(4)
        )
        return "mat4: " + ", ".join(rows)