"""Quaternions for representing and composing 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .functions import rsqrt
from .vectors import Vec3, Vec4

__all__ = ["Quaternion", "select"]

_FIELDS = ("x", "y", "z", "w")


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_index(index: int) -> str:
    if not isinstance(index, int) or not 0 <= index < 4:
        raise IndexError(f"quaternion index out of range: {index!r}")
    return _FIELDS[index]


@dataclass(slots=True)
class Quaternion:
    """A mutable quaternion ``x*i + y*j + z*k + w``; defaults to the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        """The rotation that leaves every vector unchanged."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_vec4(cls, vector: Vec4) -> Quaternion:
        """Build a quaternion from the components of a 4D vector."""
        return cls(vector.x, vector.y, vector.z, vector.w)

    @classmethod
    def from_scalar(cls, scalar: float) -> Quaternion:
        """Build a quaternion with every component set to ``scalar``."""
        return cls(scalar, scalar, scalar, scalar)

    @classmethod
    def from_xyz(cls, xyz: Vec3, w: float) -> Quaternion:
        """Build a quaternion from a vector part and a scalar part."""
        return cls(xyz.x, xyz.y, xyz.z, w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def xyz(self) -> Vec3:
        """The vector part."""
        return Vec3(self.x, self.y, self.z)

    def set_xyz(self, vector: Vec3) -> Quaternion:
        """Replace the vector part; returns ``self``."""
        self.x = vector.x
        self.y = vector.y
        self.z = vector.z
        return self

    def __getitem__(self, index: int) -> float:
        return getattr(self, _check_index(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _check_index(index), value)

    def axis(self) -> Vec3:
        """Rotation axis; the x axis when the rotation is (nearly) none."""
        x = 1.0 - self.w * self.w
        if x < 0.0000001:
            return Vec3.x_axis()
        return self.xyz() / (x * x)

    def to_euler_angles(self) -> Vec3:
        """Euler angles in radians."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Vec3(
            math.atan2(2 * x * w - 2 * y * z, 1 - 2 * x * x - 2 * z * z),
            math.atan2(2 * y * w - 2 * x * z, 1 - 2 * y * y - 2 * z * z),
            math.asin(2 * x * y + 2 * z * w),
        )

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            x, y, z, w = self.x, self.y, self.z, self.w
            return Quaternion(
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y + y * other.w + z * other.x - x * other.z,
                w * other.z + z * other.w + x * other.y - y * other.x,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if _is_scalar(other):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return Quaternion(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def _assign(self, other: Quaternion) -> Quaternion:
        self.x, self.y, self.z, self.w = other.x, other.y, other.z, other.w
        return self

    def __iadd__(self, other):
        result = self.__add__(other)
        return NotImplemented if result is NotImplemented else self._assign(result)

    def __isub__(self, other):
        result = self.__sub__(other)
        return NotImplemented if result is NotImplemented else self._assign(result)

    def __imul__(self, other):
        result = self.__mul__(other)
        return NotImplemented if result is NotImplemented else self._assign(result)

    def __itruediv__(self, scalar):
        result = self.__truediv__(scalar)
        return NotImplemented if result is NotImplemented else self._assign(result)

    def norm(self) -> float:
        """Sum of the squared components."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        """Euclidean length of the four components."""
        return math.sqrt(self.norm())

    def normalize(self) -> Quaternion:
        """Return a unit quaternion; raises ZeroDivisionError for zero."""
        return self * rsqrt(self.norm())

    def normalize_est(self) -> Quaternion:
        """Estimated normalisation; same result as :meth:`normalize`."""
        return self * rsqrt(self.norm())

    @classmethod
    def rotation_between(cls, unit_vec0: Vec3, unit_vec1: Vec3) -> Quaternion:
        """Rotation taking one unit vector onto another."""
        cos_half_angle_x2 = math.sqrt(2.0 * (1.0 + unit_vec0.dot(unit_vec1)))
        recip = 1.0 / cos_half_angle_x2
        return cls.from_xyz(unit_vec0.cross(unit_vec1) * recip, cos_half_angle_x2 * 0.5)

    @classmethod
    def rotation(cls, radians: float, unit_vec: Vec3) -> Quaternion:
        """Rotation of ``radians`` about a unit axis."""
        angle = radians * 0.5
        return cls.from_xyz(unit_vec * math.sin(angle), math.cos(angle))

    @classmethod
    def rotation_x(cls, radians: float) -> Quaternion:
        angle = radians * 0.5
        return cls(math.sin(angle), 0.0, 0.0, math.cos(angle))

    @classmethod
    def rotation_y(cls, radians: float) -> Quaternion:
        angle = radians * 0.5
        return cls(0.0, math.sin(angle), 0.0, math.cos(angle))

    @classmethod
    def rotation_z(cls, radians: float) -> Quaternion:
        angle = radians * 0.5
        return cls(0.0, 0.0, math.sin(angle), math.cos(angle))

    @staticmethod
    def rotate(quat: Quaternion, vec: Vec3) -> Vec3:
        """Rotate ``vec`` by the unit quaternion ``quat``."""
        tmp_x = quat.w * vec.x + quat.y * vec.z - quat.z * vec.y
        tmp_y = quat.w * vec.y + quat.z * vec.x - quat.x * vec.z
        tmp_z = quat.w * vec.z + quat.x * vec.y - quat.y * vec.x
        tmp_w = quat.x * vec.x + quat.y * vec.y + quat.z * vec.z
        return Vec3(
            tmp_w * quat.x + tmp_x * quat.w - tmp_y * quat.z + tmp_z * quat.y,
            tmp_w * quat.y + tmp_y * quat.w - tmp_z * quat.x + tmp_x * quat.z,
            tmp_w * quat.z + tmp_z * quat.w - tmp_x * quat.y + tmp_y * quat.x,
        )

    def conjugate(self) -> Quaternion:
        """Negate the vector part."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w


def select(quat0: Quaternion, quat1: Quaternion, select1: bool) -> Quaternion:
    """Return a copy of ``quat1`` if ``select1`` is true, else of ``quat0``."""
    chosen = quat1 if select1 else quat0
    return Quaternion(chosen.x, chosen.y, chosen.z, chosen.w)