"""Two-, three- and four-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

__all__ = ["Vec2", "Vec3", "Vec4", "IVec2"]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass(slots=True)
class Vec2:
    """A mutable 2D float vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_vec3(cls, vector: Vec3) -> Vec2:
        """Take the x and y components of a 3D vector."""
        return cls(vector.x, vector.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if _is_scalar(other):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if _is_scalar(other):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x /= other.x
        self.y /= other.y
        return self

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalise(self) -> Vec2:
        """Return a unit vector in the same direction."""
        length = self.magnitude()
        return Vec2(self.x / length, self.y / length)

    def distance(self, other: Vec2) -> float:
        """Distance between two points."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def __str__(self) -> str:
        return f"vec2: ({_fmt(self.x)}, {_fmt(self.y)})"


@dataclass(slots=True)
class Vec3:
    """A mutable 3D float vector with scalar and component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vec2(cls, vector: Vec2) -> Vec3:
        """Extend a 2D vector with a zero z component."""
        return cls(vector.x, vector.y, 0.0)

    @classmethod
    def up(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> Vec3:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def left(cls) -> Vec3:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls) -> Vec3:
        return cls(1.0, 1.0, 0.0)

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def x_axis(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def _components(self, other) -> tuple[float, float, float] | None:
        if isinstance(other, Vec3):
            return other.x, other.y, other.z
        if _is_scalar(other):
            return other, other, other
        return None

    def __add__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        return Vec3(self.x + c[0], self.y + c[1], self.z + c[2])

    def __sub__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        return Vec3(self.x - c[0], self.y - c[1], self.z - c[2])

    def __mul__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        return Vec3(self.x * c[0], self.y * c[1], self.z * c[2])

    def __truediv__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        return Vec3(self.x / c[0], self.y / c[1], self.z / c[2])

    def __iadd__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        self.x += c[0]
        self.y += c[1]
        self.z += c[2]
        return self

    def __isub__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        self.x -= c[0]
        self.y -= c[1]
        self.z -= c[2]
        return self

    def __imul__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        self.x *= c[0]
        self.y *= c[1]
        self.z *= c[2]
        return self

    def __itruediv__(self, other):
        c = self._components(other)
        if c is None:
            return NotImplemented
        self.x /= c[0]
        self.y /= c[1]
        self.z /= c[2]
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __lt__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __le__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def __gt__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x > other.x and self.y > other.y and self.z > other.z

    def __ge__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction."""
        length = self.magnitude()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def distance(self, other: Vec3) -> float:
        """Distance between two points."""
        a = self.x - other.x
        b = self.y - other.y
        c = self.z - other.z
        return math.sqrt(a * a + b * b + c * c)

    def __str__(self) -> str:
        return f"vec3: ({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


@dataclass(slots=True)
class Vec4:
    """A mutable 4D float vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __truediv__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)

    def __iadd__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def __imul__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        self.w *= other.w
        return self

    def __itruediv__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x /= other.x
        self.y /= other.y
        self.z /= other.z
        self.w /= other.w
        return self

    def __str__(self) -> str:
        return f"vec4: ({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}, {_fmt(self.w)})"


@dataclass(slots=True)
class IVec2:
    """A mutable 2D integer vector; division truncates toward zero."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))

    def __iadd__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        self.x = _trunc_div(self.x, other.x)
        self.y = _trunc_div(self.y, other.y)
        return self

    def __str__(self) -> str:
        return f"tvec2: ({self.x}, {self.y})"