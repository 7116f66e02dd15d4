"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vectors import Vec2, Vec3

__all__ = ["AABB"]


def _as_vec3(value: Vec2 | Vec3) -> Vec3:
    if isinstance(value, Vec3):
        return value
    if isinstance(value, Vec2):
        return Vec3.from_vec2(value)
    raise TypeError(f"expected Vec2 or Vec3, got {type(value).__name__}")


@dataclass(eq=False)
class AABB:
    """A box spanned by ``min`` and ``max``; Vec2 corners get a zero z."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def __post_init__(self) -> None:
        self.min = _as_vec3(self.min)
        self.max = _as_vec3(self.max)

    def intersects(self, other: AABB) -> bool:
        """True if the two boxes overlap strictly on every axis."""
        return (self.max > other.min and self.min < other.max) or (
            self.min > other.max and self.max < other.min
        )

    def contains(self, point: Vec2 | Vec3) -> bool:
        """True if ``point`` lies strictly inside the box."""
        p = _as_vec3(point)
        return p > self.min and p < self.max

    def center(self) -> Vec3:
        """Half of ``min - max``."""
        return (self.min - self.max) * 0.5

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: AABB) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.max < other.min

    def __gt__(self, other: AABB) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.min > other.max