"""Small linear-algebra types used by the rasteriser."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _recip(value: float) -> float:
    """Reciprocal with IEEE semantics: zero maps to a signed infinity."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float
    y: float

    def perp(self) -> Vec2:
        """Rotate a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)

    def perp_cc(self) -> Vec2:
        """Rotate a quarter turn clockwise."""
        return Vec2(self.y, -self.x)

    def transpose(self) -> Vec2:
        """Swap the two components."""
        return Vec2(self.y, self.x)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2(self.x * scale, self.y * scale)


def _signed_area(start: Vec2, end: Vec2, point: Vec2) -> float:
    return (point - start).dot((end - start).perp())


@dataclass(frozen=True)
class Triangle2:
    """A triangle in the screen plane."""

    a: Vec2
    b: Vec2
    c: Vec2

    def depth_at(self, point: Vec2) -> Vec3 | None:
        """Return the normalised edge weights at ``point``.

        Returns None when the point lies outside the triangle, on an edge,
        or when the triangle faces away (wrong winding).
        """
        area_a = _signed_area(self.a, self.b, point)
        area_b = _signed_area(self.b, self.c, point)
        area_c = _signed_area(self.c, self.a, point)

        if area_a <= 0.0 or area_b <= 0.0 or area_c <= 0.0:
            return None

        total = area_a + area_b + area_c
        if total <= 0.0:
            return None

        inv_total = _recip(total)
        return Vec3(area_a * inv_total, area_b * inv_total, area_c * inv_total)


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec3(self.x * scale, self.y * scale, self.z * scale)

    def recip(self) -> Vec3:
        """Component-wise reciprocal."""
        return Vec3(_recip(self.x), _recip(self.y), _recip(self.z))

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def trunc(self) -> Vec2:
        """Drop the z component."""
        return Vec2(self.x, self.y)


@dataclass(frozen=True)
class Triangle3:
    """A triangle in space."""

    a: Vec3
    b: Vec3
    c: Vec3

    def trunc(self) -> Triangle2:
        """Project onto the xy plane by dropping z."""
        return Triangle2(self.a.trunc(), self.b.trunc(), self.c.trunc())


@dataclass(frozen=True)
class Transform:
    """A rotation given by yaw, pitch and roll followed by a translation."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    translation: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))

    def _rotate(self, point: Vec3) -> Vec3:
        a, b, c = self.yaw, self.pitch, self.roll
        sa, ca = math.sin(a), math.cos(a)
        sb, cb = math.sin(b), math.cos(b)
        sc, cc = math.sin(c), math.cos(c)

        row_one = Vec3(ca * cb, ca * sb * sc - sa * cc, ca * sb * cc + sa * sc)
        row_two = Vec3(-sb, cb * sc, cb * cc)
        row_three = Vec3(sa * cb, sa * sb * sc + ca * cc, sa * sb * cc - ca * sc)

        return Vec3(point.dot(row_one), point.dot(row_two), point.dot(row_three))

    def apply(self, point: Vec3) -> Vec3:
        """Rotate ``point`` and then translate it."""
        return self._rotate(point) + self.translation