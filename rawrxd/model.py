"""Triangle meshes and their projection onto the screen."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .color import Color
from .lin import Transform, Triangle3, Vec2, Vec3

FIELD_OF_VIEW = 60.0


def _divide(numerator: float, denominator: float) -> float:
    """Division with IEEE semantics for a zero denominator."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def world_to_screen_and_depth(point: Vec3, transform: Transform, fov: float, screen_size: Vec2) -> Vec3:
    """Project a world point to screen pixels, keeping its depth as z."""
    screen_height = math.tan(math.radians(fov / 2.0)) * 2.0
    moved = transform.apply(point)
    pixels_per_world = _divide(screen_size.y / screen_height, moved.z)
    scaled = Vec2(moved.x, moved.y) * pixels_per_world
    centered = scaled + screen_size * 0.5
    return Vec3(centered.x, centered.y, moved.z)


@dataclass
class Model:
    """A list of triangles, each with its own colour."""

    triangles: list[Triangle3] = field(default_factory=list)
    colors: list[Color] = field(default_factory=list)

    @classmethod
    def from_faces(cls, verts: Sequence[Vec3], faces: Iterable[Sequence[int]]) -> Model:
        """Build a model from vertices and 1-based polygon faces.

        Each face is split into a fan of triangles around its first vertex,
        and every triangle gets a random colour.
        """
        model = cls()

        def vertex(index: int) -> Vec3:
            if not 1 <= index <= len(verts):
                raise IndexError(f"face index {index} out of range 1..{len(verts)}")
            return verts[index - 1]

        for face in faces:
            if not face:
                raise IndexError("face has no vertices")
            first = vertex(face[0])
            rest = face[1:]
            for left, right in zip(rest, rest[1:]):
                model.triangles.append(Triangle3(first, vertex(left), vertex(right)))
                model.colors.append(Color.random())

        return model

    def as_projected_triangles(self, transform: Transform, screen_size: Vec2) -> list[Triangle3]:
        """Project every triangle to screen space."""
        return [
            Triangle3(
                world_to_screen_and_depth(tri.a, transform, FIELD_OF_VIEW, screen_size),
                world_to_screen_and_depth(tri.b, transform, FIELD_OF_VIEW, screen_size),
                world_to_screen_and_depth(tri.c, transform, FIELD_OF_VIEW, screen_size),
            )
            for tri in self.triangles
        ]