"""The rasterising renderer interface shared by all output targets."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .color import Color
from .lin import Transform, Triangle3, Vec2, Vec3
from .model import Model

_U32_MAX = 2**32 - 1


def _recip(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _fmin(*values: float) -> float:
    """Minimum that ignores NaN unless every value is NaN."""
    real = [v for v in values if not math.isnan(v)]
    return min(real) if real else math.nan


def _fmax(*values: float) -> float:
    """Maximum that ignores NaN unless every value is NaN."""
    real = [v for v in values if not math.isnan(v)]
    return max(real) if real else math.nan


def _saturate(value: float, rounding) -> int:
    """Round and clamp a float into the unsigned 32-bit range (NaN gives 0)."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(rounding(value))


class Renderer(ABC):
    """A pixel target with a depth buffer that can rasterise triangles.

    Subclasses fill ``depth_buffer`` with one entry per pixel, row by row.
    """

    def __init__(self) -> None:
        self.depth_buffer: list[float] = []

    def _index(self, x: int, y: int) -> int:
        width = self.size()[0]
        return y * width + x

    def get_depth(self, x: int, y: int) -> float:
        """Depth stored at a pixel; infinity when outside the buffer."""
        idx = self._index(x, y)
        if idx >= len(self.depth_buffer):
            return math.inf
        return self.depth_buffer[idx]

    def set_depth(self, x: int, y: int, depth: float) -> None:
        """Store a depth for a pixel; ignored when outside the buffer."""
        idx = self._index(x, y)
        if idx >= len(self.depth_buffer):
            return
        self.depth_buffer[idx] = depth

    def reset_depth_buffer(self) -> None:
        """Set every depth to infinity."""
        self.depth_buffer[:] = [math.inf] * len(self.depth_buffer)

    @abstractmethod
    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint one pixel."""

    @abstractmethod
    def clear_pixels(self) -> None:
        """Blank every pixel."""

    def clear(self) -> None:
        """Blank the pixels and reset the depth buffer."""
        self.clear_pixels()
        self.reset_depth_buffer()

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""

    @abstractmethod
    def commit(self) -> None:
        """Present the drawn frame."""

    def draw_triangle(self, tri: Triangle3, color: Color) -> None:
        """Rasterise a screen-space triangle whose z holds depth."""
        min_x = _saturate(_fmin(tri.a.x, tri.b.x, tri.c.x), math.floor)
        max_x = _saturate(_fmax(tri.a.x, tri.b.x, tri.c.x), math.ceil)
        min_y = _saturate(_fmin(tri.a.y, tri.b.y, tri.c.y), math.floor)
        max_y = _saturate(_fmax(tri.a.y, tri.b.y, tri.c.y), math.ceil)

        flat = tri.trunc()
        inverse_depths = Vec3(tri.a.z, tri.b.z, tri.c.z).recip()

        for x in range(min_x, max_x):
            for y in range(min_y, max_y):
                weights = flat.depth_at(Vec2(float(x), float(y)))
                if weights is None:
                    continue
                depth = _recip(inverse_depths.dot(weights))
                if depth < self.get_depth(x, y):
                    self.set_pixel(x, y, color)
                    self.set_depth(x, y, depth)

    def draw_model(self, model: Model, transform: Transform) -> None:
        """Project and rasterise every triangle of a model."""
        width, height = self.size()
        projected = model.as_projected_triangles(transform, Vec2(float(width), float(height)))
        for triangle, color in zip(projected, model.colors):
            self.draw_triangle(triangle, color)