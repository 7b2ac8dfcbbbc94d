"""A renderer that shows its frame buffer in a window."""

from __future__ import annotations

import math

import pygame

from .color import Color
from .renderer import Renderer


class WindowRenderer(Renderer):
    """Draws into a 0xRRGGBB frame buffer presented in a window."""

    def __init__(self, width: int, height: int, title: str = "RAWR") -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        super().__init__()
        pygame.display.init()
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.width = width
        self.height = height
        self.buffer = [0] * (width * height)
        self.depth_buffer = [math.inf] * (width * height)
        self.is_open = True

    def __enter__(self) -> WindowRenderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        idx = y * self.width + x
        if idx >= len(self.buffer):
            return
        self.buffer[idx] = color.as_u32()

    def clear_pixels(self) -> None:
        self.buffer[:] = [0] * len(self.buffer)

    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def commit(self) -> None:
        """Show the frame buffer and process pending window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_open = False
        rgb = b"".join(value.to_bytes(4, "big")[1:] for value in self.buffer)
        image = pygame.image.frombuffer(rgb, (self.width, self.height), "RGB")
        self._screen.blit(image, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window."""
        self.is_open = False
        pygame.display.quit()