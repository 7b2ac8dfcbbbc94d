"""RGB colours."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_u32(cls, packed: int) -> Color:
        """Unpack a colour from a 0xRRGGBB integer.

        Only the red channel is recovered; green and blue are always
        saturated to 0xFF.
        """
        r = (packed >> 16) & 0xFF
        g = ((packed >> 8) | 0xFF) & 0xFF
        b = (packed | 0xFF) & 0xFF
        return cls(r, g, b)

    def as_u32(self) -> int:
        """Pack the colour into a 0xRRGGBB integer."""
        return (self.r << 16) + (self.g << 8) + self.b

    def perceived_luminance(self) -> float:
        """Perceived brightness in the range 0..1."""
        return 0.299 * (self.r / 255.0) + 0.587 * (self.g / 255.0) + 0.114 * (self.b / 255.0)

    @classmethod
    def random(cls) -> Color:
        """A colour with uniformly random channels."""
        return cls(_random.randrange(256), _random.randrange(256), _random.randrange(256))