"""A renderer that paints with ANSI escape codes in a terminal."""

from __future__ import annotations

import math
import os
import sys
from typing import TextIO

from .color import Color
from .renderer import Renderer

_ALT_SCREEN_ON = "\x1b[?1049h"
_ALT_SCREEN_OFF = "\x1b[?1049l"
_HIDE_CURSOR = "\x1b[?25l"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalRenderer(Renderer):
    """Draws each pixel as a coloured block character cell.

    Escape codes are collected in ``codes`` and written out on ``commit``.
    """

    def __init__(self, cols: int = 0, rows: int = 0, stream: TextIO | None = None) -> None:
        super().__init__()
        self.cols = cols
        self.rows = rows
        self.codes = ""
        self._stream = stream if stream is not None else sys.stdout
        self._closed = False

    def __enter__(self) -> TerminalRenderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _write_line(self, text: str) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()

    def fit(self) -> None:
        """Resize to the terminal attached to the output stream."""
        try:
            cols, rows = os.get_terminal_size(self._stream.fileno())
        except (OSError, ValueError) as exc:
            raise OSError("could not fit terminal") from exc
        self.rows = rows
        self.cols = cols

        wanted = rows * cols
        if wanted <= len(self.depth_buffer):
            del self.depth_buffer[wanted:]
        else:
            self.depth_buffer.extend([math.inf] * (wanted - len(self.depth_buffer)))

    def push_code(self, code: str) -> None:
        """Queue an escape sequence for the next commit."""
        self.codes += code

    def init(self) -> None:
        """Switch to the alternate screen, clear it and hide the cursor."""
        self._write_line(_ALT_SCREEN_ON)
        self.clear()
        self.push_code(_HIDE_CURSOR)

    def close(self) -> None:
        """Switch back from the alternate screen."""
        if self._closed:
            return
        self._closed = True
        self._write_line(_ALT_SCREEN_OFF)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if x >= self.cols or y >= self.rows:
            return
        self.push_code(
            f"\x1b[{y + 1};{x + 1}f\x1b[38;2;{color.r};{color.g};{color.b}m\u2588\x1b[H"
        )

    def size(self) -> tuple[int, int]:
        return (self.cols, self.rows)

    def clear_pixels(self) -> None:
        self.push_code(_CLEAR_SCREEN)

    def commit(self) -> None:
        codes, self.codes = self.codes, ""
        self._write_line(codes)