from __future__ import annotations

from typing import List

from ..domain.interfaces import Color

BLACK: Color = (0, 0, 0)
GREEN: Color = (0, 255, 0)
MAGENTA: Color = (255, 0, 255)


class MatrixDisplay:
    """In-memory stand-in for an 8x8 RGB LED matrix."""

    def __init__(self, size: int = 8) -> None:
        self.size = size
        self._pixels: List[List[Color]] = [[BLACK] * size for _ in range(size)]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise ValueError(f"Pixel ({x}, {y}) outside {self.size}x{self.size} matrix")
        self._pixels[y][x] = color

    def clear(self) -> None:
        for row in self._pixels:
            row[:] = [BLACK] * self.size

    def pixel(self, x: int, y: int) -> Color:
        return self._pixels[y][x]

