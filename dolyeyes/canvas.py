"""RGB pixel canvas with the primitive shapes used to draw the eyes."""

from __future__ import annotations

from math import isqrt
from typing import NamedTuple

LCD_WIDTH = 240
LCD_HEIGHT = 240

EYE_BACKGROUND_RADIUS = 120
PUPIL_RADIUS = 75
IRIS_RING_WIDTH = 12
HIGHLIGHT_RADIUS = 20
HIGHLIGHT_OFFSET_X = -30
HIGHLIGHT_OFFSET_Y = -30


class Color(NamedTuple):
    """A 24-bit RGB colour."""

    r: int
    g: int
    b: int


BLACK_BG = Color(0, 0, 0)
WHITE_EYE = Color(255, 255, 255)
BLACK_PUPIL = Color(0, 0, 0)
BLUE_IRIS = Color(0, 150, 200)
WHITE_HIGHLIGHT = Color(255, 255, 255)
YELLOW_EYELID = Color(255, 200, 0)
TEAR = Color(135, 206, 250)
ANGRY_RED = Color(255, 80, 80)
FLAME_ORANGE = Color(255, 140, 0)
FLAME_YELLOW = Color(255, 255, 0)
FLAME_RED = Color(255, 69, 0)
ANGRY_BG = Color(80, 0, 0)


class Canvas:
    """A row-major 24-bit RGB frame; drawing outside the frame is clipped."""

    def __init__(self, width: int = LCD_WIDTH, height: int = LCD_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 3)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _fill_span(self, y: int, x0: int, x1: int, raw: bytes) -> None:
        """Fill pixels x0..x1 inclusive on row y, clipped to the frame."""
        if not 0 <= y < self.height:
            return
        x0 = max(x0, 0)
        x1 = min(x1, self.width - 1)
        if x0 > x1:
            return
        start = (y * self.width + x0) * 3
        end = (y * self.width + x1 + 1) * 3
        self._data[start:end] = raw * (x1 - x0 + 1)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        raw = bytes(color)
        if self._inside(x, y):
            index = (y * self.width + x) * 3
            self._data[index:index + 3] = raw

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        index = (y * self.width + x) * 3
        return Color(*self._data[index:index + 3])

    def clear(self, color: Color) -> None:
        """Paint the whole frame with one colour."""
        self._data[:] = bytes(color) * (self.width * self.height)

    def fill_circle(self, center_x: int, center_y: int, radius: int, color: Color) -> None:
        """Fill every pixel whose squared distance to the centre is at most radius²."""
        if radius < 0:
            return
        raw = bytes(color)
        radius_sq = radius * radius
        for dy in range(-radius, radius + 1):
            half = isqrt(radius_sq - dy * dy)
            self._fill_span(center_y + dy, center_x - half, center_x + half, raw)

    def draw_ring(
        self,
        center_x: int,
        center_y: int,
        inner_radius: int,
        outer_radius: int,
        color: Color,
    ) -> None:
        """Fill pixels with inner_radius² < distance² <= outer_radius²."""
        if outer_radius < 0:
            return
        raw = bytes(color)
        outer_sq = outer_radius * outer_radius
        inner_sq = inner_radius * inner_radius
        for dy in range(-outer_radius, outer_radius + 1):
            y = center_y + dy
            outer_half = isqrt(outer_sq - dy * dy)
            inner_rest = inner_sq - dy * dy
            if inner_rest < 0:
                self._fill_span(y, center_x - outer_half, center_x + outer_half, raw)
                continue
            inner_half = isqrt(inner_rest)
            if inner_half >= outer_half:
                continue
            self._fill_span(y, center_x - outer_half, center_x - inner_half - 1, raw)
            self._fill_span(y, center_x + inner_half + 1, center_x + outer_half, raw)

    def fill_ellipse(
        self,
        center_x: int,
        center_y: int,
        radius_x: int,
        radius_y: int,
        color: Color,
    ) -> None:
        """Fill an axis-aligned ellipse; a zero or negative radius draws nothing."""
        if radius_x <= 0 or radius_y <= 0:
            return
        raw = bytes(color)
        for y in range(max(center_y - radius_y, 0), min(center_y + radius_y, self.height - 1) + 1):
            ny = (y - center_y) / radius_y
            for x in range(max(center_x - radius_x, 0), min(center_x + radius_x, self.width - 1) + 1):
                nx = (x - center_x) / radius_x
                if nx * nx + ny * ny <= 1.0:
                    index = (y * self.width + x) * 3
                    self._data[index:index + 3] = raw

    def draw_star(self, center_x: int, center_y: int, size: int, color: Color) -> None:
        """Draw a four-pointed star built from four triangles, each size/2 long."""
        raw = bytes(color)
        half = int(size / 2)
        for y in range(center_y - half, center_y + 1):
            width = (y - (center_y - half)) * 2 + 1
            self._fill_span(y, center_x - width // 2, center_x + width // 2, raw)
        for y in range(center_y, center_y + half + 1):
            width = ((center_y + half) - y) * 2 + 1
            self._fill_span(y, center_x - width // 2, center_x + width // 2, raw)
        for x in range(center_x - half, center_x + 1):
            height = (x - (center_x - half)) * 2 + 1
            for y in range(center_y - height // 2, center_y + height // 2 + 1):
                self.set_pixel(x, y, color)
        for x in range(center_x, center_x + half + 1):
            height = ((center_x + half) - x) * 2 + 1
            for y in range(center_y - height // 2, center_y + height // 2 + 1):
                self.set_pixel(x, y, color)

    def draw_tear(self, x: int, y: int, size: int = 8) -> None:
        """Draw a tear drop: a round body with a narrowing tip below it."""
        self.fill_circle(x, y, size, TEAR)
        raw = bytes(TEAR)
        for i in range(1, int(size / 2) + 1):
            half_width = int((size - i) / 2)
            self._fill_span(y + size + i, x - half_width, x + half_width, raw)

    def copy(self) -> Canvas:
        """Return an independent copy of this canvas."""
        other = Canvas(self.width, self.height)
        other._data[:] = self._data
        return other

    def to_bytes(self) -> bytes:
        """Return the frame as packed RGB bytes, row by row."""
        return bytes(self._data)