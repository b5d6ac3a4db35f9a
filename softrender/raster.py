"""A software framebuffer with pixel, line and wireframe-triangle drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence

import numpy as np

Point = Sequence[int]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)


def line_points(start: Point, end: Point) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from start to end, both included (Bresenham)."""
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _clip_segment(
    x0: float, y0: float, x1: float, y1: float,
    xmin: float, ymin: float, xmax: float, ymax: float,
) -> Optional[tuple[float, float, float, float]]:
    """Clip a segment to a rectangle (Liang-Barsky); None if nothing is left."""
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy


class Canvas:
    """An RGBA framebuffer addressed by (x, y) with the origin at the top left."""

    def __init__(self, width: int, height: int, background: Color = Color.BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        self.clear(background)

    @property
    def pixels(self) -> np.ndarray:
        """A read-only view of the framebuffer, shaped (height, width, 4)."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color: Color = Color.BLACK) -> None:
        """Fill the whole canvas with one colour."""
        self._pixels[:, :] = tuple(color)

    def get_pixel(self, position: Point) -> Color:
        """Return the colour at a position; IndexError if it is off the canvas."""
        x, y = int(position[0]), int(position[1])
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return Color(*(int(c) for c in self._pixels[y, x]))

    def draw_pixel(self, position: Point, color: Color) -> None:
        """Set one pixel; positions off the canvas are ignored."""
        x, y = int(position[0]), int(position[1])
        if self._contains(x, y):
            self._pixels[y, x] = tuple(color)

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Draw a one-pixel line; the parts off the canvas are dropped."""
        x0, y0 = int(start[0]), int(start[1])
        x1, y1 = int(end[0]), int(end[1])
        if not (self._contains(x0, y0) and self._contains(x1, y1)):
            clipped = _clip_segment(
                x0, y0, x1, y1, -1, -1, self.width, self.height
            )
            if clipped is None:
                return
            cx0, cy0, cx1, cy1 = clipped
            x0, y0, x1, y1 = round(cx0), round(cy0), round(cx1), round(cy1)
        for point in line_points((x0, y0), (x1, y1)):
            self.draw_pixel(point, color)

    def draw_triangle(self, a: Point, b: Point, c: Point, color: Color) -> None:
        """Draw the outline of a triangle."""
        self.draw_line(a, b, color)
        self.draw_line(a, c, color)
        self.draw_line(b, c, color)