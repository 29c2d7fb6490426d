"""An in-memory RGBA framebuffer canvas."""

from __future__ import annotations

from collections.abc import Callable

from daniengine.canvas import Canvas, Color


class PixelCanvas(Canvas):
    """Canvas backed by an RGBA byte buffer.

    ``on_present`` is called with the canvas whenever the frame is presented.
    """

    def __init__(
        self,
        width: int,
        height: int,
        on_present: Callable[[PixelCanvas], None] | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self._on_present = on_present
        self._frame = bytearray(width * height * 4)

    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def clear(self, color: Color) -> None:
        self._frame[:] = bytes(color) * (self.width * self.height)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        x0, x1 = max(x, 0), min(x + w, self.width)
        if x0 >= x1:
            return
        row = bytes(color) * (x1 - x0)
        for yy in range(max(y, 0), min(y + h, self.height)):
            start = (yy * self.width + x0) * 4
            self._frame[start : start + len(row)] = row

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        x, y = x1, y1
        dx = abs(x2 - x1)
        sx = 1 if x1 < x2 else -1
        dy = -abs(y2 - y1)
        sy = 1 if y1 < y2 else -1
        err = dx + dy
        while True:
            self.fill_rect(x, y, 1, 1, color)
            if x == x2 and y == y2:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x += sx
            if e2 <= dx:
                err += dx
                y += sy

    def draw_circle(self, cx: int, cy: int, radius: int, color: Color) -> None:
        if radius <= 0:
            return

        def plot(px: int, py: int) -> None:
            self.fill_rect(px, py, 1, 1, color)

        plot(cx, cy + radius)
        plot(cx, cy - radius)
        plot(cx + radius, cy)
        plot(cx - radius, cy)

        x, y = 0, radius
        d = 1 - radius
        while x < y:
            if d < 0:
                d += 2 * x + 3
            else:
                d += 2 * (x - y) + 5
                y -= 1
            x += 1
            for px, py in (
                (cx + x, cy + y),
                (cx - x, cy + y),
                (cx + x, cy - y),
                (cx - x, cy - y),
                (cx + y, cy + x),
                (cx - y, cy + x),
                (cx + y, cy - x),
                (cx - y, cy - x),
            ):
                plot(px, py)

    def present(self) -> None:
        if self._on_present is not None:
            self._on_present(self)

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour at ``(x, y)``; raises IndexError outside the canvas."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        idx = (y * self.width + x) * 4
        return Color(*self._frame[idx : idx + 4])

    def frame(self) -> bytes:
        """Return a copy of the RGBA buffer, row by row."""
        return bytes(self._frame)