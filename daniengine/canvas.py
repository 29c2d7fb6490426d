"""Drawing surface interface and colours."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int


def _round(v: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if v >= 0:
        return int(math.floor(v + 0.5))
    return -int(math.floor(-v + 0.5))


class Canvas(ABC):
    """A pixel surface that can be cleared, drawn on and presented."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in pixels."""

    @abstractmethod
    def clear(self, color: Color) -> None:
        """Fill the whole surface with ``color``."""

    @abstractmethod
    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Fill an integer rectangle."""

    @abstractmethod
    def draw_circle(self, x: int, y: int, radius: int, color: Color) -> None:
        """Draw a circle outline."""

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a line between two points."""

    @abstractmethod
    def present(self) -> None:
        """Show the frame; raises if it cannot be shown."""

    def fill_rect_f32(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """Fill a rectangle given in float coordinates; size is at least 1."""
        self.fill_rect(
            _round(x), _round(y), _round(max(w, 1.0)), _round(max(h, 1.0)), color
        )

    def draw_circle_f32(self, x: float, y: float, radius: float, color: Color) -> None:
        """Draw a circle given in float coordinates; radius is at least 1."""
        self.draw_circle(_round(x), _round(y), _round(max(radius, 1.0)), color)

    def draw_line_f32(
        self, x1: float, y1: float, x2: float, y2: float, color: Color
    ) -> None:
        """Draw a line given in float coordinates."""
        self.draw_line(_round(x1), _round(y1), _round(x2), _round(y2), color)