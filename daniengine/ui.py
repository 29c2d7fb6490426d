"""Immediate-mode buttons and labels drawn with a tiny 3x5 bitmap font."""

from __future__ import annotations

import math
from dataclasses import dataclass

from daniengine.canvas import Canvas, Color
from daniengine.input import Input, MouseButton
from daniengine.math import Vec2

GLYPH_W = 3
GLYPH_H = 5

_BOX = (0b111, 0b101, 0b101, 0b101, 0b111)

_GLYPHS: dict[str, tuple[int, ...]] = {
    " ": (0, 0, 0, 0, 0),
    "-": (0, 0b111, 0, 0, 0),
    "+": (0b010, 0b010, 0b111, 0b010, 0b010),
    ":": (0, 0b010, 0, 0b010, 0),
    "(": (0b001, 0b010, 0b010, 0b010, 0b001),
    ")": (0b100, 0b010, 0b010, 0b010, 0b100),
    "@": (0b111, 0b101, 0b111, 0b100, 0b111),
    "0": (0b111, 0b101, 0b101, 0b101, 0b111),
    "1": (0b010, 0b110, 0b010, 0b010, 0b111),
    "2": (0b111, 0b001, 0b111, 0b100, 0b111),
    "3": (0b111, 0b001, 0b111, 0b001, 0b111),
    "4": (0b101, 0b101, 0b111, 0b001, 0b001),
    "5": (0b111, 0b100, 0b111, 0b001, 0b111),
    "6": (0b111, 0b100, 0b111, 0b101, 0b111),
    "7": (0b111, 0b001, 0b010, 0b100, 0b100),
    "8": (0b111, 0b101, 0b111, 0b101, 0b111),
    "9": (0b111, 0b101, 0b111, 0b001, 0b111),
    "A": (0b010, 0b101, 0b111, 0b101, 0b101),
    "B": (0b110, 0b101, 0b110, 0b101, 0b110),
    "C": (0b011, 0b100, 0b100, 0b100, 0b011),
    "D": (0b110, 0b101, 0b101, 0b101, 0b110),
    "E": (0b111, 0b100, 0b110, 0b100, 0b111),
    "F": (0b111, 0b100, 0b110, 0b100, 0b100),
    "G": (0b011, 0b100, 0b101, 0b101, 0b011),
    "H": (0b101, 0b101, 0b111, 0b101, 0b101),
    "I": (0b111, 0b010, 0b010, 0b010, 0b111),
    "K": (0b101, 0b110, 0b100, 0b110, 0b101),
    "L": (0b100, 0b100, 0b100, 0b100, 0b111),
    "M": (0b101, 0b111, 0b111, 0b101, 0b101),
    "N": (0b101, 0b111, 0b111, 0b111, 0b101),
    "O": (0b111, 0b101, 0b101, 0b101, 0b111),
    "P": (0b110, 0b101, 0b110, 0b100, 0b100),
    "R": (0b110, 0b101, 0b110, 0b110, 0b101),
    "S": (0b011, 0b100, 0b011, 0b001, 0b110),
    "T": (0b111, 0b010, 0b010, 0b010, 0b010),
    "U": (0b101, 0b101, 0b101, 0b101, 0b111),
    "V": (0b101, 0b101, 0b101, 0b101, 0b010),
    "W": (0b101, 0b101, 0b111, 0b111, 0b101),
    "Y": (0b101, 0b101, 0b010, 0b010, 0b010),
}


@dataclass
class Rect:
    """A float rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, p: Vec2) -> bool:
        """Return True if ``p`` lies inside or on the edge."""
        return self.x <= p.x <= self.x + self.w and self.y <= p.y <= self.y + self.h


class Ui:
    """Immediate-mode UI state: widget ids are handed out per frame."""

    def __init__(self) -> None:
        self.hot: int | None = None
        self.active: int | None = None
        self._next_id = 1

    def begin(self) -> None:
        """Start a frame of widgets."""
        self.hot = None
        self._next_id = 1

    def _make_id(self) -> int:
        widget_id = self._next_id
        self._next_id += 1
        return widget_id

    def label(self, canvas: Canvas, r: Rect, text: str) -> None:
        """Draw a translucent panel with optional upper-cased text."""
        panel(canvas, r)
        if text:
            draw_text_centered(canvas, r, text.upper(), Color(255, 255, 255, 200))

    def button(self, input: Input, canvas: Canvas, r: Rect, label: str) -> bool:
        """Draw a button; return True on the frame it was clicked."""
        widget_id = self._make_id()
        hovered = r.contains(input.mouse_pos)
        if hovered:
            self.hot = widget_id

        pressed_now = input.mouse_pressed(MouseButton.LEFT)
        just_released = input.mouse_clicked(MouseButton.LEFT)

        base = Color(235, 235, 235, 210) if hovered else Color(220, 220, 220, 180)
        border = (
            Color(255, 100, 200, 255)
            if pressed_now and hovered
            else Color(80, 80, 80, 220)
        )

        canvas.fill_rect_f32(r.x - 1.0, r.y - 1.0, r.w + 2.0, r.h + 2.0, border)
        canvas.fill_rect_f32(r.x, r.y, r.w, r.h, base)
        draw_text_centered(canvas, r, label.upper(), Color(20, 20, 20, 255))

        return hovered and just_released


def panel(canvas: Canvas, r: Rect) -> None:
    """Draw a translucent dark panel with a 1px border."""
    canvas.fill_rect_f32(r.x, r.y, r.w, r.h, Color(0, 0, 0, 140))
    border = Color(80, 80, 80, 200)
    canvas.fill_rect_f32(r.x, r.y, r.w, 1.0, border)
    canvas.fill_rect_f32(r.x, r.y + r.h - 1.0, r.w, 1.0, border)
    canvas.fill_rect_f32(r.x, r.y, 1.0, r.h, border)
    canvas.fill_rect_f32(r.x + r.w - 1.0, r.y, 1.0, r.h, border)


def glyph_rows(c: str) -> tuple[int, ...]:
    """Return the five 3-bit rows of ``c``; the leftmost pixel is the high bit.

    Characters without a glyph render as a box.
    """
    return _GLYPHS.get(c, _BOX)


def draw_text(
    canvas: Canvas, x: float, y: float, text: str, color: Color, scale: float
) -> None:
    """Draw ``text`` at ``(x, y)`` with each font pixel ``scale`` wide."""
    cx = x
    for ch in text:
        for ry, bits in enumerate(glyph_rows(ch)):
            for col in range(GLYPH_W):
                if bits & (1 << (GLYPH_W - 1 - col)):
                    canvas.fill_rect_f32(
                        cx + col * scale, y + ry * scale, scale, scale, color
                    )
        cx += (GLYPH_W + 1.0) * scale


def measure_text_px(text: str, scale: float) -> float:
    """Width in pixels of ``text`` drawn at ``scale``."""
    return ((GLYPH_W + 1.0) * len(text) - 1.0) * scale


def draw_text_centered(canvas: Canvas, r: Rect, text: str, color: Color) -> None:
    """Centre ``text`` in ``r``, shrinking the integer scale to fit its width."""
    if not text:
        return
    max_h_scale = max(r.h - 4.0, 4.0) / GLYPH_H
    scale = max(float(math.floor(max_h_scale)), 1.0)
    w_px = measure_text_px(text, scale)
    if w_px > r.w - 6.0:
        per_text = (GLYPH_W + 1.0) * len(text) - 1.0
        scale = max(float(math.floor((r.w - 6.0) / per_text)), 1.0)
        w_px = measure_text_px(text, scale)
    x = r.x + (r.w - w_px) * 0.5
    y = r.y + (r.h - GLYPH_H * scale) * 0.5
    draw_text(canvas, x, y, text, color, scale)