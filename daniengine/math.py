"""Small 2D vector type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def add(self, o: Vec2) -> Vec2:
        """Return the component-wise sum of this vector and ``o``."""
        return Vec2(self.x + o.x, self.y + o.y)

    def mul(self, s: float) -> Vec2:
        """Return this vector scaled by ``s``."""
        return Vec2(self.x * s, self.y * s)