"""Axis-aligned boxes and simple moving bodies."""

from __future__ import annotations

from dataclasses import dataclass, field

from daniengine.math import Vec2


@dataclass
class Aabb:
    """Axis-aligned bounding box given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    def intersects(self, other: Aabb) -> bool:
        """Return True if the boxes overlap; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )


@dataclass
class Body:
    """A box that moves with a constant velocity."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)

    def update(self, dt: float) -> None:
        """Advance the position by ``vel * dt``."""
        self.pos = self.pos.add(self.vel.mul(dt))

    def aabb(self) -> Aabb:
        """Return the body's bounding box."""
        return Aabb(self.pos.x, self.pos.y, self.size.x, self.size.y)