"""A fixed-capacity particle system with bursts, gravity wells and drawing."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from daniengine.canvas import Canvas, Color
from daniengine.math import Vec2

_ADDITIVE_BOOST = 1.5


@dataclass(frozen=True)
class EmitterConfig:
    """How many particles a burst makes and the ranges their properties span."""

    count: int
    speed_min: float
    speed_max: float
    spread_radians: float
    base_direction: float
    life_min: float
    life_max: float
    size_min: float
    size_max: float
    start_color: Color
    end_color: Color


@dataclass(slots=True)
class Particle:
    """One particle slot; dead slots are reused by later bursts."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    life: float = 0.0
    life_total: float = 0.0
    size: float = 0.0
    start_color: Color = Color(255, 255, 255, 255)
    end_color: Color = Color(0, 0, 255, 255)
    alive: bool = False

    def color(self) -> tuple[float, float, float, float]:
        """Colour channels blended from start to end as the particle ages."""
        if self.life_total == 0.0:
            t = math.nan if self.life == 0.0 else math.copysign(math.inf, self.life)
        else:
            t = self.life / self.life_total
        if not math.isnan(t):
            t = min(max(t, 0.0), 1.0)
        k = 1.0 - t
        r, g, b, a = (
            s + (e - s) * k for s, e in zip(self.start_color, self.end_color)
        )
        return r, g, b, a


def _to_u8(v: float) -> int:
    """Saturating float-to-byte conversion that truncates toward zero."""
    if math.isnan(v):
        return 0
    return int(min(max(v, 0.0), 255.0))


class ParticleSystem:
    """A pool of particles moved by gravity and drawn as small squares."""

    def __init__(self, capacity: int) -> None:
        self._particles = [Particle() for _ in range(capacity)]
        self.gravity: tuple[float, float] = (0.0, 300.0)
        self._rng_state = 0x1234ABCD

    def set_gravity(self, gx: float, gy: float) -> None:
        self.gravity = (gx, gy)

    def live_particles(self) -> Iterator[Particle]:
        """Yield the particles that are currently alive, in slot order."""
        return (p for p in self._particles if p.alive)

    def apply_gravity_well(
        self, center: Sequence[float], strength: float, radius: float, dt: float
    ) -> None:
        """Pull particles within ``radius`` of ``center`` toward it."""
        cx, cy = center
        r2 = radius * radius
        for p in self.live_particles():
            dx = cx - p.pos.x
            dy = cy - p.pos.y
            d2 = dx * dx + dy * dy
            if d2 > r2 or d2 == 0.0:
                continue
            falloff = 1.0 - d2 / r2
            inv_d = 1.0 / max(math.sqrt(d2), 1e-3)
            a = strength * falloff
            p.vel.x += dx * inv_d * a * dt
            p.vel.y += dy * inv_d * a * dt

    def emit_burst(self, pos: Sequence[float], config: EmitterConfig) -> None:
        """Spawn up to ``config.count`` particles at ``pos`` in free slots."""
        px, py = pos
        free_slots = (i for i, p in enumerate(self._particles) if not p.alive)
        for _ in range(config.count):
            slot = next(free_slots, None)
            if slot is None:
                break
            direction = config.base_direction + self._rand_between(
                -config.spread_radians, config.spread_radians
            )
            speed = self._rand_between(config.speed_min, config.speed_max)
            life = self._rand_between(config.life_min, config.life_max)
            size = self._rand_between(config.size_min, config.size_max)
            self._particles[slot] = Particle(
                pos=Vec2(px, py),
                vel=Vec2(math.cos(direction) * speed, math.sin(direction) * speed),
                life=life,
                life_total=life,
                size=size,
                start_color=config.start_color,
                end_color=config.end_color,
                alive=True,
            )

    def collide_rect(self, rect: Sequence[float], restitution: float) -> None:
        """Push particles whose centre is inside ``rect`` out along the shallowest axis."""
        rx, ry, rw, rh = rect
        left, right, top, bottom = rx, rx + rw, ry, ry + rh
        for p in self.live_particles():
            half = p.size * 0.5
            cx = p.pos.x + half
            cy = p.pos.y + half
            if not (left <= cx <= right and top <= cy <= bottom):
                continue
            dl = cx - left
            dr = right - cx
            dt = cy - top
            db = bottom - cy
            if min(dl, dr) < min(dt, db):
                cx = left - 0.001 if dl < dr else right + 0.001
                p.vel.x = -p.vel.x * restitution
            else:
                cy = top - 0.001 if dt < db else bottom + 0.001
                p.vel.y = -p.vel.y * restitution
            p.pos.x = cx - half
            p.pos.y = cy - half

    def update(self, dt: float) -> None:
        """Apply gravity, move particles and retire those whose life ran out."""
        gx, gy = self.gravity
        for p in self.live_particles():
            p.vel.x += gx * dt
            p.vel.y += gy * dt
            p.pos.x += p.vel.x * dt
            p.pos.y += p.vel.y * dt
            p.life -= dt
            if p.life <= 0.0:
                p.alive = False

    def draw(self, canvas: Canvas) -> None:
        """Draw each live particle with its blended colour."""
        for p in self.live_particles():
            color = Color(*(_to_u8(c) for c in p.color()))
            canvas.fill_rect_f32(p.pos.x, p.pos.y, p.size, p.size, color)

    def draw_additive(self, canvas: Canvas) -> None:
        """Draw live particles with brightened colour channels."""
        for p in self.live_particles():
            r, g, b, a = p.color()
            color = Color(
                _to_u8(min(r * _ADDITIVE_BOOST, 255.0)),
                _to_u8(min(g * _ADDITIVE_BOOST, 255.0)),
                _to_u8(min(b * _ADDITIVE_BOOST, 255.0)),
                _to_u8(a),
            )
            canvas.fill_rect_f32(p.pos.x, p.pos.y, p.size, p.size, color)

    def _rand_u32(self) -> int:
        self._rng_state = (self._rng_state * 1664525 + 1013904223) & 0xFFFFFFFF
        return self._rng_state

    def _rand_unit(self) -> float:
        return self._rand_u32() / 4294967296.0

    def _rand_between(self, a: float, b: float) -> float:
        return a + (b - a) * self._rand_unit()