"""Interactive particle demo: bursts, a fountain, a gravity well and a small UI."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass, field, replace
from typing import NamedTuple

from daniengine.canvas import Canvas, Color
from daniengine.input import Input, Key, Mods, MouseButton
from daniengine.math import Vec2
from daniengine.particles import EmitterConfig, ParticleSystem
from daniengine.physics import Body
from daniengine.playground import bounce
from daniengine.ui import Rect, Ui

CAPACITY = 10_000
GRAVITY = (0.0, 500.0)
BACKGROUND = Color(12, 12, 16, 255)
WELL_COLOR = Color(120, 200, 255, 180)
BODY_COLOR = Color(120, 210, 255, 200)
MOUSE_COLOR = Color(255, 255, 255, 160)

# Layout shared by draw_ui() and ui_button_rects().
_MARGIN = 8.0
_GAP = 6.0
_TOP_H = 18.0
_COL_W = 110.0
_BUTTON_H = 22.0
_PRESET_W = 74.0
_SMALL_W = 32.0
_MIN_STRETCH_W = 40.0

_NO_MODS = Mods(0)

_BINDINGS = {
    "quit": Key.ESCAPE,
    "toggle_fountain": Key.F,
    "reset_particles": Key.R,
    "toggle_additive": Key.A,
    "preset_sparkles": Key.KEY1,
    "preset_burst": Key.KEY2,
    "preset_fire": Key.KEY3,
    "toggle_well": Key.G,
    "move_well_to_mouse": Key.W,
    "well_radius_down": Key.LBRACKET,
    "well_radius_up": Key.RBRACKET,
    "well_strength_down": Key.MINUS,
    "well_strength_up": Key.EQUALS,
}


class Presets(NamedTuple):
    """The three emitter presets the demo switches between."""

    sparkle: EmitterConfig
    burst: EmitterConfig
    fire: EmitterConfig


def make_presets() -> Presets:
    """Return the sparkle, burst and fire emitter presets."""
    base = EmitterConfig(
        count=64,
        speed_min=80.0,
        speed_max=220.0,
        spread_radians=math.pi / 2,
        base_direction=-math.pi / 2,
        life_min=0.6,
        life_max=1.2,
        size_min=2.0,
        size_max=4.0,
        start_color=Color(255, 255, 0, 255),
        end_color=Color(0, 10, 255, 255),
    )
    return Presets(
        sparkle=replace(
            base,
            start_color=Color(255, 160, 240, 255),
            end_color=Color(180, 200, 255, 0),
        ),
        burst=base,
        fire=replace(
            base,
            start_color=Color(255, 200, 40, 255),
            end_color=Color(80, 80, 80, 0),
        ),
    )


def _new_particle_system() -> ParticleSystem:
    ps = ParticleSystem(CAPACITY)
    ps.set_gravity(*GRAVITY)
    return ps


def _default_body() -> Body:
    return Body(pos=Vec2(40.0, 40.0), vel=Vec2(60.0, 45.0), size=Vec2(18.0, 18.0))


def _default_input() -> Input:
    inp = Input()
    for name, key in _BINDINGS.items():
        inp.bind_action(name, Input.chord(key, _NO_MODS))
    return inp


def _layout(canvas_w: float) -> dict[str, Rect]:
    """Button rects by label key, in drawing order."""
    x_left = _MARGIN
    y_start = _MARGIN + _TOP_H + _GAP
    step = _BUTTON_H + _GAP
    rects: dict[str, Rect] = {}
    for i, name in enumerate(("fountain", "well", "blend", "clear")):
        rects[name] = Rect(x_left, y_start + i * step, _COL_W, _BUTTON_H)

    x2 = x_left + _COL_W + _GAP
    for i, name in enumerate(("sparkle", "burst", "fire")):
        rects[name] = Rect(x2 + i * (_PRESET_W + _GAP), y_start, _PRESET_W, _BUTTON_H)

    y3 = y_start + step
    xg = x2
    for name in ("radius_down", "radius_up", "strength_down", "strength_up"):
        rects[name] = Rect(xg, y3, _SMALL_W, _BUTTON_H)
        xg += _SMALL_W + _GAP

    rem_w = (canvas_w - _MARGIN) - xg
    if rem_w > _MIN_STRETCH_W:
        rects["well_at_mouse"] = Rect(xg, y3, rem_w, _BUTTON_H)
    return rects


@dataclass
class ParticlesApp:
    """State of the particle demo."""

    width: int = 320
    height: int = 180
    ps: ParticleSystem = field(default_factory=_new_particle_system)
    additive: bool = False
    presets: Presets = field(default_factory=make_presets)
    active_cfg: EmitterConfig | None = None
    fountain: bool = False
    well_active: bool = False
    well_pos: Vec2 = field(default_factory=lambda: Vec2(160.0, 90.0))
    well_radius: float = 70.0
    well_strength: float = 1200.0
    body: Body = field(default_factory=_default_body)
    input: Input = field(default_factory=_default_input)
    ui: Ui = field(default_factory=Ui)
    ui_click_consumed: bool = False

    def __post_init__(self) -> None:
        if self.active_cfg is None:
            self.active_cfg = self.presets.sparkle

    def _reset_particles(self) -> None:
        self.ps = _new_particle_system()

    def _radius_down(self) -> None:
        self.well_radius = max(self.well_radius - 5.0, 10.0)

    def _strength_down(self) -> None:
        self.well_strength = max(self.well_strength - 100.0, 0.0)

    def _well_to_mouse(self) -> None:
        self.well_pos = Vec2(self.input.mouse_pos.x, self.input.mouse_pos.y)

    def _reverse_held(self) -> bool:
        return self.input.pressed(Key.LSHIFT) or self.input.pressed(Key.RSHIFT)

    def ui_button_rects(self, canvas_w: float, canvas_h: float) -> list[Rect]:
        """Return every interactive button rect for a canvas of the given size."""
        return list(_layout(canvas_w).values())

    def _action(self, name: str) -> bool:
        return self.input.action_just_pressed(name, _NO_MODS)

    def update(self, dt: float) -> bool:
        """Advance the demo by ``dt`` seconds; return True if it should quit."""
        if self._action("quit"):
            return True
        if self._action("toggle_fountain"):
            self.fountain = not self.fountain
        if self._action("reset_particles"):
            self._reset_particles()
        if self._action("toggle_additive"):
            self.additive = not self.additive
            print(f"Additive mode: {str(self.additive).lower()}")

        if self._action("preset_sparkles"):
            self.active_cfg = self.presets.sparkle
            print("Switched to sparkles preset")
        if self._action("preset_burst"):
            self.active_cfg = self.presets.burst
            print("Switched to burst preset")
        if self._action("preset_fire"):
            self.active_cfg = self.presets.fire
            print("Switched to fire preset")

        if self._action("toggle_well"):
            self.well_active = not self.well_active
            print(f"Gravity well: {'ON' if self.well_active else 'OFF'}")
        if self._action("move_well_to_mouse"):
            self._well_to_mouse()
            print("Well moved to mouse")
        if self._action("well_radius_down"):
            self._radius_down()
            print(f"Well radius: {self.well_radius:.1f}")
        if self._action("well_radius_up"):
            self.well_radius += 5.0
            print(f"Well radius: {self.well_radius:.1f}")
        if self._action("well_strength_down"):
            self._strength_down()
            print(f"Well strength: {self.well_strength:.0f}")
        if self._action("well_strength_up"):
            self.well_strength += 100.0
            print(f"Well strength: {self.well_strength:.0f}")

        mouse = self.input.mouse_pos
        if self.input.mouse_pressed(MouseButton.LEFT) and not self.ui_click_consumed:
            direction = -math.pi / 2 + 0.3 * math.sin(mouse.x / 50.0)
            if self._reverse_held():
                direction += math.pi
            cfg = replace(self.active_cfg, base_direction=direction)
            self.ps.emit_burst((mouse.x, mouse.y), cfg)

        if self.fountain:
            direction = -math.pi / 2
            if self._reverse_held():
                direction += math.pi
            cfg = replace(
                self.active_cfg,
                count=24,
                speed_min=120.0,
                speed_max=240.0,
                spread_radians=0.35,
                base_direction=direction,
            )
            self.ps.emit_burst((self.width / 2, self.height * 0.9), cfg)

        if self.well_active:
            self.ps.apply_gravity_well(
                (self.well_pos.x, self.well_pos.y),
                self.well_strength,
                self.well_radius,
                dt,
            )

        self.body.update(dt)
        bounce(self.body, float(self.width), float(self.height))

        self.ps.update(dt)
        b = self.body
        self.ps.collide_rect((b.pos.x, b.pos.y, b.size.x, b.size.y), 0.6)
        return False

    def render(self, canvas: Canvas) -> None:
        """Draw the well, the square, the particles, the cursor and the UI."""
        w, h = (float(v) for v in canvas.size())
        b = self.body
        s = b.size.x
        if b.pos.x + s >= w:
            b.pos.x = w - s
            b.vel.x = -abs(b.vel.x)
        if b.pos.y + s >= h:
            b.pos.y = h - s
            b.vel.y = -abs(b.vel.y)

        if self.well_active:
            canvas.draw_circle_f32(
                self.well_pos.x, self.well_pos.y, self.well_radius, WELL_COLOR
            )

        canvas.fill_rect_f32(b.pos.x, b.pos.y, b.size.x, b.size.y, BODY_COLOR)

        if self.additive:
            self.ps.draw_additive(canvas)
        else:
            self.ps.draw(canvas)

        mouse = self.input.mouse_pos
        canvas.fill_rect_f32(mouse.x - 2.0, mouse.y - 2.0, 4.0, 4.0, MOUSE_COLOR)

        self.draw_ui(canvas)

    def draw_ui(self, canvas: Canvas) -> None:
        """Draw the control panel and apply any button clicks."""
        self.ui.begin()
        w, _h = (float(v) for v in canvas.size())

        self.ui.label(
            canvas,
            Rect(_MARGIN, _MARGIN, max(w - 2.0 * _MARGIN, 0.0), _TOP_H),
            "controls",
        )

        rects = _layout(w)
        presets = self.presets

        def set_cfg(cfg: EmitterConfig):
            def apply() -> None:
                self.active_cfg = cfg

            return apply

        def toggle(attr: str):
            def apply() -> None:
                setattr(self, attr, not getattr(self, attr))

            return apply

        def radius_up() -> None:
            self.well_radius += 5.0

        def strength_up() -> None:
            self.well_strength += 100.0

        buttons = [
            ("fountain", f"Fountain: {'ON' if self.fountain else 'OFF'}", toggle("fountain")),
            ("well", f"Well: {'ON' if self.well_active else 'OFF'}", toggle("well_active")),
            ("blend", "Blend: Add" if self.additive else "Blend: Alpha", toggle("additive")),
            ("clear", "Clear", self._reset_particles),
            ("sparkle", "Sparkle (1)", set_cfg(presets.sparkle)),
            ("burst", "Burst (2)", set_cfg(presets.burst)),
            ("fire", "Fire (3)", set_cfg(presets.fire)),
            ("radius_down", "R-", self._radius_down),
            ("radius_up", "R+", radius_up),
            ("strength_down", "S-", self._strength_down),
            ("strength_up", "S+", strength_up),
            ("well_at_mouse", "Well @ Mouse", self._well_to_mouse),
        ]
        for name, label, on_click in buttons:
            rect = rects.get(name)
            if rect is not None and self.ui.button(self.input, canvas, rect, label):
                on_click()


def main(argv: list[str] | None = None) -> int:
    """Open the particle demo window and run until it is closed."""
    argparse.ArgumentParser(
        prog="daniengine-particles", description="Play with particle emitters."
    ).parse_args(argv)

    from daniengine.pixels import PixelCanvas
    from daniengine.window import Window

    window = Window(320, 180, 3, "DaniEngine • Particles")
    canvas = PixelCanvas(320, 180, on_present=window.present)
    app = ParticlesApp(*canvas.size())
    last = time.perf_counter()
    try:
        while True:
            if window.poll_events(app.input):
                return 0

            now = time.perf_counter()
            dt = now - last
            last = now

            cw, ch = (float(v) for v in canvas.size())
            over_button = any(
                r.contains(app.input.mouse_pos) for r in app.ui_button_rects(cw, ch)
            )
            app.ui_click_consumed = over_button and app.input.mouse_pressed(
                MouseButton.LEFT
            )

            if app.update(dt):
                return 0

            canvas.clear(BACKGROUND)
            try:
                app.render(canvas)
            except Exception as exc:  # noqa: BLE001
                print(f"render error: {exc}", file=sys.stderr)
                return 1
            try:
                canvas.present()
            except Exception as exc:  # noqa: BLE001
                print(f"present error: {exc}", file=sys.stderr)
                return 1
    finally:
        window.close()


if __name__ == "__main__":
    sys.exit(main())