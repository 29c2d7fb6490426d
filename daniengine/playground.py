"""A bouncing square moved by the arrow keys, run at a fixed time step."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field

from daniengine.canvas import Canvas, Color
from daniengine.input import Input, Key
from daniengine.math import Vec2
from daniengine.physics import Body

STEP = 1.0 / 60.0
MAX_FRAME = 0.1
SPEED = 120.0
BACKGROUND = Color(12, 12, 16, 255)
BODY_COLOR = Color(255, 179, 218, 255)

_ARROWS = (Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN)


def bounce(body: Body, width: float, height: float) -> None:
    """Keep the body inside ``width`` x ``height``, reflecting its velocity."""
    s = body.size.x
    if body.pos.x <= 0.0:
        body.pos.x = 0.0
        body.vel.x = abs(body.vel.x)
    if body.pos.x + s >= width:
        body.pos.x = width - s
        body.vel.x = -abs(body.vel.x)
    if body.pos.y <= 0.0:
        body.pos.y = 0.0
        body.vel.y = abs(body.vel.y)
    if body.pos.y + s >= height:
        body.pos.y = height - s
        body.vel.y = -abs(body.vel.y)


def _default_body() -> Body:
    return Body(pos=Vec2(40.0, 40.0), vel=Vec2(60.0, 45.0), size=Vec2(10.0, 10.0))


@dataclass
class Playground:
    """State of the bouncing-square demo."""

    width: int = 320
    height: int = 180
    body: Body = field(default_factory=_default_body)
    direction: Vec2 = field(default_factory=Vec2)
    _acc: float = 0.0

    def handle_key(self, key: Key, pressed: bool) -> None:
        """Set the steering direction from an arrow key press or release."""
        v = 1.0 if pressed else 0.0
        if key is Key.LEFT:
            self.direction.x = -v
        elif key is Key.RIGHT:
            self.direction.x = v
        elif key is Key.UP:
            self.direction.y = -v
        elif key is Key.DOWN:
            self.direction.y = v

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds in fixed steps."""
        self._acc += min(dt, MAX_FRAME)
        while self._acc >= STEP:
            steer = Vec2(self.direction.x * SPEED, self.direction.y * SPEED)
            self.body.pos = self.body.pos.add(steer.mul(STEP))
            self.body.update(STEP)
            bounce(self.body, float(self.width), float(self.height))
            self._acc -= STEP

    def render(self, canvas: Canvas) -> None:
        """Clear the canvas and draw the square."""
        canvas.clear(BACKGROUND)
        canvas.fill_rect(
            int(self.body.pos.x),
            int(self.body.pos.y),
            int(self.body.size.x),
            int(self.body.size.y),
            BODY_COLOR,
        )


def main(argv: list[str] | None = None) -> int:
    """Open the playground window and run until it is closed."""
    argparse.ArgumentParser(
        prog="daniengine-playground", description="Steer a bouncing square."
    ).parse_args(argv)

    from daniengine.pixels import PixelCanvas
    from daniengine.window import Window

    window = Window(320, 180, 3, "DaniEngine • Playground")
    canvas = PixelCanvas(320, 180, on_present=window.present)
    app = Playground(*canvas.size())
    inp = Input()
    last = time.perf_counter()
    try:
        while True:
            if window.poll_events(inp):
                return 0
            for key in _ARROWS:
                if inp.just_pressed(key):
                    app.handle_key(key, True)
                elif inp.just_released(key):
                    app.handle_key(key, False)

            now = time.perf_counter()
            app.update(now - last)
            last = now

            app.render(canvas)
            try:
                canvas.present()
            except Exception as exc:  # noqa: BLE001
                print(f"present error: {exc}", file=sys.stderr)
                return 1
    finally:
        window.close()


if __name__ == "__main__":
    sys.exit(main())