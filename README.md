# daniengine

daniengine is a small 2D engine. It is built around a low-resolution software pixel canvas.

## Modules

| Module | What it provides |
| --- | --- |
| `daniengine.math` | `Vec2`, with `add` and `mul`. |
| `daniengine.physics` | `Aabb`, with `intersects`. `Body`, with `update` and `aabb`. |
| `daniengine.canvas` | `Color`, an RGBA named tuple. `Canvas`, an abstract drawing surface. |
| `daniengine.pixels` | `PixelCanvas`, an in-memory RGBA framebuffer. |
| `daniengine.input` | `Input`, which tracks keyboard and mouse state from frame to frame. |
| `daniengine.particles` | `ParticleSystem`, a fixed-capacity pool of particles. |
| `daniengine.ui` | `Ui`, an immediate-mode UI with buttons and labels, plus text helpers. |
| `daniengine.window` | `Window`, a pygame window, and helpers for translating input. |
| `daniengine.playground` | The bouncing-square demo. |
| `daniengine.particles_demo` | The particle sandbox demo. |

### daniengine.canvas

`Canvas` declares these abstract methods: `size`, `clear`, `fill_rect`, `draw_circle`, `draw_line` and `present`.

It also has float-coordinate helpers that round their arguments:

- `fill_rect_f32`
- `draw_circle_f32`
- `draw_line_f32`

### daniengine.pixels

`PixelCanvas` implements the `Canvas` methods as follows:

- `fill_rect` draws clipped rectangles.
- `draw_line` draws Bresenham lines.
- `draw_circle` draws midpoint circle outlines.
- `present` calls an optional `on_present` callback.

Two more methods read the result back:

- `pixel(x, y)` returns one colour. It raises `IndexError` outside the canvas.
- `frame()` returns a copy of the RGBA bytes.

### daniengine.input

`Input` is fed with `KeyboardEvent`, `MouseButtonEvent` and `MouseWheelEvent` through `handle_event`.

It answers these queries about keys and mouse buttons:

- `pressed`
- `just_pressed`
- `just_released`
- `mouse_pressed`
- `mouse_clicked`
- `mouse_just_pressed`

It also supports named bindings:

- Actions: `bind_action`, `action_pressed` and `action_just_pressed`.
- Axes: `bind_axis` and `axis`.

### daniengine.particles

`ParticleSystem` supports:

- Bursts from an `EmitterConfig`.
- Gravity.
- Gravity wells.
- Collisions with a rectangle.
- Plain drawing and additive-style drawing.

### daniengine.ui

`Ui` draws buttons and labels. Text is drawn with a built-in 3x5 bitmap font. The font covers digits, a few symbols and most upper-case letters. Characters without a glyph are drawn as a box.

### daniengine.window

`Window` shows a `PixelCanvas` scaled up by an integer factor. It translates pygame events into `Input` events.

`window_to_canvas` maps window coordinates to canvas coordinates.

## Installation

```
pip install daniengine
```

## Demos

The two demos need a display. pygame is used for the window.

### Playground

```
daniengine-playground
```

This demo shows a bouncing square. The arrow keys push it around. It runs at a fixed 60 Hz time step.

### Particle sandbox

```
daniengine-particles
```

This demo is a particle sandbox with these controls:

| Control | Effect |
| --- | --- |
| Hold the left mouse button | Emit particles. |
| Hold Shift while emitting | Reverse the direction of the particles. |
| `1`, `2`, `3` | Switch between the sparkle, burst and fire presets. |
| `F` | Toggle the fountain. |
| `A` | Toggle additive blending. |
| `R` | Reset the particles. |
| `G` | Toggle the gravity well. |
| `W` | Move the gravity well to the mouse. |
| `[` and `]` | Change the well's radius. |
| `-` and `=` | Change the well's strength. |
| `Esc` | Quit. |

The on-screen buttons do the same things.

## Library use

### Drawing a particle burst

This example emits one burst, advances it by one frame and draws it into an in-memory canvas:

```python
import math

from daniengine.canvas import Color
from daniengine.particles import EmitterConfig, ParticleSystem
from daniengine.pixels import PixelCanvas

canvas = PixelCanvas(320, 180, None)
ps = ParticleSystem(1000)
ps.set_gravity(0.0, 500.0)
ps.emit_burst(
    (160.0, 90.0),
    EmitterConfig(
        count=32,
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
    ),
)
ps.update(1 / 60)

canvas.clear(Color(12, 12, 16, 255))
ps.draw(canvas)
print(len(list(ps.live_particles())))
```

The random numbers come from a fixed seed, so the same calls always give the same particles.

If you want the presets the sandbox uses, `daniengine.particles_demo.make_presets()` returns them.

### Input actions

This example binds a key to a named action and then checks the action:

```python
from daniengine.input import ElementState, Input, Key, KeyboardEvent, Mods

inp = Input()
inp.bind_action("quit", Input.chord(Key.ESCAPE, Mods(0)))

inp.begin_frame()
inp.handle_event(KeyboardEvent(Key.ESCAPE, ElementState.PRESSED))
assert inp.action_just_pressed("quit", Mods(0))
```

A chord with empty modifiers matches whatever modifiers are passed in. Any other chord matches only when the modifiers are exactly equal.

## Tests

```
pip install daniengine[test]
pytest
```