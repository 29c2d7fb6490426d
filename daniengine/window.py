"""A desktop window that shows a pixel canvas and feeds input events."""

from __future__ import annotations

import string

import pygame

from daniengine.input import (
    ElementState,
    Input,
    Key,
    KeyboardEvent,
    MouseButton,
    MouseButtonEvent,
    MouseWheelEvent,
)
from daniengine.math import Vec2
from daniengine.pixels import PixelCanvas

_KEYMAP: dict[int, Key] = {
    **{getattr(pygame, f"K_{d}"): Key[f"KEY{d}"] for d in string.digits},
    **{getattr(pygame, f"K_{c}"): Key[c.upper()] for c in string.ascii_lowercase},
    **{getattr(pygame, f"K_F{n}"): Key[f"F{n}"] for n in range(1, 13)},
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_BACKSPACE: Key.BACK,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_TAB: Key.TAB,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_EQUALS: Key.EQUALS,
    pygame.K_LEFTBRACKET: Key.LBRACKET,
    pygame.K_RIGHTBRACKET: Key.RBRACKET,
    pygame.K_LSHIFT: Key.LSHIFT,
    pygame.K_RSHIFT: Key.RSHIFT,
    pygame.K_LCTRL: Key.LCONTROL,
    pygame.K_RCTRL: Key.RCONTROL,
    pygame.K_LALT: Key.LALT,
    pygame.K_RALT: Key.RALT,
    pygame.K_LSUPER: Key.LWIN,
    pygame.K_RSUPER: Key.RWIN,
}

_BUTTONS: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def window_to_canvas(
    px: float,
    py: float,
    window_size: tuple[float, float],
    canvas_size: tuple[float, float],
) -> Vec2:
    """Map a window position to canvas coordinates.

    The canvas is assumed to be scaled uniformly and centred (letterboxed)
    in the window; the result is clamped to the canvas.
    """
    ww, wh = (float(v) for v in window_size)
    cw, ch = (float(v) for v in canvas_size)
    scale = min(ww / cw, wh / ch)
    ox = (ww - cw * scale) * 0.5
    oy = (wh - ch * scale) * 0.5
    cx = min(max((px - ox) / scale, 0.0), cw - 1.0)
    cy = min(max((py - oy) / scale, 0.0), ch - 1.0)
    return Vec2(cx, cy)


def translate_event(
    event: pygame.event.Event,
) -> KeyboardEvent | MouseButtonEvent | MouseWheelEvent | None:
    """Turn a key, mouse button or wheel event into an input event.

    Other events give None. Keys without a known code give a keyboard
    event whose key is None.
    """
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        state = ElementState.PRESSED if event.type == pygame.KEYDOWN else ElementState.RELEASED
        return KeyboardEvent(_KEYMAP.get(event.key), state)
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _BUTTONS.get(event.button)
        if button is None:
            return None
        state = (
            ElementState.PRESSED
            if event.type == pygame.MOUSEBUTTONDOWN
            else ElementState.RELEASED
        )
        return MouseButtonEvent(button, state)
    if event.type == pygame.MOUSEWHEEL:
        return MouseWheelEvent(float(event.y))
    return None


class Window:
    """A fixed-size window showing a canvas scaled up by an integer factor."""

    def __init__(self, width: int, height: int, scale: int, title: str) -> None:
        if width <= 0 or height <= 0 or scale <= 0:
            raise ValueError("window size and scale must be positive")
        self.width = width
        self.height = height
        pygame.display.init()
        self._screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)

    def poll_events(self, input: Input) -> bool:
        """Start a new input frame and apply pending events to ``input``.

        Returns True if the window has been asked to close.
        """
        input.begin_frame()
        close_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close_requested = True
            elif event.type == pygame.MOUSEMOTION:
                new_pos = window_to_canvas(
                    event.pos[0],
                    event.pos[1],
                    self._screen.get_size(),
                    (self.width, self.height),
                )
                input.mouse_delta = Vec2(
                    new_pos.x - input.mouse_pos.x, new_pos.y - input.mouse_pos.y
                )
                input.mouse_pos = new_pos
            else:
                translated = translate_event(event)
                if translated is not None:
                    input.handle_event(translated)
        return close_requested

    def present(self, canvas: PixelCanvas) -> None:
        """Scale the canvas frame to the window and show it."""
        image = pygame.image.frombuffer(canvas.frame(), canvas.size(), "RGBX")
        self._screen.blit(pygame.transform.scale(image, self._screen.get_size()), (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()