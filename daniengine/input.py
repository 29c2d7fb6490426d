"""Keyboard and mouse state with action and axis bindings.

Mouse position is set by the caller in canvas coordinates; events only
update buttons, keys and the wheel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto

from daniengine.math import Vec2


class Key(Enum):
    """Keyboard keys."""

    KEY1 = auto()
    KEY2 = auto()
    KEY3 = auto()
    KEY4 = auto()
    KEY5 = auto()
    KEY6 = auto()
    KEY7 = auto()
    KEY8 = auto()
    KEY9 = auto()
    KEY0 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ESCAPE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    BACK = auto()
    RETURN = auto()
    SPACE = auto()
    TAB = auto()
    MINUS = auto()
    EQUALS = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LSHIFT = auto()
    RSHIFT = auto()
    LCONTROL = auto()
    RCONTROL = auto()
    LALT = auto()
    RALT = auto()
    LWIN = auto()
    RWIN = auto()


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class Mods(Flag):
    """Modifier key flags."""

    SHIFT = 0b0001
    CTRL = 0b0010
    ALT = 0b0100
    SUPER = 0b1000


class ElementState(Enum):
    """Whether a key or button went down or up."""

    PRESSED = auto()
    RELEASED = auto()


@dataclass(frozen=True)
class KeyChord:
    """A key together with the modifiers it requires."""

    key: Key
    mods: Mods = Mods(0)


@dataclass(frozen=True)
class KeyboardEvent:
    """A key changed state; ``key`` is None for keys with no known code."""

    key: Key | None
    state: ElementState


@dataclass(frozen=True)
class MouseButtonEvent:
    """A mouse button changed state."""

    button: MouseButton
    state: ElementState


@dataclass(frozen=True)
class MouseWheelEvent:
    """Wheel scroll: ``y`` is in lines, or in pixels when ``pixels`` is set."""

    y: float
    pixels: bool = False


@dataclass
class Input:
    """Per-frame keyboard and mouse state with named bindings."""

    mouse_pos: Vec2 = field(default_factory=Vec2)
    mouse_delta: Vec2 = field(default_factory=Vec2)
    wheel_delta: float = 0.0
    _pressed_now: set[Key] = field(default_factory=set, repr=False)
    _pressed_prev: set[Key] = field(default_factory=set, repr=False)
    _mouse_now: set[MouseButton] = field(default_factory=set, repr=False)
    _mouse_prev: set[MouseButton] = field(default_factory=set, repr=False)
    _actions: dict[str, list[KeyChord]] = field(default_factory=dict, repr=False)
    _axes: dict[str, list[tuple[Key, float]]] = field(default_factory=dict, repr=False)

    def begin_frame(self) -> None:
        """Start a new frame; call before handling the frame's events."""
        self._pressed_prev = set(self._pressed_now)
        self._mouse_prev = set(self._mouse_now)
        self.mouse_delta = Vec2()
        self.wheel_delta = 0.0

    def handle_event(self, event: object) -> None:
        """Apply a keyboard, mouse button or wheel event; others are ignored."""
        match event:
            case KeyboardEvent(key=None):
                pass
            case KeyboardEvent(key=key, state=ElementState.PRESSED):
                self._pressed_now.add(key)
            case KeyboardEvent(key=key, state=ElementState.RELEASED):
                self._pressed_now.discard(key)
            case MouseButtonEvent(button=button, state=ElementState.PRESSED):
                self._mouse_now.add(button)
            case MouseButtonEvent(button=button, state=ElementState.RELEASED):
                self._mouse_now.discard(button)
            case MouseWheelEvent(y=y, pixels=True):
                self.wheel_delta += y / 120.0
            case MouseWheelEvent(y=y):
                self.wheel_delta += y

    def pressed(self, key: Key) -> bool:
        return key in self._pressed_now

    def just_pressed(self, key: Key) -> bool:
        return key in self._pressed_now and key not in self._pressed_prev

    def just_released(self, key: Key) -> bool:
        return key not in self._pressed_now and key in self._pressed_prev

    def mouse_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_now

    def mouse_clicked(self, button: MouseButton) -> bool:
        """True on the frame the button was released."""
        return button in self._mouse_prev and button not in self._mouse_now

    def mouse_just_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_now and button not in self._mouse_prev

    def bind_action(self, name: str, chord: KeyChord) -> None:
        """Add a chord that triggers the named action."""
        self._actions.setdefault(name, []).append(chord)

    def _chord_matches(self, chord: KeyChord, mods: Mods) -> bool:
        return not chord.mods or chord.mods == mods

    def action_pressed(self, name: str, mods: Mods) -> bool:
        return any(
            self.pressed(c.key) and self._chord_matches(c, mods)
            for c in self._actions.get(name, ())
        )

    def action_just_pressed(self, name: str, mods: Mods) -> bool:
        return any(
            self.just_pressed(c.key) and self._chord_matches(c, mods)
            for c in self._actions.get(name, ())
        )

    def bind_axis(self, name: str, key: Key, value: float) -> None:
        """Make ``key`` contribute ``value`` to the named axis while held."""
        self._axes.setdefault(name, []).append((key, value))

    def axis(self, name: str) -> float:
        """Sum of the values of the axis's held keys; 0.0 if unbound."""
        return sum(
            (value for key, value in self._axes.get(name, ()) if self.pressed(key)),
            0.0,
        )

    @staticmethod
    def chord(key: Key, mods: Mods) -> KeyChord:
        return KeyChord(key, mods)