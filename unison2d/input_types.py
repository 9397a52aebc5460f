"""Input device types: key codes, mouse buttons and touch points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from unison2d.vec2 import Vec2


class KeyCode(Enum):
    """Keyboard key codes."""

    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()

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

    DIGIT_0 = auto()
    DIGIT_1 = auto()
    DIGIT_2 = auto()
    DIGIT_3 = auto()
    DIGIT_4 = auto()
    DIGIT_5 = auto()
    DIGIT_6 = auto()
    DIGIT_7 = auto()
    DIGIT_8 = auto()
    DIGIT_9 = auto()

    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    CONTROL_LEFT = auto()
    CONTROL_RIGHT = auto()
    ALT_LEFT = auto()
    ALT_RIGHT = auto()


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class TouchPhase(Enum):
    """Lifecycle phase of a single touch."""

    BEGAN = auto()
    """Touch started this frame."""
    MOVED = auto()
    """Touch moved since last frame."""
    STATIONARY = auto()
    """Touch is active but did not move."""
    ENDED = auto()
    """Touch ended this frame."""
    CANCELLED = auto()
    """Touch was cancelled, e.g. by a system gesture."""


@dataclass
class Touch:
    """A single touch point, identified by an id that persists across frames."""

    id: int
    position: Vec2
    phase: TouchPhase