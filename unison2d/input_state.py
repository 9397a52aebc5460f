"""Raw input state that platform layers feed native events into."""

from __future__ import annotations

from unison2d.input_types import KeyCode, MouseButton, Touch, TouchPhase
from unison2d.vec2 import Vec2


class InputState:
    """Keyboard, mouse and touch state, with per-frame edge tracking."""

    def __init__(self) -> None:
        self._keys_held: set[KeyCode] = set()
        self._keys_just_pressed: set[KeyCode] = set()
        self._keys_just_released: set[KeyCode] = set()

        self._mouse_pos: Vec2 = Vec2.ZERO
        self._mouse_held: set[MouseButton] = set()
        self._mouse_just_pressed: set[MouseButton] = set()
        self._mouse_just_released: set[MouseButton] = set()

        self._touches: dict[int, Touch] = {}
        self._touches_just_began: list[int] = []
        self._touches_just_ended: list[int] = []

    # Frame management

    def begin_frame(self) -> None:
        """Clear per-frame flags, drop finished touches and settle the rest."""
        self._keys_just_pressed.clear()
        self._keys_just_released.clear()
        self._mouse_just_pressed.clear()
        self._mouse_just_released.clear()

        finished = (TouchPhase.ENDED, TouchPhase.CANCELLED)
        self._touches = {
            tid: t for tid, t in self._touches.items() if t.phase not in finished
        }
        for touch in self._touches.values():
            if touch.phase in (TouchPhase.BEGAN, TouchPhase.MOVED):
                touch.phase = TouchPhase.STATIONARY
        self._touches_just_began.clear()
        self._touches_just_ended.clear()

    # Keyboard queries

    def is_key_pressed(self, key: KeyCode) -> bool:
        return key in self._keys_held

    def is_key_just_pressed(self, key: KeyCode) -> bool:
        return key in self._keys_just_pressed

    def is_key_just_released(self, key: KeyCode) -> bool:
        return key in self._keys_just_released

    # Mouse queries

    def mouse_position(self) -> Vec2:
        """Current mouse position in screen coordinates."""
        return self._mouse_pos

    def is_mouse_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_held

    def is_mouse_just_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_just_pressed

    def is_mouse_just_released(self, button: MouseButton) -> bool:
        return button in self._mouse_just_released

    # Touch queries

    def active_touches(self) -> list[Touch]:
        """All touches currently tracked, including ones ending this frame."""
        return list(self._touches.values())

    def touches_just_began(self) -> list[Touch]:
        return [self._touches[t] for t in self._touches_just_began if t in self._touches]

    def touches_just_ended(self) -> list[Touch]:
        return [self._touches[t] for t in self._touches_just_ended if t in self._touches]

    def get_touch(self, touch_id: int) -> Touch | None:
        return self._touches.get(touch_id)

    # Transfer

    def copy_held_from(self, other: "InputState") -> None:
        """Take over the held keys and mouse buttons of another state."""
        self._keys_held = set(other._keys_held)
        self._mouse_held = set(other._mouse_held)

    # Platform events

    def key_pressed(self, key: KeyCode) -> None:
        if key not in self._keys_held:
            self._keys_held.add(key)
            self._keys_just_pressed.add(key)

    def key_released(self, key: KeyCode) -> None:
        if key in self._keys_held:
            self._keys_held.discard(key)
            self._keys_just_released.add(key)

    def mouse_moved(self, x: float, y: float) -> None:
        self._mouse_pos = Vec2(x, y)

    def mouse_button_pressed(self, button: MouseButton) -> None:
        if button not in self._mouse_held:
            self._mouse_held.add(button)
            self._mouse_just_pressed.add(button)

    def mouse_button_released(self, button: MouseButton) -> None:
        if button in self._mouse_held:
            self._mouse_held.discard(button)
            self._mouse_just_released.add(button)

    def touch_started(self, touch_id: int, x: float, y: float) -> None:
        self._touches[touch_id] = Touch(touch_id, Vec2(x, y), TouchPhase.BEGAN)
        self._touches_just_began.append(touch_id)

    def touch_moved(self, touch_id: int, x: float, y: float) -> None:
        touch = self._touches.get(touch_id)
        if touch is not None:
            touch.position = Vec2(x, y)
            touch.phase = TouchPhase.MOVED

    def touch_ended(self, touch_id: int) -> None:
        self._finish_touch(touch_id, TouchPhase.ENDED)

    def touch_cancelled(self, touch_id: int) -> None:
        self._finish_touch(touch_id, TouchPhase.CANCELLED)

    def _finish_touch(self, touch_id: int, phase: TouchPhase) -> None:
        touch = self._touches.get(touch_id)
        if touch is not None:
            touch.phase = phase
            self._touches_just_ended.append(touch_id)