import string

from unison2d.input_state import InputState
from unison2d.input_types import KeyCode, MouseButton, Touch, TouchPhase
from unison2d.vec2 import Vec2


def test_every_letter_key_is_tracked_independently():
    letters = [getattr(KeyCode, ch) for ch in string.ascii_uppercase]
    state = InputState()
    for key in letters:
        state.key_pressed(key)
    assert all(state.is_key_pressed(key) for key in letters)
    state.key_released(KeyCode.A)
    assert not state.is_key_pressed(KeyCode.A)
    assert state.is_key_pressed(KeyCode.Z)


def test_every_digit_key_is_tracked_independently():
    digits = [KeyCode[f"DIGIT_{d}"] for d in string.digits]
    state = InputState()
    state.key_pressed(digits[3])
    assert state.is_key_pressed(digits[3])
    assert [state.is_key_pressed(k) for k in digits].count(True) == 1


def test_mouse_buttons_are_tracked_independently():
    assert {b.name for b in MouseButton} == {"LEFT", "RIGHT", "MIDDLE"}
    state = InputState()
    state.mouse_button_pressed(MouseButton.MIDDLE)
    assert state.is_mouse_pressed(MouseButton.MIDDLE)
    assert not state.is_mouse_pressed(MouseButton.LEFT)
    assert not state.is_mouse_pressed(MouseButton.RIGHT)


def test_touch_phases_follow_lifecycle():
    state = InputState()
    state.touch_started(1, 0.0, 0.0)
    assert state.get_touch(1).phase is TouchPhase.BEGAN
    state.begin_frame()
    assert state.get_touch(1).phase is TouchPhase.STATIONARY
    assert TouchPhase.BEGAN != TouchPhase.STATIONARY


def test_key_codes_usable_as_set_members():
    state = InputState()
    state.key_pressed(KeyCode.SPACE)
    state.begin_frame()
    state.key_pressed(KeyCode.SPACE)
    assert not state.is_key_just_pressed(KeyCode.SPACE)
    state.key_pressed(KeyCode.ENTER)
    assert state.is_key_just_pressed(KeyCode.ENTER)
    assert state.is_key_pressed(KeyCode.SPACE)


def test_touch_holds_given_values():
    touch = Touch(id=7, position=Vec2(1.5, 2.5), phase=TouchPhase.BEGAN)
    assert touch.id == 7
    assert touch.position == Vec2(1.5, 2.5)
    assert touch.phase is TouchPhase.BEGAN


def test_touch_phase_can_change():
    touch = Touch(id=1, position=Vec2.ZERO, phase=TouchPhase.BEGAN)
    touch.phase = TouchPhase.MOVED
    assert touch.phase is TouchPhase.MOVED


def test_touch_equality():
    a = Touch(id=3, position=Vec2(1.0, 1.0), phase=TouchPhase.ENDED)
    b = Touch(id=3, position=Vec2(1.0, 1.0), phase=TouchPhase.ENDED)
    assert a == b