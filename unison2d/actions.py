"""Mapping of raw inputs to game-defined actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar, Union

from unison2d.input_state import InputState
from unison2d.input_types import KeyCode, MouseButton, TouchPhase
from unison2d.rect import Rect

A = TypeVar("A", bound=Hashable)


@dataclass(frozen=True)
class _KeyBinding(Generic[A]):
    key: KeyCode
    action: A


@dataclass(frozen=True)
class _MouseBinding(Generic[A]):
    button: MouseButton
    action: A


@dataclass(frozen=True)
class _TouchRegionBinding(Generic[A]):
    region: Rect
    action: A


_Binding = Union[_KeyBinding, _MouseBinding, _TouchRegionBinding]


class ActionMap(Generic[A]):
    """Binds keys, mouse buttons and touch regions to actions.

    Call :meth:`update` once per frame after the input state has been fed,
    then query actions by value.
    """

    def __init__(self) -> None:
        self._bindings: list[_Binding] = []
        self._active: set[A] = set()
        self._just_started: set[A] = set()
        self._just_ended: set[A] = set()

    def bind_key(self, key: KeyCode, action: A) -> None:
        self._bindings.append(_KeyBinding(key, action))

    def bind_mouse_button(self, button: MouseButton, action: A) -> None:
        self._bindings.append(_MouseBinding(button, action))

    def bind_touch_region(self, region: Rect, action: A) -> None:
        """Any touch inside ``region`` activates ``action``."""
        self._bindings.append(_TouchRegionBinding(region, action))

    def clear_bindings(self) -> None:
        self._bindings.clear()

    def update(self, input_state: InputState) -> None:
        """Evaluate every binding against the current input state."""
        self._active.clear()
        self._just_started.clear()
        self._just_ended.clear()

        for binding in self._bindings:
            if isinstance(binding, _KeyBinding):
                self._record(
                    binding.action,
                    input_state.is_key_pressed(binding.key),
                    input_state.is_key_just_pressed(binding.key),
                    input_state.is_key_just_released(binding.key),
                )
            elif isinstance(binding, _MouseBinding):
                self._record(
                    binding.action,
                    input_state.is_mouse_pressed(binding.button),
                    input_state.is_mouse_just_pressed(binding.button),
                    input_state.is_mouse_just_released(binding.button),
                )
            else:
                region = binding.region
                for touch in input_state.active_touches():
                    if region.contains(touch.position):
                        self._active.add(binding.action)
                        if touch.phase is TouchPhase.BEGAN:
                            self._just_started.add(binding.action)
                if any(
                    region.contains(t.position)
                    for t in input_state.touches_just_ended()
                ):
                    self._just_ended.add(binding.action)

    def _record(self, action: A, active: bool, started: bool, ended: bool) -> None:
        if active:
            self._active.add(action)
        if started:
            self._just_started.add(action)
        if ended:
            self._just_ended.add(action)

    def is_action_active(self, action: A) -> bool:
        """Whether any input bound to the action is held."""
        return action in self._active

    def is_action_just_started(self, action: A) -> bool:
        return action in self._just_started

    def is_action_just_ended(self, action: A) -> bool:
        return action in self._just_ended

    def axis_value(self, negative: A, positive: A) -> float:
        """-1.0, +1.0, or 0.0 when neither or both actions are active."""
        neg = -1.0 if self.is_action_active(negative) else 0.0
        pos = 1.0 if self.is_action_active(positive) else 0.0
        return neg + pos