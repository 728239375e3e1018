"""Headless slider: a numeric value on a stepped range."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import DISABLED, ERROR, FOCUSED, HOVERED, PRESSED, priority
from .base import KeyboardMixin, PointerMixin, Widget
from .strategies import (
    FocusStrategy,
    HoverStrategy,
    SliderKeyboardStrategy,
    SliderUpdateStrategy,
    snap_to_step,
)


@dataclass(frozen=True)
class SliderState(DataState):
    value: float = 0
    min: float = 0
    max: float = 100
    step: float = 1


class HeadlessSlider(PointerMixin, KeyboardMixin, Widget[SliderState]):
    widget_type = "slider"
    # pressed means the thumb is being dragged
    visual_priority = priority(DISABLED, ERROR, PRESSED, FOCUSED, HOVERED)

    def define_initial_state(self) -> SliderState:
        return SliderState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("update", SliderUpdateStrategy())
        self.register_strategy("hover", HoverStrategy())
        self.register_strategy("focus", FocusStrategy())
        self.register_strategy("keyboard", SliderKeyboardStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        state = self.state
        return {
            "data-disabled": state.is_disabled,
            "data-focused": state.is_focused,
            "data-pressed": state.is_pressed,
            **self._error_attributes(),
            "aria-valuenow": state.value,
            "aria-valuemin": state.min,
            "aria-valuemax": state.max,
            "aria-orientation": "horizontal",
        }

    def set_value(self, value: float, original_event: Any = None) -> InteractionResult:
        """Set the value; the update strategy clamps and snaps it."""
        return self.handle_interaction("update", {"value": value, "original_event": original_event})

    def set_range(self, minimum: float, maximum: float, step: float | None = None) -> None:
        """Change the bounds (and optionally the step), re-snapping the value."""
        if step is None:
            step = self.state.step
        value = snap_to_step(self.state.value, minimum, maximum, step)
        self.set_state(min=minimum, max=maximum, step=step, value=value)
