"""
Headless checkbox: checked, unchecked, or indeterminate.

Activating an indeterminate checkbox always checks it (and clears the
indeterminate flag); otherwise it flips like a toggle. While disabled the
programmatic helpers (check, uncheck, set_indeterminate, press) do nothing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import (
    DISABLED, ERROR, FOCUSED, HOVERED, PRESSED, priority,
)
from .base import KeyboardMixin, PointerMixin, Widget
from .strategies import (
    TOGGLED,
    CheckboxKeyboardStrategy,
    CheckboxToggleStrategy,
    FocusStrategy,
    HoverStrategy,
)


@dataclass(frozen=True)
class CheckboxState(DataState):
    is_checked: bool = False
    is_indeterminate: bool = False


class HeadlessCheckbox(PointerMixin, KeyboardMixin, Widget[CheckboxState]):
    widget_type = "checkbox"
    # checked/indeterminate show up as data attributes, not visual states
    visual_priority = priority(DISABLED, ERROR, PRESSED, FOCUSED, HOVERED)

    def define_initial_state(self) -> CheckboxState:
        return CheckboxState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("click", CheckboxToggleStrategy())
        self.register_strategy("hover", HoverStrategy())
        self.register_strategy("focus", FocusStrategy())
        self.register_strategy("keyboard", CheckboxKeyboardStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-checked": self.state.is_checked,
            "data-indeterminate": self.state.is_indeterminate,
            "data-disabled": self.state.is_disabled,
            **self._error_attributes(),
        }

    def toggle(self, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("click", {"original_event": original_event})

    def check(self) -> None:
        if self.state.is_disabled:
            return
        if self.set_state(is_checked=True, is_indeterminate=False):
            self.notify(TOGGLED, {"checked": True})

    def uncheck(self) -> None:
        if self.state.is_disabled:
            return
        if self.set_state(is_checked=False, is_indeterminate=False):
            self.notify(TOGGLED, {"checked": False})

    def set_indeterminate(self, indeterminate: bool) -> None:
        """Indeterminate implies unchecked."""
        if self.state.is_disabled:
            return
        self.set_state(
            is_indeterminate=indeterminate,
            is_checked=False if indeterminate else self.state.is_checked,
        )

    def press(self, is_pressed: bool) -> None:
        if self.state.is_disabled:
            return
        super().press(is_pressed)
