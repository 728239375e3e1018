"""Headless toggle (switch): a checked flag flipped by click or Space/Enter."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from .base import KeyboardMixin, PointerMixin, Widget
from .strategies import (
    TOGGLED,
    FocusStrategy,
    HoverStrategy,
    ToggleClickStrategy,
    ToggleKeyboardStrategy,
)


@dataclass(frozen=True)
class ToggleState(DataState):
    is_checked: bool = False


class HeadlessToggle(PointerMixin, KeyboardMixin, Widget[ToggleState]):
    widget_type = "toggle"

    def define_initial_state(self) -> ToggleState:
        return ToggleState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("click", ToggleClickStrategy())
        self.register_strategy("hover", HoverStrategy())
        self.register_strategy("focus", FocusStrategy())
        self.register_strategy("keyboard", ToggleKeyboardStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-checked": self.state.is_checked,
            "data-disabled": self.state.is_disabled,
            "data-loading": self.state.is_loading,
            **self._error_attributes(),
        }

    def toggle(self, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("click", {"original_event": original_event})

    def check(self) -> None:
        """Programmatic check; publishes toggled only on a real change."""
        if self.set_state(is_checked=True):
            self.notify(TOGGLED, {"checked": True})

    def uncheck(self) -> None:
        if self.set_state(is_checked=False):
            self.notify(TOGGLED, {"checked": False})

    def set_loading(self, loading: bool) -> None:
        self.set_state(is_loading=loading)
