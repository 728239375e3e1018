"""Headless button: click, hover, focus, press and keyboard activation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from .base import KeyboardMixin, PointerMixin, Widget
from .strategies import ButtonClickStrategy, ButtonKeyboardStrategy, FocusStrategy, HoverStrategy


@dataclass(frozen=True)
class ButtonState(DataState):
    """A button has only the common fields."""


class HeadlessButton(PointerMixin, KeyboardMixin, Widget[ButtonState]):
    widget_type = "button"

    def define_initial_state(self) -> ButtonState:
        return ButtonState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("click", ButtonClickStrategy())
        self.register_strategy("hover", HoverStrategy())
        self.register_strategy("focus", FocusStrategy())
        self.register_strategy("keyboard", ButtonKeyboardStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-disabled": self.state.is_disabled,
            "data-loading": self.state.is_loading,
            **self._error_attributes(),
        }

    def click(self, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("click", {"original_event": original_event})

    def set_loading(self, loading: bool) -> None:
        self.set_state(is_loading=loading)
