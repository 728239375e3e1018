"""Headless text input."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import DISABLED, ERROR, FOCUSED, priority
from .base import Widget
from .strategies import FocusStrategy, InputTextStrategy


@dataclass(frozen=True)
class InputState(DataState):
    value: str = ""
    is_read_only: bool = False
    is_valid: bool = True


class HeadlessInput(Widget[InputState]):
    widget_type = "input"
    visual_priority = priority(DISABLED, ERROR, FOCUSED)

    def define_initial_state(self) -> InputState:
        return InputState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("input", InputTextStrategy())
        self.register_strategy("focus", FocusStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-disabled": self.state.is_disabled,
            "data-readonly": self.state.is_read_only,
            "data-valid": self.state.is_valid,
            **self._error_attributes(),
        }

    def set_value(self, value: str, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("input", {"value": value, "original_event": original_event})

    def set_read_only(self, read_only: bool) -> None:
        self.set_state(is_read_only=read_only)

    def set_error(self, error: Any) -> None:
        """An error also marks the input invalid; clearing it restores validity."""
        self.set_state(error=error, is_valid=not error)
