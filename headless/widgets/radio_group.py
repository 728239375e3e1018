"""Headless radio group: one value chosen among options."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Mapping
import logging

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import DISABLED, ERROR, FOCUSED, priority
from .base import Widget
from .strategies import FocusStrategy, RadioItemSelectStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RadioOption:
    value: str
    label: str = ""
    disabled: bool = False

    @classmethod
    def coerce(cls, option: RadioOption | Mapping[str, Any]) -> RadioOption:
        if isinstance(option, RadioOption):
            return option
        return cls(**option)


@dataclass(frozen=True)
class RadioGroupState(DataState):
    value: str | None = None
    options: tuple[RadioOption, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(RadioOption.coerce(o) for o in self.options))

    def find_option(self, value: Any) -> RadioOption | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


class HeadlessRadioGroup(Widget[RadioGroupState]):
    widget_type = "radiogroup"
    visual_priority = priority(DISABLED, ERROR, FOCUSED)

    def define_initial_state(self) -> RadioGroupState:
        return RadioGroupState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("select", RadioItemSelectStrategy())
        self.register_strategy("focus", FocusStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-disabled": self.state.is_disabled,
            **self._error_attributes(),
            "data-focused": self.state.is_focused,
        }

    def select_option(self, value: str, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("select", {"value": value, "original_event": original_event})

    def set_options(self, options: Iterable[RadioOption | Mapping[str, Any]]) -> None:
        self.set_state(options=tuple(RadioOption.coerce(o) for o in options))

    def set_value(self, value: str | None) -> None:
        """Programmatic selection; accepts None or an enabled option's value."""
        if value is not None:
            option = self.state.find_option(value)
            if option is None or option.disabled:
                logger.warning(
                    "Attempted to set invalid or disabled value %r for %s",
                    value, type(self).__name__,
                )
                return
        self.set_state(value=value)
