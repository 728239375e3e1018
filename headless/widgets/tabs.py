"""Headless tabs: one active tab id."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import DISABLED, ERROR, FOCUSED, priority
from .base import Widget
from .strategies import FocusStrategy, TabsActivateTabStrategy


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class TabsState(DataState):
    active_tab: str | None = None
    orientation: Orientation = Orientation.HORIZONTAL

    def __post_init__(self):
        object.__setattr__(self, "orientation", Orientation(self.orientation))


class HeadlessTabs(Widget[TabsState]):
    widget_type = "tabs"
    visual_priority = priority(DISABLED, ERROR, FOCUSED)

    def define_initial_state(self) -> TabsState:
        return TabsState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("activateTab", TabsActivateTabStrategy())
        self.register_strategy("focus", FocusStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        attributes = {
            "data-disabled": self.state.is_disabled,
            "data-orientation": self.state.orientation,
        }
        if self.state.active_tab:
            attributes["data-active-tab"] = self.state.active_tab
        attributes.update(self._error_attributes())
        attributes["data-focused"] = self.state.is_focused
        return attributes

    def activate_tab(
        self,
        tab_id: str,
        tab_disabled: bool = False,
        original_event: Any = None,
    ) -> InteractionResult:
        return self.handle_interaction("activateTab", {
            "tab_id": tab_id,
            "tab_disabled": tab_disabled,
            "original_event": original_event,
        })

    def set_active_tab(self, active_tab: str | None) -> None:
        self.set_state(active_tab=active_tab)

    def set_orientation(self, orientation: Orientation | str) -> None:
        self.set_state(orientation=Orientation(orientation))
