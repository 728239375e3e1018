"""
Headless accordion: a set of collapsible items.

SINGLE mode keeps at most one item open; clicking the open item closes it
only when collapsible. MULTIPLE mode toggles each item independently.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState
from ..engine_core.visual_state import DISABLED, ERROR, FOCUSED, priority
from .base import Widget
from .strategies import AccordionToggleItemStrategy, FocusStrategy


class AccordionType(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class AccordionState(DataState):
    open_items: tuple[str, ...] = ()
    type: AccordionType = AccordionType.SINGLE
    collapsible: bool = False

    def __post_init__(self):
        object.__setattr__(self, "open_items", tuple(self.open_items))
        object.__setattr__(self, "type", AccordionType(self.type))

    @property
    def allows_multiple(self) -> bool:
        return self.type == AccordionType.MULTIPLE


class HeadlessAccordion(Widget[AccordionState]):
    widget_type = "accordion"
    visual_priority = priority(DISABLED, ERROR, FOCUSED)

    def define_initial_state(self) -> AccordionState:
        return AccordionState()

    def setup_default_strategies(self) -> None:
        super().setup_default_strategies()
        self.register_strategy("toggleItem", AccordionToggleItemStrategy())
        self.register_strategy("focus", FocusStrategy())

    def get_data_attributes(self) -> dict[str, Any]:
        return {
            "data-disabled": self.state.is_disabled,
            "data-type": self.state.type,
            "data-collapsible": self.state.collapsible,
            **self._error_attributes(),
            "data-focused": self.state.is_focused,
        }

    def toggle_item(
        self,
        item_id: str,
        item_disabled: bool = False,
        original_event: Any = None,
    ) -> InteractionResult:
        return self.handle_interaction("toggleItem", {
            "item_id": item_id,
            "item_disabled": item_disabled,
            "original_event": original_event,
        })

    def is_open(self, item_id: str) -> bool:
        return item_id in self.state.open_items

    def set_open_items(self, open_items: Iterable[str]) -> None:
        self.set_state(open_items=tuple(open_items))

    def set_type(self, accordion_type: AccordionType | str) -> None:
        """Switching to SINGLE keeps only the first open item."""
        accordion_type = AccordionType(accordion_type)
        open_items = self.state.open_items
        if accordion_type == AccordionType.SINGLE and len(open_items) > 1:
            self.set_state(type=accordion_type, open_items=open_items[:1])
        else:
            self.set_state(type=accordion_type)

    def set_collapsible(self, collapsible: bool) -> None:
        self.set_state(collapsible=collapsible)
