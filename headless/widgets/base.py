"""
Widget Base - Action methods shared by the concrete widgets.

Mixins only forward to handle_interaction()/set_state(); the strategy
registered under the matching interaction type decides what happens.
"""

from __future__ import annotations
from typing import Any, TypeVar

from ..engine_core.component import HeadlessComponent
from ..engine_core.schemas import InteractionResult
from ..engine_core.state import DataState


S = TypeVar("S", bound=DataState)


class Widget(HeadlessComponent[S]):
    """Common setters and group-level focus."""

    def focus(self, is_focused: bool, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("focus", {
            "is_focused": is_focused,
            "original_event": original_event,
        })

    def set_disabled(self, disabled: bool) -> None:
        self.set_state(is_disabled=disabled)

    def set_error(self, error: Any) -> None:
        self.set_state(error=error)

    def _error_attributes(self) -> dict[str, Any]:
        return {"data-error": True} if self.state.error else {}


class PointerMixin:
    """hover() and press() for widgets that track the pointer."""

    def hover(self, is_hovered: bool, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("hover", {
            "is_hovered": is_hovered,
            "original_event": original_event,
        })

    def press(self, is_pressed: bool) -> None:
        self.set_state(is_pressed=is_pressed)


class KeyboardMixin:
    """keydown() routed to the "keyboard" strategy."""

    def keydown(self, key: str, original_event: Any = None) -> InteractionResult:
        return self.handle_interaction("keyboard", {
            "key": key,
            "original_event": original_event,
        })
