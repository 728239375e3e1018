"""
Widget Strategies - Concrete interaction handlers.

Each widget variant gets its own strategy where behavior differs; no
strategy inspects the concrete widget type.

Semantic events published here:
    clicked, toggled, hoverChanged, focusChanged, valueChanged,
    itemToggled, tabActivated
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

from ..engine_core.schemas import InteractionResult
from ..engine_core.strategy import InteractionPayload, InteractionStrategy, prevent_default

if TYPE_CHECKING:
    from ..engine_core.component import HeadlessComponent


CLICKED = "clicked"
TOGGLED = "toggled"
HOVER_CHANGED = "hoverChanged"
FOCUS_CHANGED = "focusChanged"
VALUE_CHANGED = "valueChanged"
ITEM_TOGGLED = "itemToggled"
TAB_ACTIVATED = "tabActivated"

ACTIVATION_KEYS = (" ", "Enter")

REASON_DISABLED = "disabled"
REASON_DISABLED_OR_LOADING = "disabled or loading"


def snap_to_step(value: float, minimum: float, maximum: float, step: float) -> float:
    """Clamp to [minimum, maximum], round half up onto the step grid, clamp again."""
    value = max(minimum, min(maximum, value))
    if step > 0:
        value = math.floor((value - minimum) / step + 0.5) * step + minimum
    return max(minimum, min(maximum, value))


# =============================================================================
# Shared strategies
# =============================================================================

class HoverStrategy(InteractionStrategy):
    """
    Tracks is_hovered.

    While disabled the flag still follows the pointer (visual feedback)
    but hoverChanged is not published.
    """

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        is_hovered = bool(payload.get("is_hovered", False))

        if context.state.is_disabled:
            context.set_state(is_hovered=is_hovered)
            return InteractionResult.done("disabled, visual hover only")

        if context.set_state(is_hovered=is_hovered):
            context.notify(HOVER_CHANGED, {
                "is_hovered": is_hovered,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


class FocusStrategy(InteractionStrategy):
    """Tracks is_focused; a disabled component cannot take focus."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        if context.state.is_disabled:
            return InteractionResult.blocked(REASON_DISABLED)

        is_focused = bool(payload.get("is_focused", False))
        if context.set_state(is_focused=is_focused):
            context.notify(FOCUS_CHANGED, {
                "is_focused": is_focused,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


# =============================================================================
# Button
# =============================================================================

class ButtonClickStrategy(InteractionStrategy):
    """A click carries no data change; it is only announced."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled or state.is_loading:
            return InteractionResult.blocked(REASON_DISABLED_OR_LOADING)

        context.notify(CLICKED, {"original_event": payload.get("original_event")})
        return InteractionResult.done()


class ButtonKeyboardStrategy(InteractionStrategy):
    """Space/Enter activate the button."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled or state.is_loading:
            return InteractionResult.blocked(REASON_DISABLED_OR_LOADING)

        key = payload.get("key")
        if key not in ACTIVATION_KEYS:
            return InteractionResult.unhandled()

        prevent_default(payload)
        context.notify(CLICKED, {
            "triggered_by": "keyboard",
            "key": key,
            "original_event": payload.get("original_event"),
        })
        return InteractionResult.done()


# =============================================================================
# Toggle / Checkbox
# =============================================================================

class ToggleClickStrategy(InteractionStrategy):
    """Flips is_checked and publishes toggled."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled or state.is_loading:
            return InteractionResult.blocked(REASON_DISABLED_OR_LOADING)

        changes, extra = self.next_checked_state(context)
        if context.set_state(changes):
            context.notify(TOGGLED, {
                "checked": changes["is_checked"],
                **extra,
                **self.event_details(payload),
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()

    def next_checked_state(self, context: HeadlessComponent) -> tuple[dict, dict]:
        """Fields to set and extra event details for one activation."""
        return {"is_checked": not context.state.is_checked}, {}

    def event_details(self, payload: InteractionPayload) -> dict:
        return {}


class CheckboxToggleStrategy(ToggleClickStrategy):
    """Like a toggle, except an indeterminate checkbox always becomes checked."""

    def next_checked_state(self, context: HeadlessComponent) -> tuple[dict, dict]:
        if context.state.is_indeterminate:
            return {"is_checked": True, "is_indeterminate": False}, {"from_indeterminate": True}
        return {"is_checked": not context.state.is_checked}, {}


class ToggleKeyboardStrategy(ToggleClickStrategy):
    """Space/Enter toggle; other keys are left alone."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled or state.is_loading:
            return InteractionResult.blocked(REASON_DISABLED_OR_LOADING)

        if payload.get("key") not in ACTIVATION_KEYS:
            return InteractionResult.unhandled()

        prevent_default(payload)
        return super().handle(context, payload)

    def event_details(self, payload: InteractionPayload) -> dict:
        return {"triggered_by": "keyboard", "key": payload.get("key")}


class CheckboxKeyboardStrategy(ToggleKeyboardStrategy, CheckboxToggleStrategy):
    """Keyboard activation with the checkbox's indeterminate rule."""


# =============================================================================
# Input
# =============================================================================

class InputTextStrategy(InteractionStrategy):
    """Replaces the text value; validation is left to the owner."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled or state.is_read_only:
            return InteractionResult.blocked("disabled or readOnly")

        old_value = state.value
        new_value = payload.get("value", "")
        if context.set_state(value=new_value):
            context.notify(VALUE_CHANGED, {
                "old_value": old_value,
                "new_value": new_value,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


# =============================================================================
# Radio group
# =============================================================================

class RadioItemSelectStrategy(InteractionStrategy):
    """Selects an enabled option by value."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled:
            return InteractionResult.blocked(REASON_DISABLED)

        value = payload.get("value")
        option = state.find_option(value)
        if option is None:
            return InteractionResult.blocked("option not found")
        if option.disabled:
            return InteractionResult.blocked("option disabled")

        if context.set_state(value=value):
            context.notify(VALUE_CHANGED, {
                "value": value,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


# =============================================================================
# Slider
# =============================================================================

class SliderUpdateStrategy(InteractionStrategy):
    """Sets the value, snapped to the slider's range and step."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled:
            return InteractionResult.blocked(REASON_DISABLED)

        value = snap_to_step(payload.get("value", state.value), state.min, state.max, state.step)
        if context.set_state(value=value):
            context.notify(VALUE_CHANGED, {
                "value": value,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


class SliderKeyboardStrategy(InteractionStrategy):
    """Arrow keys step the value, Home/End jump to the bounds."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        if state.is_disabled:
            return InteractionResult.blocked(REASON_DISABLED)

        key = payload.get("key")
        if key in ("ArrowLeft", "ArrowDown"):
            target = state.value - state.step
        elif key in ("ArrowRight", "ArrowUp"):
            target = state.value + state.step
        elif key == "Home":
            target = state.min
        elif key == "End":
            target = state.max
        else:
            return InteractionResult.unhandled()

        prevent_default(payload)
        value = snap_to_step(target, state.min, state.max, state.step)
        if context.set_state(value=value):
            context.notify(VALUE_CHANGED, {
                "value": value,
                "triggered_by": "keyboard",
                "key": key,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


# =============================================================================
# Accordion / Tabs
# =============================================================================

class AccordionToggleItemStrategy(InteractionStrategy):
    """Opens or closes one item according to the accordion's mode."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        item_id = payload.get("item_id")
        item_disabled = bool(payload.get("item_disabled", False))

        if state.is_disabled or item_disabled:
            return InteractionResult.blocked("item disabled" if item_disabled else "group disabled")

        open_items = state.open_items
        is_open = item_id in open_items
        if state.allows_multiple:
            if is_open:
                open_items = tuple(i for i in open_items if i != item_id)
            else:
                open_items = open_items + (item_id,)
        elif not is_open:
            open_items = (item_id,)
        elif state.collapsible:
            open_items = ()

        if context.set_state(open_items=open_items):
            context.notify(ITEM_TOGGLED, {
                "item_id": item_id,
                "is_open": item_id in open_items,
                "open_items": open_items,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()


class TabsActivateTabStrategy(InteractionStrategy):
    """Makes one tab active."""

    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        state = context.state
        tab_id = payload.get("tab_id")
        tab_disabled = bool(payload.get("tab_disabled", False))

        if state.is_disabled or tab_disabled:
            return InteractionResult.blocked("tab disabled" if tab_disabled else "group disabled")

        if context.set_state(active_tab=tab_id):
            context.notify(TAB_ACTIVATED, {
                "tab_id": tab_id,
                "original_event": payload.get("original_event"),
            })
        return InteractionResult.done()
