"""
Widgets - Concrete headless components built on the engine core.

Each widget contributes a state shape, a derivation chain, its strategy
wiring and its data attributes; the engine does the rest.
"""

from .base import Widget, PointerMixin, KeyboardMixin
from .button import HeadlessButton, ButtonState
from .toggle import HeadlessToggle, ToggleState
from .checkbox import HeadlessCheckbox, CheckboxState
from .input import HeadlessInput, InputState
from .radio_group import HeadlessRadioGroup, RadioGroupState, RadioOption
from .slider import HeadlessSlider, SliderState
from .accordion import HeadlessAccordion, AccordionState, AccordionType
from .tabs import HeadlessTabs, TabsState, Orientation

WIDGETS = {
    "button": HeadlessButton,
    "toggle": HeadlessToggle,
    "checkbox": HeadlessCheckbox,
    "input": HeadlessInput,
    "radiogroup": HeadlessRadioGroup,
    "slider": HeadlessSlider,
    "accordion": HeadlessAccordion,
    "tabs": HeadlessTabs,
}

__all__ = [
    "Widget",
    "PointerMixin",
    "KeyboardMixin",
    "HeadlessButton",
    "ButtonState",
    "HeadlessToggle",
    "ToggleState",
    "HeadlessCheckbox",
    "CheckboxState",
    "HeadlessInput",
    "InputState",
    "HeadlessRadioGroup",
    "RadioGroupState",
    "RadioOption",
    "HeadlessSlider",
    "SliderState",
    "HeadlessAccordion",
    "AccordionState",
    "AccordionType",
    "HeadlessTabs",
    "TabsState",
    "Orientation",
    "WIDGETS",
]
