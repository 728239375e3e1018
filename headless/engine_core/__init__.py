"""
Engine Core - Interactive state management shared by every widget.

The engine:
1. Holds an immutable data snapshot per component
2. Derives one visual state from it via a priority chain
3. Records every data change as an undoable command
4. Routes raw interactions to pluggable strategies
5. Publishes notifications synchronously on a per-instance channel
"""

from .events import EventChannel, Subscription, CoreEvent
from .command import Command, CommandHistory
from .state import DataState, merge_state, diff_fields, structurally_equal, to_attribute_value
from .visual_state import (
    VisualStateNode,
    VisualStateRegistry,
    DEFAULT_PRIORITY,
    DEFAULT_STATE_NAMES,
    priority,
    select_visual_state,
)
from .strategy import InteractionStrategy, prevent_default
from .schemas import InteractionResult, CSSState, HistoryInfo
from .component import HeadlessComponent

__all__ = [
    "EventChannel",
    "Subscription",
    "CoreEvent",
    "Command",
    "CommandHistory",
    "DataState",
    "merge_state",
    "diff_fields",
    "structurally_equal",
    "to_attribute_value",
    "VisualStateNode",
    "VisualStateRegistry",
    "DEFAULT_PRIORITY",
    "DEFAULT_STATE_NAMES",
    "priority",
    "select_visual_state",
    "InteractionStrategy",
    "prevent_default",
    "InteractionResult",
    "CSSState",
    "HistoryInfo",
    "HeadlessComponent",
]
