"""
Headless Component - The orchestrator every widget extends.

Owns, per instance:
- the current data snapshot (replaced only through set_state)
- the visual-state registry and current node
- the interaction strategy table
- the command history
- the event channel

Control flow for an action method:
    action() -> handle_interaction(type, payload) -> strategy.handle(self, payload)
             -> set_state(...) -> Command through the history
             -> re-derive visual state -> publish notifications

Construction order (consumers rely on a current visual node right away):
1. define_initial_state()
2. setup_default_states()
3. setup_default_strategies()
4. update_current_state_based_on_data() against the initial snapshot
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from copy import copy
from enum import Enum
from typing import Any, ClassVar, Generic, Mapping, TypeVar
import logging

from ..config import EngineConfig
from .command import Command, CommandHistory
from .events import CoreEvent, EventCallback, EventChannel, Subscription
from .schemas import CSSState, HistoryInfo, InteractionResult
from .state import DataState, diff_fields, merge_state, to_attribute_value
from .strategy import InteractionPayload, InteractionStrategy
from .visual_state import (
    DEFAULT_PRIORITY,
    PriorityChain,
    VisualStateNode,
    VisualStateRegistry,
    default_nodes,
    select_visual_state,
)

logger = logging.getLogger(__name__)


S = TypeVar("S", bound=DataState)


class HeadlessComponent(ABC, Generic[S]):
    """
    Base class for headless widgets.

    Subclasses provide define_initial_state(), register their strategies in
    setup_default_strategies(), and may override visual_priority,
    widget_type and get_data_attributes().
    """

    visual_priority: ClassVar[PriorityChain] = DEFAULT_PRIORITY
    widget_type: ClassVar[str | None] = None

    def __init__(self, config: EngineConfig | None = None, **initial: Any):
        self.config = config if config is not None else EngineConfig.from_env()
        self.events = EventChannel()
        self.history = CommandHistory(limit=self.config.history_limit)
        self.states = VisualStateRegistry()
        self.interaction_strategies: dict[str, InteractionStrategy] = {}

        state = self.define_initial_state()
        if initial:
            state = merge_state(state, initial)
        self._state: S = state

        self.setup_default_states()
        self.setup_default_strategies()
        self.update_current_state_based_on_data(self._state)

    # -------------------------------------------------------------------------
    # Extension hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def define_initial_state(self) -> S:
        """Snapshot the component starts from."""

    def setup_default_states(self) -> None:
        for name, node in default_nodes(self).items():
            self.add_state(name, node)

    def setup_default_strategies(self) -> None:
        """Register interaction strategies. Widgets override and call super()."""

    def get_data_attributes(self) -> dict[str, Any]:
        """Raw data attribute values keyed by kebab-case name."""
        return {}

    # -------------------------------------------------------------------------
    # Registries
    # -------------------------------------------------------------------------

    def add_state(self, name: str, node: VisualStateNode) -> None:
        self.states.register(name, node)

    def register_strategy(self, interaction_type: str, strategy: InteractionStrategy) -> None:
        """Install (or replace) the strategy for an interaction type."""
        self.interaction_strategies[interaction_type] = strategy

    @property
    def current_visual_state(self) -> VisualStateNode | None:
        return self.states.current

    @property
    def visual_state_name(self) -> str | None:
        node = self.states.current
        return node.name if node else None

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def subscribe(self, event: str | Enum, callback: EventCallback) -> Subscription:
        return self.events.subscribe(event, callback)

    def unsubscribe(self, event: str | Enum, callback: EventCallback) -> None:
        self.events.unsubscribe(event, callback)

    def notify(self, event: str | Enum, data: Any = None) -> None:
        self.events.notify(event, data)

    # -------------------------------------------------------------------------
    # Visual state
    # -------------------------------------------------------------------------

    def transition_to_state(self, name: str) -> bool:
        """Switch visual node; publishes only when the node actually changes."""
        if not self.states.transition_to(name):
            return False

        self.notify(CoreEvent.STATE_TRANSITION, {
            "state_name": name,
            "state": self.get_state(),
        })
        self.notify(CoreEvent.CSS_STATE_CHANGED, self.get_css_state())
        return True

    def update_current_state_based_on_data(self, state: S) -> None:
        self.transition_to_state(select_visual_state(self.visual_priority, state))

    # -------------------------------------------------------------------------
    # Data state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> S:
        """Live snapshot. Frozen, but prefer get_state() outside the engine."""
        return self._state

    def get_state(self) -> S:
        return copy(self._state)

    def set_state(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> bool:
        """
        Merge changes into the snapshot and record the change as a command.

        Returns False (and does nothing) when the merged snapshot is
        structurally equal to the current one.
        """
        updates = dict(partial or {})
        updates.update(changes)

        previous = self._state
        candidate = merge_state(previous, updates)
        changed = diff_fields(previous, candidate)
        if not changed:
            return False

        command = Command.from_snapshots(
            self._apply_snapshot, previous, candidate, changes=changed,
        )
        self.history.execute(command)
        return True

    def _apply_snapshot(self, snapshot: S) -> None:
        """Install snapshot; if a node hook raises, the old snapshot and node come back."""
        previous_state, previous_node = self._state, self.states.current
        self._state = snapshot
        try:
            self.update_current_state_based_on_data(self._state)
        except Exception:
            self._state = previous_state
            self.states.restore(previous_node)
            raise
        self.notify(CoreEvent.STATE_CHANGED, self.get_state())

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def get_widget_type(self) -> str:
        if self.widget_type:
            return self.widget_type
        name = type(self).__name__
        if name.startswith("Headless"):
            name = name[len("Headless"):]
        return name.lower()

    def get_css_state(self) -> CSSState:
        node = self.states.current
        state_classes = node.get_css_classes() if node else []
        attributes = {
            key: to_attribute_value(value)
            for key, value in self.get_data_attributes().items()
        }
        return CSSState(
            classes=[self.config.base_class, *state_classes, self.get_widget_type()],
            data_attributes=attributes,
        )

    # -------------------------------------------------------------------------
    # Interactions
    # -------------------------------------------------------------------------

    def handle_interaction(
        self,
        interaction_type: str,
        payload: InteractionPayload | None = None,
    ) -> InteractionResult:
        """Route an interaction to its strategy; unknown types are a no-op."""
        strategy = self.interaction_strategies.get(interaction_type)
        if strategy is None:
            logger.warning(
                "No interaction strategy found for type %r on component %s",
                interaction_type, type(self).__name__,
            )
            return InteractionResult.unhandled("No strategy")
        return strategy.handle(self, payload or {})

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def undo(self) -> bool:
        result = self.history.undo()
        if result:
            self.notify(CoreEvent.HISTORY_CHANGED, self.get_history())
        return result

    def redo(self) -> bool:
        result = self.history.redo()
        if result:
            self.notify(CoreEvent.HISTORY_CHANGED, self.get_history())
        return result

    def get_history(self) -> HistoryInfo:
        return self.history.get_history()
