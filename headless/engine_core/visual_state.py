"""
Visual State - Named nodes, the per-instance registry, and derivation.

A component is always in exactly one visual node. Which one is decided by
a priority chain of (node name, predicate) pairs evaluated against the
full data snapshot: the first matching predicate wins, "idle" otherwise.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence
import logging

if TYPE_CHECKING:
    from .component import HeadlessComponent
    from .state import DataState

logger = logging.getLogger(__name__)


IDLE = "idle"
HOVERED = "hovered"
FOCUSED = "focused"
PRESSED = "pressed"
DISABLED = "disabled"
LOADING = "loading"
ERROR = "error"

DEFAULT_STATE_NAMES = (IDLE, HOVERED, FOCUSED, PRESSED, DISABLED, LOADING, ERROR)


StatePredicate = Callable[["DataState"], bool]
PriorityChain = Sequence[tuple[str, StatePredicate]]


def _is_disabled(state: DataState) -> bool:
    return state.is_disabled


def _is_loading(state: DataState) -> bool:
    return state.is_loading


def _has_error(state: DataState) -> bool:
    return bool(state.error)


def _is_pressed(state: DataState) -> bool:
    return state.is_pressed


def _is_focused(state: DataState) -> bool:
    return state.is_focused


def _is_hovered(state: DataState) -> bool:
    return state.is_hovered


PREDICATES: dict[str, StatePredicate] = {
    DISABLED: _is_disabled,
    LOADING: _is_loading,
    ERROR: _has_error,
    PRESSED: _is_pressed,
    FOCUSED: _is_focused,
    HOVERED: _is_hovered,
}


def priority(*names: str) -> tuple[tuple[str, StatePredicate], ...]:
    """Build a chain from default node names, highest priority first."""
    return tuple((name, PREDICATES[name]) for name in names)


# disabled > loading > error > pressed > focused > hovered > idle
DEFAULT_PRIORITY = priority(DISABLED, LOADING, ERROR, PRESSED, FOCUSED, HOVERED)


def select_visual_state(chain: PriorityChain, state: DataState, fallback: str = IDLE) -> str:
    """Name of the first node whose predicate holds for state."""
    for name, predicate in chain:
        if predicate(state):
            return name
    return fallback


class VisualStateNode:
    """
    One named visual state.

    Subclass and override enter()/exit() for side effects, or
    get_css_classes() for a custom class list.
    """

    def __init__(
        self,
        name: str,
        component: HeadlessComponent | None = None,
        classes: Iterable[str] | None = None,
    ):
        self.name = name
        self.component = component
        self._classes = list(classes) if classes is not None else None

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        pass

    def get_css_classes(self) -> list[str]:
        if self._classes is not None:
            return list(self._classes)
        return [self.name]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class VisualStateRegistry:
    """Nodes known to one component plus the current node."""

    def __init__(self):
        self._nodes: dict[str, VisualStateNode] = {}
        self._current: VisualStateNode | None = None

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def current(self) -> VisualStateNode | None:
        return self._current

    def names(self) -> list[str]:
        return list(self._nodes)

    def register(self, name: str, node: VisualStateNode) -> None:
        """Add or replace a node. Replacing the current node keeps the old one current."""
        self._nodes[name] = node

    def get(self, name: str) -> VisualStateNode | None:
        return self._nodes.get(name)

    def transition_to(self, name: str) -> bool:
        """
        Make the named node current.

        Returns True only for a real transition: the outgoing node's exit()
        and the incoming node's enter() have run. Unknown names and the
        already-current node return False without side effects.
        """
        node = self._nodes.get(name)
        if node is None:
            logger.warning(
                "Visual state %r not found. Available states: %s",
                name, ", ".join(self._nodes),
            )
            return False

        if node is self._current:
            return False

        previous = self._current
        if previous is not None:
            previous.exit()
        self._current = node
        node.enter()
        logger.debug(
            "Visual transition %s -> %s",
            previous.name if previous else None, name,
        )
        return True


    def restore(self, node: VisualStateNode | None) -> None:
        """Put node back as current without running any hooks."""
        self._current = node


def default_nodes(component: Any = None) -> dict[str, VisualStateNode]:
    """Fresh instances of the built-in nodes for one component."""
    return {name: VisualStateNode(name, component) for name in DEFAULT_STATE_NAMES}
