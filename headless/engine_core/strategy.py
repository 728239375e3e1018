"""
Interaction Strategy - Pluggable handlers for raw interactions.

Every strategy follows the same shape:
1. read the context's snapshot
2. refuse via InteractionResult.blocked(reason) when its guard fails
   (no state change, no semantic event)
3. otherwise call context.set_state(...) and publish a semantic event
   only if the setter reports a real change
4. return InteractionResult.done()
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping

from .schemas import InteractionResult

if TYPE_CHECKING:
    from .component import HeadlessComponent


InteractionPayload = Mapping[str, Any]


class InteractionStrategy(ABC):
    """Decides whether and how one interaction type changes a component."""

    @abstractmethod
    def handle(self, context: HeadlessComponent, payload: InteractionPayload) -> InteractionResult:
        """Process one interaction against context."""


def prevent_default(payload: InteractionPayload) -> bool:
    """Call prevent_default() on the payload's original event if it has one."""
    event = payload.get("original_event")
    hook = getattr(event, "prevent_default", None)
    if callable(hook):
        hook()
        return True
    return False
