"""
Event Channel - Synchronous publish/subscribe for component notifications.

Delivery rules:
- notify() iterates over a snapshot of the subscriber list, so callbacks
  may subscribe or unsubscribe (even themselves) during delivery
- a failing callback is logged and skipped; delivery continues and the
  exception never reaches the caller of notify()
- everything runs in the caller's stack frame
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


EventCallback = Callable[[str, Any], None]


class CoreEvent(str, Enum):
    """Events published by every component."""
    STATE_CHANGED = "stateChanged"
    CSS_STATE_CHANGED = "cssStateChanged"
    STATE_TRANSITION = "stateTransition"
    HISTORY_CHANGED = "historyChanged"


def event_name(event: str | Enum) -> str:
    """Normalize an event key to its published string name."""
    if isinstance(event, Enum):
        return str(event.value)
    return event


@dataclass
class Subscription:
    """
    Handle returned by subscribe().

    Calling it (or cancel()) removes the callback. Safe to call repeatedly.
    """
    channel: EventChannel
    event: str
    callback: EventCallback
    _active: bool = field(default=True, repr=False)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self.channel.unsubscribe(self.event, self.callback)

    def __call__(self) -> None:
        self.cancel()


class EventChannel:
    """Per-instance observer registry keyed by event name."""

    def __init__(self):
        self._observers: dict[str, list[EventCallback]] = {}

    def subscribe(self, event: str | Enum, callback: EventCallback) -> Subscription:
        """Register callback(event, data) for an event; returns the unsubscriber."""
        name = event_name(event)
        self._observers.setdefault(name, []).append(callback)
        return Subscription(channel=self, event=name, callback=callback)

    def unsubscribe(self, event: str | Enum, callback: EventCallback) -> None:
        """Remove one registration of callback. Unknown callbacks are ignored."""
        callbacks = self._observers.get(event_name(event))
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def notify(self, event: str | Enum, data: Any = None) -> None:
        """Deliver data to every callback registered when delivery starts."""
        name = event_name(event)
        callbacks = self._observers.get(name)
        if not callbacks:
            return

        for callback in list(callbacks):
            try:
                callback(name, data)
            except Exception:
                logger.exception("Error in observer callback for event %r", name)

    def has_subscribers(self, event: str | Enum) -> bool:
        return bool(self._observers.get(event_name(event)))

    def subscriber_count(self, event: str | Enum) -> int:
        return len(self._observers.get(event_name(event), ()))
