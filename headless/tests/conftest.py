"""
Pytest fixtures for Headless tests.
"""

import pytest

from ..config import EngineConfig
from ..widgets import HeadlessButton, HeadlessToggle, HeadlessCheckbox


class EventRecorder:
    """Collects (event, data) pairs from a component's channel."""

    def __init__(self, component, *events):
        self.received = []
        self.subscriptions = [component.subscribe(e, self._record) for e in events]

    def _record(self, event, data):
        self.received.append((event, data))

    def names(self):
        return [event for event, _ in self.received]

    def payloads(self, event):
        return [data for name, data in self.received if name == event]

    def clear(self):
        self.received.clear()


class FakeKeyEvent:
    """Stands in for a framework key event exposing prevent_default()."""

    def __init__(self, key):
        self.key = key
        self.default_prevented = False

    def prevent_default(self):
        self.default_prevented = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep HEADLESS_* variables from the host out of every test."""
    for name in ("HEADLESS_HISTORY_LIMIT", "HEADLESS_BASE_CLASS", "HEADLESS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def toggle(config) -> HeadlessToggle:
    return HeadlessToggle(config=config)


@pytest.fixture
def button(config) -> HeadlessButton:
    return HeadlessButton(config=config)


@pytest.fixture
def checkbox(config) -> HeadlessCheckbox:
    return HeadlessCheckbox(config=config)


@pytest.fixture
def record():
    """Factory: record(component, *events) -> EventRecorder."""
    return EventRecorder
