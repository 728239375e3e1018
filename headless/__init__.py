"""
Headless - Interactive State Engine for UI Widgets

A framework-agnostic engine that gives every widget instance:
- An immutable data-state snapshot
- A visual state derived from it deterministically
- Undo/redo over every data change
- Strategy-based interaction handling
- Synchronous notifications for rendering adapters

Rendering, layout and I/O belong to the adapter that consumes the engine.
"""

__version__ = "0.1.0"
