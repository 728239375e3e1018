"""
Data State - Immutable snapshots of a widget's semantic fields.

Design principles:
- Immutable: snapshots are frozen dataclasses, every change builds a new one
- Structural equality: compared field by field, never via serialization
- Widget-agnostic: concrete widgets subclass DataState with their own fields
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, TypeVar
import logging

logger = logging.getLogger(__name__)


S = TypeVar("S", bound="DataState")


@dataclass(frozen=True)
class DataState:
    """
    Fields shared by every widget.

    error is a domain value (validation message, exception, ...), not an
    exception to raise. Anything truthy counts as "in error".
    """
    is_disabled: bool = False
    is_hovered: bool = False
    is_focused: bool = False
    is_pressed: bool = False
    is_loading: bool = False
    error: Any = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def has_error(self) -> bool:
        return bool(self.error)


def merge_state(state: S, partial: Mapping[str, Any]) -> S:
    """
    Return a new snapshot with partial merged over state.

    Keys that are not fields of the snapshot type are logged and dropped.
    """
    known = set(type(state).field_names())
    accepted = {}
    for key, value in partial.items():
        if key in known:
            accepted[key] = value
        else:
            logger.warning(
                "Ignoring unknown state field %r for %s", key, type(state).__name__
            )
    return replace(state, **accepted)


def diff_fields(previous: DataState, current: DataState) -> dict[str, tuple[Any, Any]]:
    """Map every differing field name to its (old, new) pair."""
    changes = {}
    names = dict.fromkeys(type(previous).field_names())
    names.update(dict.fromkeys(type(current).field_names()))
    for name in names:
        old = getattr(previous, name, None)
        new = getattr(current, name, None)
        if not _values_equal(old, new):
            changes[name] = (old, new)
    return changes


def structurally_equal(a: DataState, b: DataState) -> bool:
    """True when both snapshots have the same type and identical fields."""
    return type(a) is type(b) and not diff_fields(a, b)


def _values_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # bool is an int subclass; True must not equal 1 in a snapshot diff
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    try:
        return bool(a == b)
    except Exception:
        logger.debug("Falling back to identity comparison for %r", type(a).__name__)
        return False


def to_attribute_value(value: Any) -> str:
    """Coerce a value for a data attribute; booleans become 'true'/'false'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def snapshot_to_dict(state: DataState) -> dict[str, Any]:
    """Shallow field mapping of a snapshot (nested dataclasses are converted)."""
    result = {}
    for name in type(state).field_names():
        result[name] = _plain(getattr(state, name))
    return result


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    return value
