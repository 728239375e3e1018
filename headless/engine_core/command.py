"""
Command System - Undoable actions and the cursor-based history.

A Command is a forward/inverse pair captured at creation time. For data
state changes both closures are built from the two snapshots, so undo and
redo reproduce the exact states seen when the change was committed.

CommandHistory invariants:
- cursor is in [-1, len - 1]
- can_undo <=> cursor >= 0
- can_redo <=> cursor < len - 1
- executing while the cursor is not at the tail drops the redo branch

The cursor moves before a command's action runs. Actions publish
notifications, and a subscriber may call back into the history; it then
sees (and extends) the history as it will be after the current step.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable
import logging
import time

from .schemas import HistoryInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """
    One committed change.

    forward re-applies the change, inverse reverts it. data carries
    arbitrary metadata (for state changes: both snapshots and the diff).
    """
    forward: Callable[[], None]
    inverse: Callable[[], None]
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    def execute(self) -> None:
        self.forward()

    def undo(self) -> None:
        self.inverse()

    @classmethod
    def from_snapshots(
        cls,
        apply: Callable[[Any], None],
        previous: Any,
        next_state: Any,
        **data: Any,
    ) -> Command:
        """Build a command that swaps between two captured snapshots."""
        return cls(
            forward=lambda: apply(next_state),
            inverse=lambda: apply(previous),
            data={"previous_state": previous, "next_state": next_state, **data},
        )


class CommandHistory:
    """
    Ordered list of commands plus a cursor.

    Unbounded unless a limit is given; with a limit the oldest command is
    evicted once the list grows past it.
    """

    def __init__(self, limit: int | None = None):
        if limit is not None and limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._commands: list[Command] = []
        self._cursor: int = -1

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def current_position(self) -> int:
        return self._cursor

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    def can_undo(self) -> bool:
        return self._cursor >= 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._commands) - 1

    def execute(self, command: Command) -> None:
        """Record command as the new tail and run its forward action."""
        del self._commands[self._cursor + 1:]
        self._commands.append(command)
        if self.limit is not None and len(self._commands) > self.limit:
            evicted = len(self._commands) - self.limit
            del self._commands[:evicted]
            logger.debug("History limit %d reached, evicted %d command(s)", self.limit, evicted)
        self._cursor = len(self._commands) - 1

        try:
            command.execute()
        except Exception:
            self._discard(command)
            raise

    def undo(self) -> bool:
        """Revert the command at the cursor. False when nothing to undo."""
        if not self.can_undo():
            return False
        command = self._commands[self._cursor]
        self._cursor -= 1
        logger.debug("Undo to position %d", self._cursor)
        try:
            command.undo()
        except Exception:
            self._cursor += 1
            raise
        return True

    def redo(self) -> bool:
        """Re-apply the command after the cursor. False when nothing to redo."""
        if not self.can_redo():
            return False
        self._cursor += 1
        command = self._commands[self._cursor]
        logger.debug("Redo to position %d", self._cursor)
        try:
            command.execute()
        except Exception:
            self._cursor -= 1
            raise
        return True

    def get_history(self) -> HistoryInfo:
        return HistoryInfo(
            length=len(self._commands),
            current_position=self._cursor,
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
        )

    def _discard(self, command: Command) -> None:
        # A failed forward action must not leave a phantom entry behind.
        for index, existing in enumerate(self._commands):
            if existing is command:
                del self._commands[index]
                if self._cursor >= index:
                    self._cursor -= 1
                break
