"""
Pydantic Schemas - Shapes handed to rendering adapters.

These models are the contract at the adapter boundary:
- InteractionResult: outcome of every action method
- CSSState: class list + data attributes projection
- HistoryInfo: undo/redo cursor summary

Serialize with model_dump(by_alias=True) to get the camelCase wire names
(dataAttributes, currentPosition, canUndo, canRedo).
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


_BOUNDARY_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class InteractionResult(BaseModel):
    """Outcome of a dispatched interaction."""
    prevented: bool = False
    reason: Optional[str] = None
    handled: Optional[bool] = None

    model_config = _BOUNDARY_CONFIG

    @classmethod
    def blocked(cls, reason: str) -> InteractionResult:
        """A guard refused the interaction."""
        return cls(prevented=True, reason=reason)

    @classmethod
    def done(cls, reason: str | None = None) -> InteractionResult:
        """The interaction was accepted by its strategy."""
        return cls(prevented=False, handled=True, reason=reason)

    @classmethod
    def unhandled(cls, reason: str | None = None) -> InteractionResult:
        """Nothing consumed the interaction."""
        return cls(prevented=False, handled=False, reason=reason)


class CSSState(BaseModel):
    """CSS projection of the current visual state and data state."""
    classes: list[str] = Field(default_factory=list)
    data_attributes: dict[str, str] = Field(default_factory=dict)

    model_config = _BOUNDARY_CONFIG


class HistoryInfo(BaseModel):
    """Summary of a command history cursor."""
    length: int = 0
    current_position: int = -1
    can_undo: bool = False
    can_redo: bool = False

    model_config = _BOUNDARY_CONFIG
