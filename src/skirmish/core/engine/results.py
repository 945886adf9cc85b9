"""Result types for validation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..events import BattleEvent
    from .battle_state import BattleState


@dataclass
class ActionValidation:
    """Result of validating a command against a state."""

    is_valid: bool
    reason: str = ""

    @classmethod
    def valid(cls) -> ActionValidation:
        """Create a valid result."""
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> ActionValidation:
        """Create an invalid result with reason."""
        return cls(is_valid=False, reason=reason)


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of resolving one command.

    On success ``new_state`` is the next battle version and ``events`` lists
    what happened in order. On rejection ``new_state`` is the exact input state
    object, ``events`` is empty and ``rejection_reason`` says why.
    """
    new_state: BattleState
    events: tuple[BattleEvent, ...] = field(default_factory=tuple)
    rejection_reason: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "events", tuple(self.events))

    @property
    def is_rejected(self) -> bool:
        return self.rejection_reason is not None

    @classmethod
    def success(cls, new_state: BattleState, events: list[BattleEvent]) -> ResolveResult:
        return cls(new_state=new_state, events=tuple(events))

    @classmethod
    def rejected(cls, state: BattleState, reason: str) -> ResolveResult:
        return cls(new_state=state, events=(), rejection_reason=reason)
