"""Battle event definitions.

Events are the observable output of the engine: every successful resolution
returns an ordered list of them.
"""

from .events import (
    BattleEvent,
    EventType,
    AttackDeclared,
    AttackRolled,
    DamageRolled,
    DamageApplied,
    CombatantDied,
    Moved,
    TurnEnded,
    TurnBegan,
    CombatEnded,
)

__all__ = [
    "BattleEvent",
    "EventType",
    "AttackDeclared",
    "AttackRolled",
    "DamageRolled",
    "DamageApplied",
    "CombatantDied",
    "Moved",
    "TurnEnded",
    "TurnBegan",
    "CombatEnded",
]
