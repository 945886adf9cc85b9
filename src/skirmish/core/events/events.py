"""Battle events emitted by command resolution.

Event Design Principles:
- Events are immutable dataclasses that only carry plain values
  (combatant ids, positions, numbers, enums), never live records
- Every event carries an ``event_type`` tag so consumers can switch on it
- Events from a single resolution are ordered and append-only
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from ..data import AttackType, CombatResult

if TYPE_CHECKING:
    from ..data.data_structures import Vector2
    from ...game.entities.combatant import CombatantId


class EventType(Enum):
    """Types of battle events."""
    # Attack Events
    ATTACK_DECLARED = auto()
    ATTACK_ROLLED = auto()
    DAMAGE_ROLLED = auto()
    DAMAGE_APPLIED = auto()
    COMBATANT_DIED = auto()

    # Movement Events
    MOVED = auto()

    # Turn Events
    TURN_ENDED = auto()
    TURN_BEGAN = auto()

    # Battle Events
    COMBAT_ENDED = auto()


@dataclass(frozen=True)
class BattleEvent(ABC):
    """Base class for all battle events."""
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class AttackDeclared(BattleEvent):
    """An attack passed validation and is about to be rolled."""
    actor_id: "CombatantId"
    target_id: "CombatantId"
    attack_type: AttackType

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ATTACK_DECLARED)


@dataclass(frozen=True)
class AttackRolled(BattleEvent):
    """The d20 attack roll and its outcome."""
    actor_id: "CombatantId"
    target_id: "CombatantId"
    d20: int
    total: int
    is_crit: bool
    is_hit: bool

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_ROLLED)


@dataclass(frozen=True)
class DamageRolled(BattleEvent):
    """Damage rolled for a hit, including the crit bonus die."""
    actor_id: "CombatantId"
    target_id: "CombatantId"
    amount: int
    is_crit: bool

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DAMAGE_ROLLED)


@dataclass(frozen=True)
class DamageApplied(BattleEvent):
    """Damage was subtracted from the target; new_hp is already floored at 0."""
    target_id: "CombatantId"
    amount: int
    new_hp: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DAMAGE_APPLIED)


@dataclass(frozen=True)
class CombatantDied(BattleEvent):
    """The target dropped to 0 hp and left the grid."""
    target_id: "CombatantId"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_DIED)


@dataclass(frozen=True)
class Moved(BattleEvent):
    """A combatant moved from one cell to another."""
    actor_id: "CombatantId"
    from_position: "Vector2"
    to_position: "Vector2"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MOVED)


@dataclass(frozen=True)
class TurnEnded(BattleEvent):
    """The active combatant ended its turn."""
    actor_id: "CombatantId"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TURN_ENDED)


@dataclass(frozen=True)
class TurnBegan(BattleEvent):
    """A new combatant became active."""
    actor_id: "CombatantId"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TURN_BEGAN)


@dataclass(frozen=True)
class CombatEnded(BattleEvent):
    """One side has no living combatants left."""
    result: CombatResult

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBAT_ENDED)
