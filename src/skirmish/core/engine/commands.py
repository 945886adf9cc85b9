"""Commands a host submits to the battle engine.

The set is closed: MoveCommand, AttackCommand and EndTurnCommand. Anything
else handed to the engine is a programmer error.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from ..data import AttackType, Vector2

if TYPE_CHECKING:
    from ...game.entities.combatant import CombatantId


class CommandType(Enum):
    """Kinds of command the engine resolves."""
    MOVE = auto()
    ATTACK = auto()
    END_TURN = auto()


@dataclass(frozen=True)
class Command(ABC):
    """Base class for all battle commands."""
    actor_id: "CombatantId"
    command_type: CommandType = field(init=False)


@dataclass(frozen=True)
class MoveCommand(Command):
    """Move the actor to a destination cell."""
    destination: Vector2

    def __post_init__(self):
        object.__setattr__(self, 'command_type', CommandType.MOVE)


@dataclass(frozen=True)
class AttackCommand(Command):
    """Attack a target with a melee or ranged attack."""
    target_id: "CombatantId"
    attack_type: AttackType = AttackType.MELEE

    def __post_init__(self):
        object.__setattr__(self, 'command_type', CommandType.ATTACK)


@dataclass(frozen=True)
class EndTurnCommand(Command):
    """End the actor's turn and pass to the next living combatant."""

    def __post_init__(self):
        object.__setattr__(self, 'command_type', CommandType.END_TURN)
