"""Battle resolution engine.

This package contains the command-resolution core:
- battle_state.py: Immutable battle snapshots
- commands.py: Move, Attack and EndTurn commands
- random_source.py / dice.py: Injected randomness and dice helpers
- results.py: Validation and resolution result types
- battle_engine.py: Command dispatch and the replay helper
"""

from . import rejections
from .errors import (
    EngineError,
    MissingStateError,
    MissingCommandError,
    UnknownCommandError,
    MissingRandomSourceError,
    RandomSourceError,
    RandomSourceExhausted,
)
from .random_source import RandomSource, SeededRandom, ScriptedRandom
from .dice import d20, roll_die
from .commands import Command, CommandType, MoveCommand, AttackCommand, EndTurnCommand
from .battle_state import BattleState
from .results import ActionValidation, ResolveResult
from .battle_engine import BattleEngine, replay

__all__ = [
    "rejections",
    "EngineError",
    "MissingStateError",
    "MissingCommandError",
    "UnknownCommandError",
    "MissingRandomSourceError",
    "RandomSourceError",
    "RandomSourceExhausted",
    "RandomSource",
    "SeededRandom",
    "ScriptedRandom",
    "d20",
    "roll_die",
    "Command",
    "CommandType",
    "MoveCommand",
    "AttackCommand",
    "EndTurnCommand",
    "BattleState",
    "ActionValidation",
    "ResolveResult",
    "BattleEngine",
    "replay",
]
