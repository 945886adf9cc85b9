"""Core data structures and definitions.

This package contains fundamental data types shared by every layer:
- data_structures.py: Vector2 grid coordinates and distance helpers
- game_enums.py: Centralized enums for factions, attack types and results
"""

from .data_structures import Vector2
from .game_enums import (
    Faction,
    AttackType,
    CombatResult,
    FACTION_NAMES,
    ATTACK_TYPE_NAMES,
    COMBAT_RESULT_NAMES,
)

__all__ = [
    "Vector2",
    "Faction",
    "AttackType",
    "CombatResult",
    "FACTION_NAMES",
    "ATTACK_TYPE_NAMES",
    "COMBAT_RESULT_NAMES",
]
