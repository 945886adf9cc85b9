"""Centralized combat enums and constants.

This module contains all core enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Faction(Enum):
    """Side affiliation used for win/lose evaluation."""
    PLAYER = 0
    ENEMY = 1


class AttackType(Enum):
    """Fundamental attack types for combat."""
    MELEE = auto()
    RANGED = auto()


class CombatResult(Enum):
    """Outcome of a finished battle, from the player's point of view."""
    WIN = auto()
    LOSE = auto()


FACTION_NAMES = {
    Faction.PLAYER: "Player",
    Faction.ENEMY: "Enemy",
}

ATTACK_TYPE_NAMES = {
    AttackType.MELEE: "Melee",
    AttackType.RANGED: "Ranged",
}

COMBAT_RESULT_NAMES = {
    CombatResult.WIN: "Win",
    CombatResult.LOSE: "Lose",
}
