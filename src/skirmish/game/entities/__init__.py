"""Combatant entities and their stat blocks."""

from .combatant import Combatant, CombatantId, Stats

__all__ = ["Combatant", "CombatantId", "Stats"]
