"""Combatant records.

A combatant is an immutable snapshot. Every change (position, hit points,
death) produces a new record through the ``with_*`` helpers, so older battle
states keep pointing at the values they were built with.
"""

from dataclasses import dataclass, replace

from ...core.data import Faction, Vector2


CombatantId = str


@dataclass(frozen=True)
class Stats:
    """Combat statistics for a single combatant."""
    ac: int
    hp: int
    max_hp: int
    speed: int          # Movement budget per turn, in cardinal steps
    attack_mod: int
    damage_mod: int
    damage_die: int     # Number of sides on the damage die
    range: int          # Reach of ranged attacks, in cells

    def after_damage(self, amount: int) -> "Stats":
        """Return stats with hit points lowered by amount, floored at 0."""
        return replace(self, hp=max(self.hp - amount, 0))


@dataclass(frozen=True)
class Combatant:
    """A participant in the battle."""
    combatant_id: CombatantId
    name: str
    faction: Faction
    position: Vector2
    stats: Stats
    is_dead: bool = False

    @property
    def is_alive(self) -> bool:
        return not self.is_dead

    def with_position(self, position: Vector2) -> "Combatant":
        return replace(self, position=position)

    def with_damage(self, amount: int) -> "Combatant":
        """Apply damage and mark the combatant dead when raw hp reaches 0 or below."""
        raw_hp = self.stats.hp - amount
        return replace(
            self,
            stats=self.stats.after_damage(amount),
            is_dead=raw_hp <= 0,
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.combatant_id})"
