"""Immutable battle snapshots.

A ``BattleState`` is produced once by the host's battle setup and then only
ever replaced. Successful resolutions copy the sub-collections they change
(combatant mapping, grid occupancy) and share everything else with the
previous version, so every earlier snapshot remains valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ..data import CombatResult, Faction
from ...game.entities.combatant import Combatant, CombatantId
from ...game.map import GridState


@dataclass(frozen=True)
class BattleState:
    """A single version of an ongoing battle.

    Attributes:
        round: Round counter, starting at 1
        active_id: Combatant whose turn it is
        has_active_moved_this_turn: Whether the active combatant already moved
        initiative_order: Fixed turn order; dead entries stay and are skipped
        combatants: Every combatant ever in the battle, dead or alive
        grid: Walls and occupancy
    """
    round: int
    active_id: CombatantId
    has_active_moved_this_turn: bool
    initiative_order: tuple[CombatantId, ...]
    combatants: Mapping[CombatantId, Combatant]
    grid: GridState = field(default_factory=lambda: GridState(0, 0))

    def __post_init__(self):
        object.__setattr__(self, "initiative_order", tuple(self.initiative_order))
        if not isinstance(self.combatants, MappingProxyType):
            object.__setattr__(self, "combatants", MappingProxyType(dict(self.combatants)))

    def get_combatant(self, combatant_id: CombatantId) -> Optional[Combatant]:
        return self.combatants.get(combatant_id)

    @property
    def active_combatant(self) -> Optional[Combatant]:
        return self.combatants.get(self.active_id)

    def living_combatants(self, faction: Optional[Faction] = None) -> Iterator[Combatant]:
        """Iterate living combatants, optionally restricted to one faction."""
        for combatant in self.combatants.values():
            if combatant.is_dead:
                continue
            if faction is not None and combatant.faction != faction:
                continue
            yield combatant

    def has_living(self, faction: Faction) -> bool:
        return any(True for _ in self.living_combatants(faction))

    def evaluate_combat_result(self) -> Optional[CombatResult]:
        """Decide whether the battle is over.

        WIN when no enemy is alive, otherwise LOSE when no player is alive,
        otherwise None. Enemies are checked first, so a battle with nobody
        left alive counts as a win.
        """
        if not self.has_living(Faction.ENEMY):
            return CombatResult.WIN
        if not self.has_living(Faction.PLAYER):
            return CombatResult.LOSE
        return None

    def with_combatant(self, combatant: Combatant, grid: Optional[GridState] = None) -> BattleState:
        """Return a new state with one combatant record replaced."""
        combatants = dict(self.combatants)
        combatants[combatant.combatant_id] = combatant
        return replace(
            self,
            combatants=MappingProxyType(combatants),
            grid=grid if grid is not None else self.grid,
        )
