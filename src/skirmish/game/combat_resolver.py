"""
Combat resolution system for executing attacks and applying damage.

This module handles attack validation, the d20 attack roll, damage rolls and
the resulting hit point, death and occupancy changes. Random numbers are
drawn in a fixed order (attack d20, damage die, crit bonus die) so a scripted
source reproduces the same events every time.
"""
from typing import TYPE_CHECKING, Optional

from ..core.data import ATTACK_TYPE_NAMES, AttackType
from ..core.engine import rejections
from ..core.engine.dice import d20, roll_die
from ..core.engine.results import ActionValidation, ResolveResult
from ..core.events import (
    AttackDeclared,
    AttackRolled,
    BattleEvent,
    CombatantDied,
    CombatEnded,
    DamageApplied,
    DamageRolled,
)

if TYPE_CHECKING:
    from ..core.engine.battle_state import BattleState
    from ..core.engine.random_source import RandomSource
    from .entities.combatant import Combatant
    from .log_manager import LogManager


CRITICAL_ROLL = 20
FUMBLE_ROLL = 1
MELEE_REACH = 1


class CombatResolver:
    """Handles actual combat execution and damage application."""

    def __init__(self, rng: "RandomSource", log_manager: Optional["LogManager"] = None):
        self.rng = rng
        self.log_manager = log_manager

    def _emit_log(self, message: str) -> None:
        if self.log_manager:
            self.log_manager.battle(message)

    @staticmethod
    def attack_reach(actor: "Combatant", attack_type: AttackType) -> int:
        """Maximum Chebyshev distance for an attack of this type."""
        if attack_type == AttackType.MELEE:
            return MELEE_REACH
        return actor.stats.range

    def validate_attack(
        self,
        state: "BattleState",
        actor: "Combatant",
        target_id: str,
        attack_type: AttackType,
    ) -> ActionValidation:
        target = state.get_combatant(target_id)
        if target is None:
            return ActionValidation.invalid(rejections.TARGET_NOT_FOUND)

        if target.is_dead:
            return ActionValidation.invalid(rejections.TARGET_DEAD)

        distance = actor.position.chebyshev_distance_to(target.position)
        if distance > self.attack_reach(actor, attack_type):
            return ActionValidation.invalid(rejections.TARGET_OUT_OF_RANGE)

        return ActionValidation.valid()

    def roll_damage(self, die: int, modifier: int, is_crit: bool) -> int:
        """Roll damage; a crit adds one more die, the modifier is not doubled."""
        total = roll_die(self.rng, die) + modifier
        if is_crit:
            total += roll_die(self.rng, die)
        return total

    def resolve_attack(
        self,
        state: "BattleState",
        actor: "Combatant",
        target_id: str,
        attack_type: AttackType,
    ) -> ResolveResult:
        """
        Execute a single-target attack.

        Args:
            state: Current battle state
            actor: The attacking combatant (already checked active and alive)
            target_id: Id of the combatant being attacked
            attack_type: Melee or ranged

        Returns:
            ResolveResult with the new state and the attack's events
        """
        validation = self.validate_attack(state, actor, target_id, attack_type)
        if not validation.is_valid:
            return ResolveResult.rejected(state, validation.reason)

        target = state.combatants[target_id]
        events: list[BattleEvent] = [
            AttackDeclared(actor.combatant_id, target.combatant_id, attack_type)
        ]

        roll = d20(self.rng)
        total = roll + actor.stats.attack_mod
        is_crit = roll == CRITICAL_ROLL
        is_hit = is_crit or (roll != FUMBLE_ROLL and total >= target.stats.ac)
        events.append(
            AttackRolled(actor.combatant_id, target.combatant_id, roll, total, is_crit, is_hit)
        )

        self._emit_log(
            f"{actor.name} {ATTACK_TYPE_NAMES[attack_type].lower()} attack on {target.name}: "
            f"d20={roll} total={total} vs AC {target.stats.ac} "
            f"-> {'critical hit' if is_crit else 'hit' if is_hit else 'miss'}"
        )

        if not is_hit:
            return ResolveResult.success(state, events)

        damage = self.roll_damage(actor.stats.damage_die, actor.stats.damage_mod, is_crit)
        events.append(DamageRolled(actor.combatant_id, target.combatant_id, damage, is_crit))

        new_state, damage_events = self.apply_damage(state, target, damage)
        events.extend(damage_events)

        result = new_state.evaluate_combat_result()
        if result is not None:
            self._emit_log(f"Combat ended: {result.name}")
            events.append(CombatEnded(result))

        return ResolveResult.success(new_state, events)

    def apply_damage(
        self, state: "BattleState", target: "Combatant", damage: int
    ) -> tuple["BattleState", list[BattleEvent]]:
        """Subtract damage from target, removing it from the grid if it dies."""
        damaged = target.with_damage(damage)
        events: list[BattleEvent] = [
            DamageApplied(target.combatant_id, damage, damaged.stats.hp)
        ]
        self._emit_log(f"{target.name} takes {damage} damage ({target.stats.hp} -> {damaged.stats.hp})")

        grid = state.grid
        if damaged.is_dead:
            grid = grid.without_occupant_at(target.position)
            events.append(CombatantDied(target.combatant_id))
            self._emit_log(f"{target.name}: Defeated")

        return state.with_combatant(damaged, grid=grid), events
