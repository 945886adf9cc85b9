"""
Turn management for the fixed initiative order.

Ending a turn hands control to the next living combatant in initiative order,
wrapping around the end of the order and counting rounds as it wraps.
"""
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from ..core.engine import rejections
from ..core.engine.results import ResolveResult
from ..core.events import BattleEvent, CombatEnded, TurnBegan, TurnEnded

if TYPE_CHECKING:
    from ..core.engine.battle_state import BattleState
    from .entities.combatant import Combatant, CombatantId
    from .log_manager import LogManager


class TurnManager:
    """Manages turn progression through the initiative order."""

    def __init__(self, log_manager: Optional["LogManager"] = None):
        self.log_manager = log_manager

    def find_next_index(self, state: "BattleState", current_index: int) -> Optional[int]:
        """Scan the initiative order cyclically after current_index.

        Absent and dead entries are skipped. A full cycle comes back to
        current_index itself, so a lone survivor finds itself again.

        Returns:
            Index of the next living combatant, or None if nobody is alive
        """
        order = state.initiative_order
        for step in range(1, len(order) + 1):
            index = (current_index + step) % len(order)
            candidate = state.get_combatant(order[index])
            if candidate is None or candidate.is_dead:
                continue
            return index
        return None

    def resolve_end_turn(self, state: "BattleState", actor: "Combatant") -> ResolveResult:
        """End actor's turn and begin the next one.

        Args:
            state: Current battle state
            actor: The active combatant (already checked active and present)

        Returns:
            ResolveResult with the advanced state, or a rejection when the
            active combatant is missing from the initiative order
        """
        order = state.initiative_order
        if actor.combatant_id not in order:
            return ResolveResult.rejected(state, rejections.ACTIVE_NOT_IN_INITIATIVE)

        events: list[BattleEvent] = [TurnEnded(actor.combatant_id)]
        current_index = order.index(actor.combatant_id)

        next_id: "CombatantId" = actor.combatant_id
        round_number = state.round
        next_index = self.find_next_index(state, current_index)
        if next_index is not None:
            next_id = order[next_index]
            # Wrapped past the end of the order
            if next_index <= current_index:
                round_number += 1

        new_state = replace(
            state,
            active_id=next_id,
            round=round_number,
            has_active_moved_this_turn=False,
        )

        if self.log_manager:
            self.log_manager.turn(f"{actor.name} ends turn")
            if round_number != state.round:
                self.log_manager.turn(f"Round {round_number} begins")

        result = new_state.evaluate_combat_result()
        if result is not None:
            if self.log_manager:
                self.log_manager.battle(f"Combat ended: {result.name}")
            events.append(CombatEnded(result))
            return ResolveResult.success(new_state, events)

        if self.log_manager:
            self.log_manager.turn(f"{new_state.combatants[next_id].name} begins turn")
        events.append(TurnBegan(next_id))
        return ResolveResult.success(new_state, events)
