"""
Movement resolution.

Validates a move against the grid and the actor's speed, then produces the
next battle state with the actor relocated.
"""
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from ..core.data.data_structures import Vector2
from ..core.engine import rejections
from ..core.engine.results import ActionValidation, ResolveResult
from ..core.events import Moved

if TYPE_CHECKING:
    from ..core.engine.battle_state import BattleState
    from .entities.combatant import Combatant
    from .log_manager import LogManager


class MovementResolver:
    """Handles move validation and application."""

    def __init__(self, log_manager: Optional["LogManager"] = None):
        self.log_manager = log_manager

    def validate_move(
        self, state: "BattleState", actor: "Combatant", destination: Vector2
    ) -> tuple[ActionValidation, Optional[int]]:
        """Check a move in rule order; the first failing rule wins.

        Returns:
            The validation and, when valid, the path length to the destination
        """
        grid = state.grid

        if state.has_active_moved_this_turn:
            return ActionValidation.invalid(rejections.ALREADY_MOVED), None

        if not grid.is_in_bounds(destination):
            return ActionValidation.invalid(rejections.OUT_OF_BOUNDS), None

        if destination == actor.position:
            return ActionValidation.invalid(rejections.ALREADY_AT_DESTINATION), None

        if grid.is_blocked(destination):
            return ActionValidation.invalid(rejections.DESTINATION_BLOCKED), None

        if grid.is_occupied(destination):
            return ActionValidation.invalid(rejections.DESTINATION_OCCUPIED), None

        path_length = grid.find_path_length(actor.position, destination)
        if path_length is None:
            return ActionValidation.invalid(rejections.NO_PATH), None

        if path_length > actor.stats.speed:
            return ActionValidation.invalid(rejections.PATH_TOO_LONG), path_length

        return ActionValidation.valid(), path_length

    def resolve_move(
        self, state: "BattleState", actor: "Combatant", destination: Vector2
    ) -> ResolveResult:
        validation, path_length = self.validate_move(state, actor, destination)
        if not validation.is_valid:
            return ResolveResult.rejected(state, validation.reason)

        origin = actor.position
        grid = state.grid.with_moved_occupant(origin, destination, actor.combatant_id)
        new_state = replace(
            state.with_combatant(actor.with_position(destination), grid=grid),
            has_active_moved_this_turn=True,
        )

        if self.log_manager:
            self.log_manager.movement(
                f"{actor.name} moves {origin} -> {destination} ({path_length} steps)"
            )

        return ResolveResult.success(
            new_state, [Moved(actor.combatant_id, origin, destination)]
        )
