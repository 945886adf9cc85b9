"""Battle engine: the single entry point for resolving commands.

``BattleEngine.resolve`` is a pure function of (state, command) plus the
values drawn from the injected random source. It never mutates its inputs:
a successful command returns a fresh state, and a rejected one returns the
very same state object with no events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from . import rejections
from .battle_state import BattleState
from .commands import AttackCommand, Command, EndTurnCommand, MoveCommand
from .errors import (
    MissingCommandError,
    MissingRandomSourceError,
    MissingStateError,
    UnknownCommandError,
)
from .results import ActionValidation, ResolveResult
from ...game.combat_resolver import CombatResolver
from ...game.movement import MovementResolver
from ...game.turn_manager import TurnManager

if TYPE_CHECKING:
    from ..config_loader import EngineConfig
    from ..events import BattleEvent
    from .random_source import RandomSource
    from ...game.entities.combatant import Combatant, CombatantId
    from ...game.log_manager import LogManager


class BattleEngine:
    """Resolves Move, Attack and EndTurn commands against a battle state."""

    def __init__(self, rng: RandomSource, log_manager: Optional[LogManager] = None):
        if rng is None:
            raise MissingRandomSourceError()

        self.rng = rng
        self.log_manager = log_manager
        self.movement = MovementResolver(log_manager)
        self.combat = CombatResolver(rng, log_manager)
        self.turns = TurnManager(log_manager)

    @classmethod
    def from_config(cls, rng: RandomSource, config: EngineConfig) -> BattleEngine:
        """Create an engine logging through a LogManager built from config."""
        return cls(rng, log_manager=config.create_log_manager())

    def resolve(self, state: BattleState, command: Command) -> ResolveResult:
        """Resolve one command.

        Raises:
            MissingStateError: state is None
            MissingCommandError: command is None
            UnknownCommandError: command is not a Move, Attack or EndTurn command
        """
        if state is None:
            raise MissingStateError()
        if command is None:
            raise MissingCommandError()

        if isinstance(command, MoveCommand):
            result = self._resolve_move(state, command)
        elif isinstance(command, AttackCommand):
            result = self._resolve_attack(state, command)
        elif isinstance(command, EndTurnCommand):
            result = self._resolve_end_turn(state, command)
        else:
            raise UnknownCommandError(command)

        if result.is_rejected and self.log_manager:
            self.log_manager.warning(
                f"Rejected {command.command_type.name} by {command.actor_id}: {result.rejection_reason}"
            )
        return result

    # ============== Command resolvers ==============

    def _resolve_move(self, state: BattleState, command: MoveCommand) -> ResolveResult:
        actor = state.get_combatant(command.actor_id)
        validation = self._validate_active_actor(state, command.actor_id, actor)
        if not validation.is_valid:
            return ResolveResult.rejected(state, validation.reason)

        return self.movement.resolve_move(state, actor, command.destination)

    def _resolve_attack(self, state: BattleState, command: AttackCommand) -> ResolveResult:
        actor = state.get_combatant(command.actor_id)
        validation = self._validate_active_actor(state, command.actor_id, actor)
        if not validation.is_valid:
            return ResolveResult.rejected(state, validation.reason)

        return self.combat.resolve_attack(state, actor, command.target_id, command.attack_type)

    def _resolve_end_turn(self, state: BattleState, command: EndTurnCommand) -> ResolveResult:
        # Ending a turn only needs the actor to be active and present.
        actor = state.get_combatant(command.actor_id)
        validation = self._validate_active_actor(
            state, command.actor_id, actor, require_alive=False
        )
        if not validation.is_valid:
            return ResolveResult.rejected(state, validation.reason)

        return self.turns.resolve_end_turn(state, actor)

    @staticmethod
    def _validate_active_actor(
        state: BattleState,
        actor_id: CombatantId,
        actor: Optional[Combatant],
        require_alive: bool = True,
    ) -> ActionValidation:
        if actor_id != state.active_id:
            return ActionValidation.invalid(rejections.ACTOR_NOT_ACTIVE)
        if actor is None:
            return ActionValidation.invalid(rejections.ACTOR_NOT_FOUND)
        if require_alive and actor.is_dead:
            return ActionValidation.invalid(rejections.ACTOR_DEAD)
        return ActionValidation.valid()


def replay(
    engine: BattleEngine, state: BattleState, commands: Iterable[Command]
) -> tuple[BattleState, list[BattleEvent], list[str]]:
    """Resolve commands in order, as a host would.

    Rejected commands leave the state untouched and are collected instead of
    stopping the run.

    Returns:
        Final state, all events in order, and every rejection reason seen
    """
    events: list[BattleEvent] = []
    rejected: list[str] = []

    for command in commands:
        result = engine.resolve(state, command)
        if result.is_rejected:
            rejected.append(result.rejection_reason)
            continue
        state = result.new_state
        events.extend(result.events)

    return state, events, rejected
