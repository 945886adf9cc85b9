"""
Tests for damage application, death and combat end.
"""
from skirmish.core.data import AttackType, CombatResult, Faction, Vector2
from skirmish.core.engine import AttackCommand
from skirmish.core.events import (
    AttackDeclared,
    AttackRolled,
    CombatantDied,
    CombatEnded,
    DamageApplied,
    DamageRolled,
)
from tests.test_utils import (
    GOBLIN_ID,
    GOBLIN_START,
    HERO_ID,
    HERO_START,
    BattleStateBuilder,
    make_combatant,
)


HERO_ATTACKS_GOBLIN = AttackCommand(HERO_ID, GOBLIN_ID, AttackType.MELEE)


class TestDamage:
    """Damage amounts and hit point changes."""

    def test_damage_reduces_hp(self, default_state, engine_with):
        result = engine_with(12, 3).resolve(default_state, HERO_ATTACKS_GOBLIN)

        goblin = result.new_state.combatants[GOBLIN_ID]
        assert goblin.stats.hp == 4
        assert goblin.is_alive
        assert result.events[-1] == DamageApplied(GOBLIN_ID, 6, 4)
        assert result.new_state.grid.occupant_at(GOBLIN_START) == GOBLIN_ID

    def test_crit_doubles_die_not_modifier(self, engine_with):
        state = BattleStateBuilder().with_stats(GOBLIN_ID, hp=100, max_hp=100).build()
        result = engine_with(20, 5, 6).resolve(state, HERO_ATTACKS_GOBLIN)

        damage = [e for e in result.events if isinstance(e, DamageRolled)][0]
        # 5 + 3 + 6, not (5 + 3) * 2 or 5 + 6 + 3 + 3
        assert damage.amount == 14
        assert result.new_state.combatants[GOBLIN_ID].stats.hp == 86

    def test_overkill_clamps_hp_at_zero(self, engine_with):
        state = BattleStateBuilder().with_stats(GOBLIN_ID, hp=2).build()
        result = engine_with(12, 8).resolve(state, HERO_ATTACKS_GOBLIN)

        assert DamageApplied(GOBLIN_ID, 11, 0) in result.events
        assert result.new_state.combatants[GOBLIN_ID].stats.hp == 0

    def test_hit_emits_events_in_order(self, default_state, engine_with):
        result = engine_with(12, 3).resolve(default_state, HERO_ATTACKS_GOBLIN)
        assert result.events == (
            AttackDeclared(HERO_ID, GOBLIN_ID, AttackType.MELEE),
            AttackRolled(HERO_ID, GOBLIN_ID, 12, 17, False, True),
            DamageRolled(HERO_ID, GOBLIN_ID, 6, False),
            DamageApplied(GOBLIN_ID, 6, 4),
        )

    def test_attacker_record_is_shared(self, default_state, engine_with):
        result = engine_with(12, 3).resolve(default_state, HERO_ATTACKS_GOBLIN)
        assert result.new_state.combatants[HERO_ID] is default_state.combatants[HERO_ID]
        assert default_state.combatants[GOBLIN_ID].stats.hp == 10


class TestDeath:
    """Lethal damage marks the target dead and clears its cell."""

    def test_crit_kill_sequence(self, default_state, engine_with):
        result = engine_with(20, 6, 6).resolve(default_state, HERO_ATTACKS_GOBLIN)

        assert result.events == (
            AttackDeclared(HERO_ID, GOBLIN_ID, AttackType.MELEE),
            AttackRolled(HERO_ID, GOBLIN_ID, 20, 25, True, True),
            DamageRolled(HERO_ID, GOBLIN_ID, 15, True),
            DamageApplied(GOBLIN_ID, 15, 0),
            CombatantDied(GOBLIN_ID),
            CombatEnded(CombatResult.WIN),
        )

        goblin = result.new_state.combatants[GOBLIN_ID]
        assert goblin.is_dead
        assert goblin.stats.hp == 0
        assert not result.new_state.grid.is_occupied(goblin.position)

    def test_dead_record_is_kept(self, default_state, engine_with):
        result = engine_with(20, 6, 6).resolve(default_state, HERO_ATTACKS_GOBLIN)

        assert GOBLIN_ID in result.new_state.combatants
        assert result.new_state.combatants[GOBLIN_ID].position == GOBLIN_START
        assert result.new_state.initiative_order == default_state.initiative_order

    def test_exactly_zero_hp_dies(self, engine_with):
        state = BattleStateBuilder().with_stats(GOBLIN_ID, hp=6).build()
        result = engine_with(12, 3).resolve(state, HERO_ATTACKS_GOBLIN)

        assert result.new_state.combatants[GOBLIN_ID].is_dead
        assert DamageApplied(GOBLIN_ID, 6, 0) in result.events
        assert CombatantDied(GOBLIN_ID) in result.events

    def test_one_hp_left_survives(self, engine_with):
        state = BattleStateBuilder().with_stats(GOBLIN_ID, hp=7).build()
        result = engine_with(12, 3).resolve(state, HERO_ATTACKS_GOBLIN)

        assert result.new_state.combatants[GOBLIN_ID].is_alive
        assert not any(isinstance(e, CombatantDied) for e in result.events)

    def test_previous_state_still_shows_living_target(self, default_state, engine_with):
        engine_with(20, 6, 6).resolve(default_state, HERO_ATTACKS_GOBLIN)

        assert default_state.combatants[GOBLIN_ID].is_alive
        assert default_state.grid.occupant_at(GOBLIN_START) == GOBLIN_ID


class TestCombatEnd:
    """Win and lose detection after an attack."""

    def test_no_end_while_enemies_remain(self, engine_with):
        state = (
            BattleStateBuilder()
            .with_combatant(make_combatant("orc", Faction.ENEMY, Vector2(6, 6)))
            .build()
        )
        result = engine_with(20, 6, 6).resolve(state, HERO_ATTACKS_GOBLIN)

        assert isinstance(result.events[-1], CombatantDied)
        assert not any(isinstance(e, CombatEnded) for e in result.events)

    def test_lose_when_last_player_dies(self, engine_with):
        state = (
            BattleStateBuilder()
            .with_stats(HERO_ID, hp=1)
            .with_active(GOBLIN_ID)
            .build()
        )
        # 15 + 4 = 19 >= 16, damage 1 + 2
        result = engine_with(15, 1).resolve(
            state, AttackCommand(GOBLIN_ID, HERO_ID, AttackType.MELEE)
        )

        assert result.events[-2:] == (CombatantDied(HERO_ID), CombatEnded(CombatResult.LOSE))
        assert not result.new_state.grid.is_occupied(HERO_START)

    def test_surviving_hit_does_not_end_combat(self, default_state, engine_with):
        result = engine_with(12, 3).resolve(default_state, HERO_ATTACKS_GOBLIN)
        assert not any(isinstance(e, CombatEnded) for e in result.events)

    def test_evaluate_combat_result(self):
        assert BattleStateBuilder().build().evaluate_combat_result() is None
        assert BattleStateBuilder().with_dead(GOBLIN_ID).build().evaluate_combat_result() == CombatResult.WIN
        assert BattleStateBuilder().with_dead(HERO_ID).build().evaluate_combat_result() == CombatResult.LOSE
        everyone_dead = BattleStateBuilder().with_dead(HERO_ID).with_dead(GOBLIN_ID).build()
        assert everyone_dead.evaluate_combat_result() == CombatResult.WIN
