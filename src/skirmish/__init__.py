"""Skirmish: deterministic resolution of grid-based tactical combat.

The package is split the same way the battle is:
- core: value types, events, commands and the resolution engine
- game: grid, combatants, combat and turn rules, logging
"""

from .core.config_loader import EngineConfig, EngineConfigLoader, get_engine_config
from .core.engine import BattleEngine, BattleState, ResolveResult, replay

__all__ = [
    "BattleEngine",
    "BattleState",
    "ResolveResult",
    "replay",
    "EngineConfig",
    "EngineConfigLoader",
    "get_engine_config",
]
