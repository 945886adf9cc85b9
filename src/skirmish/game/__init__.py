"""Game rules layer: grid, combatants, combat and turn resolution, logging."""
