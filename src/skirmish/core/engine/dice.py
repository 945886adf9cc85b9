"""Dice helpers built on a RandomSource."""

from .random_source import RandomSource


def roll_die(rng: RandomSource, sides: int) -> int:
    """Roll a single die with the given number of sides (1..sides)."""
    return rng.next_int(1, sides + 1)


def d20(rng: RandomSource) -> int:
    return roll_die(rng, 20)
