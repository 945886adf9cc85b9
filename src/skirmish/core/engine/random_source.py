"""Randomness capability consumed by the engine.

The engine never creates randomness itself. Hosts pass in a ``RandomSource``;
tests and replays pass a ``ScriptedRandom`` with a fixed sequence.
"""

import random
from collections import deque
from typing import Protocol, runtime_checkable

from .errors import RandomSourceError, RandomSourceExhausted


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer source over a half-open range."""

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return v with min_inclusive <= v < max_exclusive."""
        ...


class SeededRandom:
    """RandomSource backed by a seeded ``random.Random``."""

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        if max_exclusive <= min_inclusive:
            raise RandomSourceError(
                f"Empty range [{min_inclusive}, {max_exclusive})"
            )
        return self._random.randrange(min_inclusive, max_exclusive)


class ScriptedRandom:
    """RandomSource that replays a fixed sequence of values.

    Fails loudly when the sequence runs out or when the next value does not
    fit the requested range.
    """

    def __init__(self, *values: int):
        self._values = deque(values)
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self._values)

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        if not self._values:
            raise RandomSourceExhausted(self.consumed)

        value = self._values[0]
        if not min_inclusive <= value < max_exclusive:
            raise RandomSourceError(
                f"Scripted value {value} outside requested range "
                f"[{min_inclusive}, {max_exclusive})"
            )

        self._values.popleft()
        self.consumed += 1
        return value
