from collections import deque
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np
from numpy.typing import NDArray

from ..core.data.data_structures import Vector2
from .entities.combatant import CombatantId


def _freeze_occupancy(occupancy: Mapping[Vector2, CombatantId]) -> Mapping[Vector2, CombatantId]:
    return MappingProxyType(dict(occupancy))


@dataclass(frozen=True)
class GridState:
    """Bounded battle grid with static walls and dynamic occupancy.

    ``blocked`` never changes during a battle. ``occupancy`` maps each cell to
    the single living combatant standing on it and is replaced wholesale when
    someone moves or dies.
    """
    width: int
    height: int
    blocked: frozenset[Vector2] = field(default_factory=frozenset)
    occupancy: Mapping[Vector2, CombatantId] = field(default_factory=dict)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {self.width}x{self.height}")
        # frozen=True prevents normal assignment
        object.__setattr__(self, "blocked", frozenset(self.blocked))
        if not isinstance(self.occupancy, MappingProxyType):
            object.__setattr__(self, "occupancy", _freeze_occupancy(self.occupancy))

    def is_in_bounds(self, position: Vector2) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def is_blocked(self, position: Vector2) -> bool:
        return position in self.blocked

    def is_occupied(self, position: Vector2) -> bool:
        return position in self.occupancy

    def occupant_at(self, position: Vector2) -> Optional[CombatantId]:
        return self.occupancy.get(position)

    # ============== Occupancy updates (return new grids) ==============

    def with_moved_occupant(self, old: Vector2, new: Vector2, combatant_id: CombatantId) -> "GridState":
        """Return a grid where combatant_id stands on new instead of old."""
        occupancy = dict(self.occupancy)
        occupancy.pop(old, None)
        occupancy[new] = combatant_id
        return replace(self, occupancy=MappingProxyType(occupancy))

    def without_occupant_at(self, position: Vector2) -> "GridState":
        """Return a grid with the given cell vacated."""
        occupancy = dict(self.occupancy)
        occupancy.pop(position, None)
        return replace(self, occupancy=MappingProxyType(occupancy))

    # ============== Pathfinding ==============

    def passable_mask(self) -> NDArray[np.bool_]:
        """Boolean mask of cells a combatant may step through (not walls, not occupied)."""
        mask = np.ones((self.height, self.width), dtype=np.bool_)
        for position in self.blocked:
            if self.is_in_bounds(position):
                mask[position.y, position.x] = False
        for position in self.occupancy:
            if self.is_in_bounds(position):
                mask[position.y, position.x] = False
        return mask

    def find_path_length(self, start: Vector2, goal: Vector2) -> Optional[int]:
        """Shortest cardinal-step path length from start to goal.

        Breadth-first flood over the four cardinal neighbours. Walls and
        occupied cells are impassable, except the goal itself which callers
        have already checked to be vacant. There are no diagonal edges, so a
        diagonal destination costs two steps and is unreachable when both
        corner cells are closed.

        Returns:
            Step count, 0 when start == goal, or None when unreachable.
        """
        if start == goal:
            return 0
        if not self.is_in_bounds(goal) or not self.is_in_bounds(start):
            return None

        passable = self.passable_mask()
        if not self.is_blocked(goal):
            passable[goal.y, goal.x] = True

        # Distance array: -1 = unvisited, >= 0 = steps to reach
        distances = np.full((self.height, self.width), -1, dtype=np.int32)
        distances[start.y, start.x] = 0

        queue = deque([start])
        while queue:
            current = queue.popleft()
            current_distance = int(distances[current.y, current.x])

            for next_pos in current.cardinal_neighbors():
                if not self.is_in_bounds(next_pos):
                    continue
                if not passable[next_pos.y, next_pos.x]:
                    continue
                if distances[next_pos.y, next_pos.x] >= 0:
                    continue

                next_distance = current_distance + 1
                if next_pos == goal:
                    return next_distance

                distances[next_pos.y, next_pos.x] = next_distance
                queue.append(next_pos)

        return None
