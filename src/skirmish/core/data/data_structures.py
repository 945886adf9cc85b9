"""Grid coordinate value type.

Positions are immutable and hashable so they can key occupancy mappings and
live inside frozen battle snapshots.
"""

from dataclasses import dataclass
from typing import Iterator


# Cardinal step offsets in (dy, dx) order. Movement never steps diagonally.
CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class Vector2:
    """2D grid coordinate.

    Uses (y, x) ordering for direct alignment with 2D array access patterns.
    First parameter is row (y-coordinate), second is column (x-coordinate),
    matching array[y, x] indexing of the numpy grids used for pathfinding.
    """
    y: int
    x: int

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        return Vector2(self.y + other.y, self.x + other.x)

    def __sub__(self, other: "Vector2") -> "Vector2":
        """Vector subtraction."""
        return Vector2(self.y - other.y, self.x - other.x)

    def __iter__(self) -> Iterator[int]:
        """Make Vector2 iterable for unpacking (y, x order)."""
        yield self.y
        yield self.x

    def __repr__(self) -> str:
        return f"Vector2({self.y}, {self.x})"

    def manhattan_distance_to(self, other: "Vector2") -> int:
        """Calculate Manhattan distance to another vector."""
        return abs(self.y - other.y) + abs(self.x - other.x)

    def chebyshev_distance_to(self, other: "Vector2") -> int:
        """Calculate Chebyshev distance, max(|dx|, |dy|).

        Diagonal neighbours are at distance 1, which is how attack range is
        measured on the grid.
        """
        return max(abs(self.y - other.y), abs(self.x - other.x))

    def cardinal_neighbors(self) -> list["Vector2"]:
        """The four orthogonally adjacent cells, unfiltered."""
        return [Vector2(self.y + dy, self.x + dx) for dy, dx in CARDINAL_OFFSETS]

    @classmethod
    def from_tuple(cls, coords: tuple[int, int]) -> "Vector2":
        """Create Vector2 from coordinate tuple (y, x order)."""
        return cls(coords[0], coords[1])

    def to_tuple(self) -> tuple[int, int]:
        """Convert to coordinate tuple (y, x order)."""
        return (self.y, self.x)
