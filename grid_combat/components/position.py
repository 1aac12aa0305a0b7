"""Position component.

Immutable integer grid coordinates used as keys of ``State.terrain`` and
``State.units``. Positions sort in *reading order*: top row first, then left
to right within a row. Every tie-break in the engine relies on this order.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import List, Tuple


@total_ordering
@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    @property
    def reading_key(self) -> Tuple[int, int]:
        """Sort key implementing reading order (row, then column)."""
        return (self.y, self.x)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.reading_key < other.reading_key

    def adjacent(self) -> List["Position"]:
        """Return the four orthogonal neighbours, already in reading order."""
        return [
            Position(self.x, self.y - 1),
            Position(self.x - 1, self.y),
            Position(self.x + 1, self.y),
            Position(self.x, self.y + 1),
        ]

    def is_adjacent(self, other: "Position") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1
