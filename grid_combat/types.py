"""Common type aliases and enumerations.

``EntityID`` identifies a unit for the whole battle, independently of the tile
it currently stands on. ``Faction`` and ``Tile`` are the only categorical
values the engine needs.
"""

from enum import StrEnum, auto


EntityID = int


class Faction(StrEnum):
    """The two opposing sides of a battle."""

    GOBLIN = auto()
    ELF = auto()

    @property
    def enemy(self) -> "Faction":
        """Return the opposing faction."""
        return Faction.ELF if self is Faction.GOBLIN else Faction.GOBLIN


class Tile(StrEnum):
    """Static terrain kinds. Assigned once when the map is built."""

    WALL = auto()
    OPEN = auto()
