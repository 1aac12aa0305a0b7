"""Core immutable battle ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the whole
battle map at a single point in time. Every system is a pure function that
takes a ``State`` and returns a *new* ``State``; nothing is mutated in place.
Re-running a battle from its initial state (as the attack power calibration
does) therefore needs no defensive copying: the initial value can never change.

Design notes:

* ``terrain`` is fixed once parsed. Coordinates absent from it are treated as
  walls, so queries outside the map are never errors.
* ``units`` is keyed by position. Moving a unit removes the old key and sets
  the new one; killing a unit removes its key in the same tick.
* ``finished`` is set the moment a unit starts its turn without any enemy left.
  The round in progress is not added to ``rounds``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pyrsistent import PMap, pmap

from grid_combat.components import Position, Unit
from grid_combat.types import Faction, Tile


@dataclass(frozen=True)
class State:
    """Immutable battle map.

    Attributes:
        width (int): Map width in tiles (longest input row).
        height (int): Map height in tiles.
        terrain (PMap[Position, Tile]): Static wall / open layout.
        units (PMap[Position, Unit]): Living units keyed by where they stand.
        rounds (int): Number of fully completed rounds.
        finished (bool): True once combat has ended.
    """

    width: int
    height: int
    terrain: PMap[Position, Tile] = pmap()
    units: PMap[Position, Unit] = pmap()

    rounds: int = 0
    finished: bool = False

    def tile_at(self, pos: Position) -> Tile:
        return self.terrain.get(pos, Tile.WALL)

    def unit_at(self, pos: Position) -> Optional[Unit]:
        return self.units.get(pos)

    def units_of(self, faction: Faction) -> Dict[Position, Unit]:
        """Return the living units of ``faction`` keyed by position."""
        return {pos: unit for pos, unit in self.units.items() if unit.faction == faction}

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for diagnostics: round counter and unit roster."""
        return pmap(
            {
                "rounds": self.rounds,
                "finished": self.finished,
                "units": tuple(
                    (pos.x, pos.y, unit.faction.value, unit.hit_points)
                    for pos, unit in sorted(self.units.items())
                ),
            }
        )
