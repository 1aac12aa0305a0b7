"""Grid predicates over terrain and occupancy.

Utility queries used by the pathfinding, movement and attack systems. All are
pure and cheap; coordinates outside the map read as walls.
"""

from typing import List, Tuple

from grid_combat.components import Position, Unit
from grid_combat.state import State
from grid_combat.types import Faction, Tile


def is_open(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is open ground (occupied or not)."""
    return state.tile_at(pos) == Tile.OPEN


def is_free(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is open ground with no unit on it."""
    return is_open(state, pos) and pos not in state.units


def free_neighbours(state: State, pos: Position) -> List[Position]:
    """Free orthogonal neighbours of ``pos`` in reading order."""
    return [p for p in pos.adjacent() if is_free(state, p)]


def adjacent_enemies(state: State, pos: Position, faction: Faction) -> List[Tuple[Position, Unit]]:
    """Enemies of ``faction`` orthogonally adjacent to ``pos``, in reading order."""
    enemies: List[Tuple[Position, Unit]] = []
    for p in pos.adjacent():
        unit = state.unit_at(p)
        if unit is not None and unit.faction != faction:
            enemies.append((p, unit))
    return enemies


def has_adjacent_enemy(state: State, pos: Position, faction: Faction) -> bool:
    return len(adjacent_enemies(state, pos, faction)) > 0
