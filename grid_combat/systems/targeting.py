"""Movement target selection.

A unit that is not already next to an enemy walks toward the closest tile
from which it could attack. Two reading-order tie-breaks apply, independently:

1. *Destination*: among reachable in-range tiles with the smallest BFS
   distance from the unit, the first in reading order.
2. *Step*: among the unit's free neighbours with the smallest BFS distance to
   that destination, the first in reading order.

The step is not compared against other destinations, so both stages are
needed.
"""

from typing import List, Optional, Set, Tuple

from grid_combat.components import Position
from grid_combat.state import State
from grid_combat.types import Faction
from grid_combat.utils.grid import free_neighbours
from grid_combat.utils.pathfinding import bfs_distances


def in_range_positions(state: State, faction: Faction) -> List[Position]:
    """Free tiles adjacent to any living enemy of ``faction``, in reading order."""
    in_range: Set[Position] = set()
    for enemy_pos in state.units_of(faction.enemy):
        in_range.update(free_neighbours(state, enemy_pos))
    return sorted(in_range)


def choose_destination(state: State, position: Position) -> Optional[Position]:
    """Pick the in-range tile the unit at ``position`` should head for.

    Returns ``None`` if no in-range tile is reachable (the unit stays put).
    """
    unit = state.unit_at(position)
    if unit is None:
        return None
    targets = in_range_positions(state, unit.faction)
    if not targets:
        return None
    distances = bfs_distances(state, position)
    reachable: List[Tuple[int, Position]] = [
        (distances[target], target) for target in targets if target in distances
    ]
    if not reachable:
        return None
    return min(reachable)[1]


def choose_step(state: State, position: Position, destination: Position) -> Optional[Position]:
    """Pick the neighbour of ``position`` that starts a shortest path to ``destination``."""
    distances = bfs_distances(state, destination)
    candidates: List[Tuple[int, Position]] = [
        (distances[step], step)
        for step in free_neighbours(state, position)
        if step in distances
    ]
    if not candidates:
        return None
    return min(candidates)[1]


def next_step(state: State, position: Position) -> Optional[Position]:
    """Tile the unit at ``position`` moves to this turn, or ``None`` to stay."""
    destination = choose_destination(state, position)
    if destination is None:
        return None
    return choose_step(state, position, destination)
