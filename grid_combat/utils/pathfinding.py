"""Breadth-first shortest distances on the battle map.

This is the only distance measure the engine uses. Walls and other units
block movement, so straight-line or Manhattan estimates give wrong answers as
soon as terrain gets in the way.

Expansion only enters free tiles (open and unoccupied). The start tile may be
occupied, which is the normal case when a unit searches from where it
stands.
"""

from collections import deque
from typing import Deque, Dict, Optional

from grid_combat.components import Position
from grid_combat.state import State
from grid_combat.utils.grid import is_free


def bfs_distances(
    state: State, start: Position, goal: Optional[Position] = None
) -> Dict[Position, int]:
    """Return the BFS depth of every tile reachable from ``start``.

    Each tile's depth is recorded the first time it is visited. If ``goal`` is
    given the search stops once ``goal`` is dequeued; tiles further away may be
    missing from the result.

    Args:
        state (State): Battle snapshot; read only.
        start (Position): Search origin (depth 0).
        goal (Position | None): Optional early-exit target.

    Returns:
        Dict[Position, int]: Depth (number of moves) per visited tile.
    """
    depth: Dict[Position, int] = {start: 0}
    queue: Deque[Position] = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == goal:
            break
        for nxt in pos.adjacent():
            if nxt not in depth and is_free(state, nxt):
                depth[nxt] = depth[pos] + 1
                queue.append(nxt)
    return depth


def shortest_distance(state: State, start: Position, goal: Position) -> Optional[int]:
    """Minimum number of orthogonal moves from ``start`` to ``goal``.

    Returns ``None`` when ``goal`` cannot be reached.
    """
    return bfs_distances(state, start, goal).get(goal)


def is_reachable(state: State, start: Position, goal: Position) -> bool:
    return shortest_distance(state, start, goal) is not None
