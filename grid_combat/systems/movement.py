"""Unit movement system.

Relocates a unit by one orthogonal tile: the old key is removed from
``State.units`` and the same ``Unit`` value is stored under the new key.
Choosing *where* to go is the job of :mod:`grid_combat.systems.targeting`.
"""

from dataclasses import replace

from grid_combat.components import Position
from grid_combat.errors import CombatInvariantError
from grid_combat.state import State
from grid_combat.utils.grid import is_free


def movement_system(state: State, position: Position, next_pos: Position) -> State:
    """Move the unit at ``position`` to ``next_pos``.

    Args:
        state (State): Current state.
        position (Position): Tile of the moving unit.
        next_pos (Position): Adjacent free destination tile.

    Returns:
        State: Same state if there is no unit at ``position``, otherwise the
            state with the unit relocated.

    Raises:
        CombatInvariantError: If ``next_pos`` is not an adjacent free tile.
    """
    unit = state.unit_at(position)
    if unit is None:
        return state

    if not position.is_adjacent(next_pos) or not is_free(state, next_pos):
        raise CombatInvariantError(
            f"Unit {unit.uid} cannot move from {position} to {next_pos}"
        )

    return replace(state, units=state.units.remove(position).set(next_pos, unit))
