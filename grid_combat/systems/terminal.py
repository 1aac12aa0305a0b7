"""Termination and outcome.

Combat ends the moment a unit begins its turn and finds no enemy alive. The
round in progress is not counted, so the outcome uses the number of rounds
completed before it.
"""

from dataclasses import replace
from typing import Optional

from grid_combat.state import State
from grid_combat.types import Faction


def enemies_remaining(state: State, faction: Faction) -> int:
    """Number of living units opposing ``faction``."""
    return sum(1 for unit in state.units.values() if unit.faction != faction)


def finish_system(state: State, faction: Faction) -> State:
    """Set ``finished`` if a unit of ``faction`` has nobody left to fight (idempotent)."""
    if state.finished or enemies_remaining(state, faction) > 0:
        return state
    return replace(state, finished=True)


def total_hit_points(state: State) -> int:
    return sum(unit.hit_points for unit in state.units.values())


def outcome(state: State) -> int:
    """Completed rounds times the hit points of every surviving unit."""
    return state.rounds * total_hit_points(state)


def winner(state: State) -> Optional[Faction]:
    """Surviving faction of a finished battle, ``None`` while still running."""
    if not state.finished:
        return None
    factions = {unit.faction for unit in state.units.values()}
    if len(factions) != 1:
        return None
    return factions.pop()
