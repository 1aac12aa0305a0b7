"""Turn engine and round orchestration.

This module wires the systems together into the combat state machine. Every
function is pure and returns a *new* :class:`grid_combat.state.State`.

Order of a unit's turn:

1. ``finish_system`` ends combat if the unit has no enemy left.
2. If no enemy is adjacent, ``next_step`` picks a tile and ``movement_system``
   moves there (or the unit stays when nothing is reachable).
3. If an enemy is now adjacent, ``attack_system`` hits it.

A round walks the turn order snapshotted at its start. Moves and deaths are
visible to every later turn of the same round. The round counter only grows
when the whole order has been processed.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from grid_combat.components import Position
from grid_combat.errors import CombatError
from grid_combat.state import State
from grid_combat.systems.attack import attack_system
from grid_combat.systems.movement import movement_system
from grid_combat.systems.targeting import next_step
from grid_combat.systems.terminal import finish_system
from grid_combat.types import EntityID, Faction
from grid_combat.utils.grid import has_adjacent_enemy

logger = logging.getLogger(__name__)


def turn_order(state: State) -> List[Tuple[Position, EntityID]]:
    """Living units as ``(position, uid)`` pairs in reading order."""
    return [(pos, unit.uid) for pos, unit in sorted(state.units.items())]


def take_turn(state: State, position: Position) -> State:
    """Play the turn of the unit standing at ``position``.

    Args:
        state (State): Current state.
        position (Position): Tile of the acting unit.

    Returns:
        State: Updated state. Unchanged if there is no unit at ``position`` or
            combat already finished; ``finished`` set if the unit found no
            enemy.
    """
    unit = state.unit_at(position)
    if unit is None or state.finished:
        return state

    state = finish_system(state, unit.faction)
    if state.finished:
        return state

    if not has_adjacent_enemy(state, position, unit.faction):
        next_pos = next_step(state, position)
        if next_pos is not None:
            state = movement_system(state, position, next_pos)
            position = next_pos

    if has_adjacent_enemy(state, position, unit.faction):
        state = attack_system(state, position)

    return state


def step(state: State) -> State:
    """Play one round.

    Units act in the reading order of their positions at the start of the
    round. A snapshotted unit is skipped once it is gone from its tile; the
    uid check also stops a unit that walked onto a dead unit's tile from
    acting twice.

    Returns:
        State: State after the round, with ``rounds`` incremented only if the
            round was completed.
    """
    if state.finished:
        return state

    if not state.units:
        return replace(state, finished=True)

    logger.debug("Starting round %d", state.rounds + 1)
    for position, uid in turn_order(state):
        unit = state.unit_at(position)
        if unit is None or unit.uid != uid:
            continue
        state = take_turn(state, position)
        if state.finished:
            logger.debug("Combat finished during round %d", state.rounds + 1)
            return state

    return replace(state, rounds=state.rounds + 1)


def simulate(
    state: State,
    max_rounds: Optional[int] = None,
    halt_on_loss: Optional[Faction] = None,
) -> State:
    """Run rounds until combat is finished.

    Args:
        state (State): Starting state.
        max_rounds (int | None): Upper bound on completed rounds.
        halt_on_loss (Faction | None): Stop early, unfinished, once this
            faction has lost a unit.

    Returns:
        State: Finished state, or the state at which ``halt_on_loss`` fired.

    Raises:
        CombatError: If ``max_rounds`` is exceeded, or a round changes nothing
            while both factions still stand (the battle can never end).
    """
    initial_count = len(state.units_of(halt_on_loss)) if halt_on_loss is not None else 0

    while not state.finished:
        if max_rounds is not None and state.rounds >= max_rounds:
            raise CombatError(f"Combat did not finish within {max_rounds} rounds")

        previous = state
        state = step(state)

        if halt_on_loss is not None and len(state.units_of(halt_on_loss)) < initial_count:
            logger.debug("%s lost a unit after %d rounds", halt_on_loss.value, state.rounds)
            return state

        if not state.finished and state.units == previous.units:
            raise CombatError(
                f"Stalemate after {state.rounds} rounds: a round changed nothing"
            )

    return state
