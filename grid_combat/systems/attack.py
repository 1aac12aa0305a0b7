"""Attack resolution system.

The attacker hits the adjacent enemy with the fewest hit points, ties broken
by the target's reading order. Damage is floored at 0 hit points and a unit
reaching 0 is removed from the map at once, so it can neither act nor be
targeted again in the same round.
"""

import logging
from dataclasses import replace
from typing import Optional

from grid_combat.components import Position
from grid_combat.errors import CombatInvariantError
from grid_combat.state import State
from grid_combat.utils.grid import adjacent_enemies
from grid_combat.utils.health import apply_damage

logger = logging.getLogger(__name__)


def select_target(state: State, position: Position) -> Optional[Position]:
    """Position of the enemy the unit at ``position`` would attack, if any."""
    unit = state.unit_at(position)
    if unit is None:
        return None
    enemies = adjacent_enemies(state, position, unit.faction)
    if not enemies:
        return None
    target_pos, _ = min(enemies, key=lambda item: (item[1].hit_points, item[0].reading_key))
    return target_pos


def attack_system(state: State, position: Position) -> State:
    """Resolve one attack by the unit at ``position``.

    Raises:
        CombatInvariantError: If there is no unit at ``position`` or no enemy
            next to it. The turn engine only calls this after checking for an
            adjacent enemy.
    """
    attacker = state.unit_at(position)
    if attacker is None:
        raise CombatInvariantError(f"No unit at {position} to attack with")

    target_pos = select_target(state, position)
    if target_pos is None:
        raise CombatInvariantError(
            f"Unit {attacker.uid} at {position} attacked with no adjacent enemy"
        )

    target = apply_damage(state.units[target_pos], attacker.attack_power)
    if target.is_alive:
        return replace(state, units=state.units.set(target_pos, target))

    logger.debug(
        "%s %d at (%d, %d) killed by %s %d",
        target.faction.value,
        target.uid,
        target_pos.x,
        target_pos.y,
        attacker.faction.value,
        attacker.uid,
    )
    return replace(state, units=state.units.remove(target_pos))
