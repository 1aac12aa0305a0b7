"""Minimum attack power search.

Finds the smallest attack power for one faction at which it wins without
losing a single unit. Each trial starts again from the initial ``State``.
That value is immutable, so trials never see each other's moves or damage.

The search walks powers upward one at a time. Winning without losses is not
monotonic in attack power in general (a stronger unit can change the order in
which enemies die and walk into a worse fight), so bisection could skip the
true minimum.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from grid_combat.errors import CalibrationError, CombatError
from grid_combat.state import State
from grid_combat.step import simulate
from grid_combat.systems.terminal import outcome
from grid_combat.types import Faction

logger = logging.getLogger(__name__)

DEFAULT_MAX_POWER = 200


@dataclass(frozen=True)
class CalibrationResult:
    """Winning trial of a calibration search.

    Attributes:
        attack_power: Minimum attack power that avoids every loss.
        outcome: Outcome of the battle fought with that power.
        rounds: Completed rounds of that battle.
    """

    attack_power: int
    outcome: int
    rounds: int


def with_attack_power(state: State, faction: Faction, power: int) -> State:
    """Return ``state`` with every unit of ``faction`` set to ``power``."""
    if power < 0:
        raise ValueError(f"Attack power must be >= 0, got {power}")
    units = state.units
    for pos, unit in state.units_of(faction).items():
        units = units.set(pos, replace(unit, attack_power=power))
    return replace(state, units=units)


def current_attack_power(state: State, faction: Faction) -> int:
    """Highest attack power among ``faction``'s units (0 if it has none)."""
    return max((unit.attack_power for unit in state.units_of(faction).values()), default=0)


def calibrate(
    state: State,
    faction: Faction = Faction.ELF,
    start_power: Optional[int] = None,
    max_power: int = DEFAULT_MAX_POWER,
    max_rounds: Optional[int] = None,
) -> CalibrationResult:
    """Search the minimum attack power letting ``faction`` win with no losses.

    Args:
        state (State): Initial battle state. Never modified.
        faction (Faction): Faction whose attack power is tuned.
        start_power (int | None): First power tried; defaults to the
            faction's current attack power.
        max_power (int): Last power tried.
        max_rounds (int | None): Per-trial round limit, see
            :func:`grid_combat.step.simulate`.

    Returns:
        CalibrationResult: Power, outcome and rounds of the first flawless win.

    Raises:
        CalibrationError: If the faction has no units, or no power in
            ``[start_power, max_power]`` avoids losses. A trial that stalls or
            exceeds ``max_rounds`` counts as a failed power.
    """
    if not state.units_of(faction):
        raise CalibrationError(f"No {faction.value} units to calibrate")

    power = current_attack_power(state, faction) if start_power is None else start_power
    while power <= max_power:
        try:
            trial = simulate(
                with_attack_power(state, faction, power),
                max_rounds=max_rounds,
                halt_on_loss=faction,
            )
        except CombatError as e:
            logger.warning("%s attack power %d never finishes: %s", faction.value, power, e)
            power += 1
            continue
        if trial.finished and len(trial.units_of(faction)) == len(state.units_of(faction)):
            result = CalibrationResult(
                attack_power=power, outcome=outcome(trial), rounds=trial.rounds
            )
            logger.info(
                "%s attack power %d wins without losses (outcome %d)",
                faction.value,
                power,
                result.outcome,
            )
            return result
        logger.info("%s attack power %d suffers losses", faction.value, power)
        power += 1

    raise CalibrationError(
        f"No {faction.value} attack power up to {max_power} avoids losses"
    )
