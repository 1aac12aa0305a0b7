import pytest

from grid_combat.calibration import (
    CalibrationResult,
    calibrate,
    current_attack_power,
    with_attack_power,
)
from grid_combat.components import Position
from grid_combat.errors import CalibrationError
from grid_combat.levels.parse import parse_map
from grid_combat.step import simulate
from grid_combat.types import Faction
from tests.test_utils import EXAMPLE_BATTLES, EXAMPLE_CALIBRATIONS


@pytest.mark.parametrize("index, power, rounds, expected", EXAMPLE_CALIBRATIONS)
def test_example_calibrations(index: int, power: int, rounds: int, expected: int) -> None:
    state = parse_map(EXAMPLE_BATTLES[index][0])
    assert calibrate(state) == CalibrationResult(
        attack_power=power, outcome=expected, rounds=rounds
    )


def test_calibrated_power_wins_without_losses() -> None:
    state = parse_map(EXAMPLE_BATTLES[0][0])
    result = calibrate(state)
    final = simulate(with_attack_power(state, Faction.ELF, result.attack_power))
    assert len(final.units_of(Faction.ELF)) == len(state.units_of(Faction.ELF))
    assert not final.units_of(Faction.GOBLIN)


def test_one_less_power_loses_a_unit() -> None:
    state = parse_map(EXAMPLE_BATTLES[0][0])
    halted = simulate(with_attack_power(state, Faction.ELF, 14), halt_on_loss=Faction.ELF)
    assert not halted.finished


def test_calibration_does_not_touch_the_initial_state() -> None:
    state = parse_map(EXAMPLE_BATTLES[2][0])
    snapshot = state.description
    calibrate(state)
    assert state.description == snapshot
    assert current_attack_power(state, Faction.ELF) == 3


def test_with_attack_power_only_changes_one_faction() -> None:
    state = parse_map("#EG#")
    boosted = with_attack_power(state, Faction.ELF, 20)
    assert boosted.units[Position(1, 0)].attack_power == 20
    assert boosted.units[Position(2, 0)].attack_power == 3
    assert state.units[Position(1, 0)].attack_power == 3
    with pytest.raises(ValueError):
        with_attack_power(state, Faction.ELF, -1)


def test_flawless_win_at_current_power_is_reported_as_is() -> None:
    state = parse_map("#EG#")
    assert calibrate(state).attack_power == 3


def test_explicit_start_power() -> None:
    state = parse_map(EXAMPLE_BATTLES[0][0])
    assert calibrate(state, start_power=15).attack_power == 15


def test_goblins_can_be_calibrated_too() -> None:
    state = parse_map("#GE#")
    result = calibrate(state, faction=Faction.GOBLIN)
    assert result.attack_power == 3


def test_search_range_exhausted() -> None:
    state = parse_map(EXAMPLE_BATTLES[0][0])
    with pytest.raises(CalibrationError):
        calibrate(state, max_power=10)


def test_missing_faction_cannot_be_calibrated() -> None:
    with pytest.raises(CalibrationError):
        calibrate(parse_map("#G.G#"))


def test_stalled_trials_count_as_failures() -> None:
    state = parse_map("#######\n#E.#.G#\n#######")
    with pytest.raises(CalibrationError):
        calibrate(state, max_power=5)


def test_round_limit_per_trial_counts_as_failure() -> None:
    state = parse_map(EXAMPLE_BATTLES[0][0])
    with pytest.raises(CalibrationError):
        calibrate(state, start_power=15, max_power=16, max_rounds=5)
