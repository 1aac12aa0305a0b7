"""Command-line entry point.

Usage:
    grid-combat input.txt                      # outcome of the battle
    grid-combat input.txt --calibrate          # minimum elf attack power
    grid-combat input.txt --calibrate --faction goblin
    grid-combat input.txt --verbose            # per-round debug logging
"""

import argparse
import logging
import sys
from typing import List, Optional

from grid_combat.calibration import DEFAULT_MAX_POWER, calibrate
from grid_combat.components import DEFAULT_ATTACK_POWER, DEFAULT_HIT_POINTS
from grid_combat.config import CombatConfig
from grid_combat.errors import CombatError
from grid_combat.levels.parse import parse_map, render_map
from grid_combat.step import simulate
from grid_combat.systems.terminal import outcome, winner
from grid_combat.types import Faction

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-combat", description="Turn-based goblin vs. elf grid combat simulator"
    )
    parser.add_argument("input", help="Path to the map file")
    parser.add_argument(
        "--calibrate",
        action="store_true",
        help="Search the minimum attack power that wins without losses",
    )
    parser.add_argument(
        "--faction",
        choices=[faction.value for faction in Faction],
        default=Faction.ELF.value,
        help="Faction tuned by --calibrate (default: elf)",
    )
    parser.add_argument(
        "--max-power",
        type=int,
        default=DEFAULT_MAX_POWER,
        help=f"Highest attack power tried by --calibrate (default: {DEFAULT_MAX_POWER})",
    )
    parser.add_argument("--max-rounds", type=int, default=None, help="Abort after N rounds")
    parser.add_argument(
        "--attack-power",
        type=int,
        default=DEFAULT_ATTACK_POWER,
        help=f"Attack power of every unit (default: {DEFAULT_ATTACK_POWER})",
    )
    parser.add_argument(
        "--hit-points",
        type=int,
        default=DEFAULT_HIT_POINTS,
        help=f"Starting hit points (default: {DEFAULT_HIT_POINTS})",
    )
    parser.add_argument("--show-map", action="store_true", help="Print the final map with hit points")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every round")
    return parser


def run(args: argparse.Namespace) -> int:
    config = CombatConfig(attack_power=args.attack_power, hit_points=args.hit_points)
    with open(args.input, encoding="utf-8") as f:
        state = parse_map(f.read(), config)
    logger.info("Loaded %dx%d map with %d units", state.width, state.height, len(state.units))

    if args.calibrate:
        result = calibrate(
            state,
            faction=Faction(args.faction),
            start_power=None,
            max_power=args.max_power,
            max_rounds=args.max_rounds,
        )
        print(f"attack power: {result.attack_power}")
        print(f"rounds: {result.rounds}")
        print(f"outcome: {result.outcome}")
        return 0

    final = simulate(state, max_rounds=args.max_rounds)
    if args.show_map:
        print(render_map(final, show_hp=True, config=config))
    victor = winner(final)
    print(f"winner: {victor.value if victor is not None else 'none'}")
    print(f"rounds: {final.rounds}")
    print(f"outcome: {outcome(final)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        return run(args)
    except (CombatError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
