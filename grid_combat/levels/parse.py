"""Text <-> ``State`` conversion.

The input is a rectangular block of characters where the row index is ``y``
and the column index is ``x``. Walls and open ground become terrain; a unit
symbol becomes open ground plus a :class:`Unit` of the matching faction.
Unit ids are allocated in reading order so that parsing the same text twice
yields equal states.
"""

from typing import Dict, List

from pyrsistent import pmap

from grid_combat.components import Position, Unit
from grid_combat.config import CombatConfig, DEFAULT_CONFIG
from grid_combat.errors import MapParseError
from grid_combat.state import State
from grid_combat.types import Tile


def parse_map(text: str, config: CombatConfig = DEFAULT_CONFIG) -> State:
    """Build the initial battle state from map text.

    Args:
        text (str): Map rows separated by newlines. Trailing blank lines are
            ignored.
        config (CombatConfig): Symbols and default unit stats.

    Returns:
        State: Fresh state with ``rounds == 0``.

    Raises:
        MapParseError: On any character that is not a wall, open ground or a
            known unit symbol.
    """
    lines: List[str] = text.rstrip("\n").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    terrain: Dict[Position, Tile] = {}
    units: Dict[Position, Unit] = {}
    for y, line in enumerate(lines):
        for x, char in enumerate(line.rstrip("\r")):
            pos = Position(x, y)
            if char == config.wall:
                terrain[pos] = Tile.WALL
            elif char == config.open:
                terrain[pos] = Tile.OPEN
            elif char in config.symbols:
                faction = config.symbols[char]
                terrain[pos] = Tile.OPEN
                units[pos] = Unit(
                    uid=len(units),
                    faction=faction,
                    attack_power=config.attack_power_for(faction),
                    hit_points=config.hit_points,
                )
            else:
                raise MapParseError(char, x, y)

    width = max((len(line.rstrip("\r")) for line in lines), default=0)
    return State(
        width=width,
        height=len(lines),
        terrain=pmap(terrain),
        units=pmap(units),
    )


def render_map(
    state: State, show_hp: bool = False, config: CombatConfig = DEFAULT_CONFIG
) -> str:
    """Render ``state`` back to map text.

    With ``show_hp`` each row is followed by the hit points of its units in
    reading order, e.g. ``#..G.E#   G(200), E(131)``.
    """
    rows: List[str] = []
    for y in range(state.height):
        chars: List[str] = []
        annotations: List[str] = []
        for x in range(state.width):
            pos = Position(x, y)
            unit = state.unit_at(pos)
            if unit is not None:
                symbol = config.symbol_for(unit.faction) or "?"
                chars.append(symbol)
                annotations.append(f"{symbol}({unit.hit_points})")
            elif pos not in state.terrain:
                chars.append(" ")
            elif state.terrain[pos] == Tile.WALL:
                chars.append(config.wall)
            else:
                chars.append(config.open)
        row = "".join(chars).rstrip()
        if show_hp and annotations:
            row = f"{row}   {', '.join(annotations)}"
        rows.append(row)
    return "\n".join(rows)
