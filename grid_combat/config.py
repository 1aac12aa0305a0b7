"""Battle configuration.

``CombatConfig`` bundles the map symbols and the stats given to freshly parsed
units. The defaults follow the puzzle rules; tests and the CLI derive variants
with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from pyrsistent import pmap

from grid_combat.components import DEFAULT_ATTACK_POWER, DEFAULT_HIT_POINTS
from grid_combat.types import Faction


@dataclass(frozen=True)
class CombatConfig:
    """Map symbols and default unit stats.

    Attributes:
        wall: Character for an impassable tile.
        open: Character for open ground.
        symbols: Unit characters mapped to the faction they spawn.
        attack_power: Attack power of every parsed unit, unless overridden.
        hit_points: Starting hit points of every parsed unit.
        faction_attack_power: Per-faction attack power overrides.
    """

    wall: str = "#"
    open: str = "."
    symbols: Mapping[str, Faction] = field(
        default_factory=lambda: pmap({"G": Faction.GOBLIN, "E": Faction.ELF})
    )
    attack_power: int = DEFAULT_ATTACK_POWER
    hit_points: int = DEFAULT_HIT_POINTS
    faction_attack_power: Mapping[Faction, int] = field(default_factory=pmap)

    def __post_init__(self) -> None:
        if self.attack_power < 0:
            raise ValueError(f"attack_power must be >= 0, got {self.attack_power}")
        if self.hit_points <= 0:
            raise ValueError(f"hit_points must be > 0, got {self.hit_points}")
        for faction, power in self.faction_attack_power.items():
            if power < 0:
                raise ValueError(f"attack power for {faction} must be >= 0, got {power}")

    def attack_power_for(self, faction: Faction) -> int:
        return self.faction_attack_power.get(faction, self.attack_power)

    def symbol_for(self, faction: Faction) -> Optional[str]:
        for char, candidate in self.symbols.items():
            if candidate == faction:
                return char
        return None


DEFAULT_CONFIG = CombatConfig()
