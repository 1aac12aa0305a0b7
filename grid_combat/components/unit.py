"""Unit component.

A combatant belonging to one faction. The unit does not know where it stands:
``State.units`` maps each occupied :class:`Position` to its ``Unit``.
"""

from dataclasses import dataclass

from grid_combat.types import EntityID, Faction


DEFAULT_ATTACK_POWER = 3
DEFAULT_HIT_POINTS = 200


@dataclass(frozen=True)
class Unit:
    """Combatant stats.

    Attributes:
        uid:
            Stable identifier allocated when the map is parsed. Used by the turn
            engine to make sure a unit acts at most once per round.
        faction:
            Side the unit fights for; fixed for its lifetime.
        attack_power:
            Damage dealt per attack. Must be non-negative.
        hit_points:
            Remaining health. The unit is removed from the map when this
            reaches 0.
    """

    uid: EntityID
    faction: Faction
    attack_power: int = DEFAULT_ATTACK_POWER
    hit_points: int = DEFAULT_HIT_POINTS

    @property
    def is_alive(self) -> bool:
        return self.hit_points > 0
