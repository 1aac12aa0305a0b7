"""grid_combat.components
=======================

Component dataclasses used by the engine. Both are frozen value objects; the
systems express every change by building new instances.

    from grid_combat.components import Position, Unit
"""

from .position import Position
from .unit import Unit, DEFAULT_ATTACK_POWER, DEFAULT_HIT_POINTS

__all__ = [
    "Position",
    "Unit",
    "DEFAULT_ATTACK_POWER",
    "DEFAULT_HIT_POINTS",
]
