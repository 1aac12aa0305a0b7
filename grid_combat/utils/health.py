"""Health and damage helpers."""

from dataclasses import replace

from grid_combat.components import Unit


def apply_damage(unit: Unit, damage: int) -> Unit:
    """Return ``unit`` after taking ``damage``; hit points never drop below 0."""
    if damage < 0:
        raise ValueError(f"Negative damage: {damage}")
    return replace(unit, hit_points=max(0, unit.hit_points - damage))
