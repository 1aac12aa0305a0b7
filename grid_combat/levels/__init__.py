"""Map text conversion: parse puzzle input into a ``State`` and render it back."""

from .parse import parse_map, render_map

__all__ = ["parse_map", "render_map"]
