"""Exception hierarchy for map construction and combat resolution."""


class CombatError(Exception):
    """Base class for every error raised by ``grid_combat``."""


class MapParseError(CombatError, ValueError):
    """Raised when the map text contains a character with no meaning."""

    def __init__(self, char: str, x: int, y: int) -> None:
        super().__init__(f"Invalid map tile character {char!r} at ({x}, {y})")
        self.char = char
        self.x = x
        self.y = y


class CombatInvariantError(CombatError, RuntimeError):
    """Raised when the engine reaches a state its turn ordering forbids.

    This signals a logic defect rather than bad input (e.g. an attack resolved
    with no adjacent enemy, or a unit moved onto an occupied tile).
    """


class CalibrationError(CombatError):
    """Raised when no attack power in the searched range avoids losses."""
