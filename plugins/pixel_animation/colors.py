"""
Pixel Colors - Attributes, Mixes and Breakdowns

Every pixel color has a one-character id (used in the row strings), a
primary/composite flag and a directional multiplier:

    RED     "R"  primary    +1  (moves toward higher indices)
    YELLOW  "Y"  primary    -1  (moves toward lower indices)
    ORANGE  "O"  composite   0  (RED + YELLOW)
    EMPTY   "."  sentinel    0

Composite colors are never stored on a pixel directly; they are broken
down into their primary components with decompose() and rebuilt with mix().
"""

from enum import Enum


class InvalidColorKind(ValueError):
    """A primary color was required and a composite one was given (or vice versa)."""

    def __init__(self, color, required_kind):
        name = getattr(color, "name", repr(color))
        super().__init__(f"{name} is not a {required_kind} color")
        self.color = color
        self.required_kind = required_kind


class PixelColor(Enum):

    RED = ("R", True, 1)
    YELLOW = ("Y", True, -1)
    ORANGE = ("O", False, 0)
    EMPTY = (".", False, 0)

    def __init__(self, id, primary, directional_multiplier):
        self.id = id
        self.primary = primary
        self.directional_multiplier = directional_multiplier

    def __str__(self):
        return self.id

    @classmethod
    def lookup(cls, id):
        """Find the color with the given one-character id. Returns None if not found."""
        for color in cls:
            if color.id == id:
                return color
        return None

    @classmethod
    def decompose(cls, color):
        """Break a composite color down into its (primary, primary) components."""
        _require_composite(color)
        return _BREAKDOWN[color]

    def is_primary(self):
        return self.primary

    def mix(self, other):
        """Mix two colors together.

        Mixing a color with itself or with EMPTY is a no-op. Anything else
        must be a pair of primaries listed in the mixing table.
        """
        if not isinstance(other, PixelColor):
            raise InvalidColorKind(other, "primary")
        if self is other:
            return self
        if self is PixelColor.EMPTY:
            return other
        if other is PixelColor.EMPTY:
            return self
        _require_primary(self)
        _require_primary(other)
        return _MIXES[frozenset((self, other))]

    def has_movement(self):
        """True if the color moves either left or right."""
        return self.directional_multiplier != 0

    def direction(self, speed):
        """Signed offset per tick: negative moves left, positive moves right."""
        return speed * self.directional_multiplier


def _require_primary(color):
    if not isinstance(color, PixelColor) or not color.primary:
        raise InvalidColorKind(color, "primary")


def _require_composite(color):
    if not isinstance(color, PixelColor) or color not in _BREAKDOWN:
        raise InvalidColorKind(color, "composite")


# Unordered primary pairs -> composite
_MIXES = {
    frozenset((PixelColor.RED, PixelColor.YELLOW)): PixelColor.ORANGE,
}

# Composite -> primary components (inverse of _MIXES)
_BREAKDOWN = {
    PixelColor.ORANGE: (PixelColor.RED, PixelColor.YELLOW),
}
