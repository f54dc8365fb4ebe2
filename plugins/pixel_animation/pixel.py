"""
Pixel - One Track Position

A pixel has a speed and up to two primary color components. A composite
color (ORANGE) is stored as the two primaries that mix into it, so a pixel
never holds a composite color directly:

    Pixel.of(2, RED)     -> Pixel(2, RED, EMPTY)
    Pixel.of(2, ORANGE)  -> Pixel(2, RED, YELLOW)
    Pixel.empty(2)       -> Pixel(2, EMPTY, EMPTY)
"""

from dataclasses import dataclass

from .colors import InvalidColorKind, PixelColor


@dataclass(frozen=True)
class Pixel:
    speed: int
    primary_color1: PixelColor = PixelColor.EMPTY
    primary_color2: PixelColor = PixelColor.EMPTY

    @classmethod
    def of(cls, speed, color):
        """Build a pixel from any supported primary or composite color."""
        if not isinstance(color, PixelColor):
            raise InvalidColorKind(color, "defined")
        if color is PixelColor.EMPTY or color.is_primary():
            return cls(speed, color, PixelColor.EMPTY)
        first, second = PixelColor.decompose(color)
        return cls(speed, first, second)

    @classmethod
    def empty(cls, speed):
        return cls(speed, PixelColor.EMPTY, PixelColor.EMPTY)

    def has_movement(self):
        """True if either component moves left or right."""
        return self.primary_color1.has_movement() or self.primary_color2.has_movement()

    def mix_color(self):
        """The visible color: both components mixed together."""
        return self.primary_color1.mix(self.primary_color2)

    def is_empty(self):
        return self.mix_color() is PixelColor.EMPTY

    def move_instructions(self):
        """One instruction per non-empty component (0, 1 or 2 of them)."""
        return [MoveInstruction(self.speed, color)
                for color in (self.primary_color1, self.primary_color2)
                if color is not PixelColor.EMPTY]

    def __str__(self):
        return self.mix_color().id


@dataclass(frozen=True)
class MoveInstruction:
    """Carry a single primary color `direction()` positions away."""

    speed: int
    color: PixelColor

    @property
    def pixel(self):
        return Pixel.of(self.speed, self.color)

    def direction(self):
        return self.color.direction(self.speed)
