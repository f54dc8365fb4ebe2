#!/usr/bin/env python3
"""
Tests for Pixel construction and move instructions.

Verifies:
1. Composite colors are stored as their primary components
2. Move instructions per component
3. Value equality
"""

import pytest

from pixel_animation.colors import InvalidColorKind, PixelColor
from pixel_animation.pixel import MoveInstruction, Pixel

RED = PixelColor.RED
YELLOW = PixelColor.YELLOW
ORANGE = PixelColor.ORANGE
EMPTY = PixelColor.EMPTY


def test_of_primary():
    pixel = Pixel.of(2, RED)
    assert pixel == Pixel(2, RED, EMPTY)
    assert pixel.mix_color() is RED
    assert pixel.has_movement()


def test_of_empty():
    pixel = Pixel.of(3, EMPTY)
    assert pixel == Pixel.empty(3)
    assert pixel.is_empty()
    assert not pixel.has_movement()
    assert pixel.move_instructions() == []
    assert str(pixel) == "."


def test_of_composite_stores_primaries():
    """An ORANGE pixel holds RED and YELLOW, never ORANGE itself."""
    print("Testing composite pixel...")
    pixel = Pixel.of(4, ORANGE)
    assert {pixel.primary_color1, pixel.primary_color2} == {RED, YELLOW}
    assert pixel.mix_color() is ORANGE
    assert str(pixel) == "O"
    # The visible color is stationary, but the components still move
    assert pixel.has_movement()
    print("  ✓ composite pixel working correctly")


def test_composite_move_instructions():
    instructions = Pixel.of(4, ORANGE).move_instructions()
    assert len(instructions) == 2, "One instruction per primary component"
    assert sum(i.direction() for i in instructions) == 0, "Components should split evenly"
    assert sorted(i.direction() for i in instructions) == [-4, 4]
    for instruction in instructions:
        assert instruction.pixel.primary_color2 is EMPTY, "Each instruction carries a single primary"
        assert instruction.pixel.mix_color() is instruction.color


def test_primary_move_instruction():
    (instruction,) = Pixel.of(3, YELLOW).move_instructions()
    assert instruction == MoveInstruction(3, YELLOW)
    assert instruction.direction() == -3
    assert instruction.pixel == Pixel(3, YELLOW, EMPTY)


def test_of_requires_a_color():
    with pytest.raises(InvalidColorKind):
        Pixel.of(1, None)
    with pytest.raises(InvalidColorKind):
        Pixel.of(1, "R")


def test_value_equality():
    assert Pixel.of(2, ORANGE) == Pixel.of(2, ORANGE)
    assert Pixel.of(2, ORANGE) != Pixel.of(3, ORANGE)
    assert Pixel.of(2, RED) != Pixel.of(2, YELLOW)
    assert len({Pixel.empty(1), Pixel.empty(1), Pixel.of(1, EMPTY)}) == 1


def test_pixels_are_frozen():
    pixel = Pixel.of(1, RED)
    with pytest.raises(AttributeError):
        pixel.speed = 2


if __name__ == "__main__":
    print("\n=== Testing Pixels ===\n")

    test_of_primary()
    test_of_empty()
    test_of_composite_stores_primaries()
    test_composite_move_instructions()
    test_primary_move_instruction()
    test_value_equality()

    print("\n✓ All tests passed!\n")
