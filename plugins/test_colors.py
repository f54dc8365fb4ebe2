#!/usr/bin/env python3
"""
Tests for the pixel color model.

Verifies:
1. Mixing identities (self, EMPTY) and the RED + YELLOW table entry
2. Composite breakdown and its error cases
3. Directional multipliers and movement
4. Id lookup
"""

import pytest

from pixel_animation.colors import InvalidColorKind, PixelColor

RED = PixelColor.RED
YELLOW = PixelColor.YELLOW
ORANGE = PixelColor.ORANGE
EMPTY = PixelColor.EMPTY


def test_mix_identities():
    """Mixing with itself or with EMPTY never changes a color."""
    print("Testing mix identities...")
    for color in PixelColor:
        assert color.mix(color) is color, f"{color} mixed with itself"
        assert color.mix(EMPTY) is color, f"{color} mixed with EMPTY"
        assert EMPTY.mix(color) is color, f"EMPTY mixed with {color}"
    print("  ✓ mix identities hold for every color")


def test_mix_primaries_is_symmetric():
    assert RED.mix(YELLOW) is ORANGE
    assert YELLOW.mix(RED) is ORANGE


def test_mix_rejects_composites():
    with pytest.raises(InvalidColorKind, match="ORANGE is not a primary color"):
        ORANGE.mix(RED)
    with pytest.raises(InvalidColorKind, match="not a primary color"):
        YELLOW.mix(ORANGE)


def test_mix_rejects_non_colors():
    with pytest.raises(InvalidColorKind):
        RED.mix("Y")
    with pytest.raises(InvalidColorKind):
        EMPTY.mix(None)


def test_decompose():
    assert set(PixelColor.decompose(ORANGE)) == {RED, YELLOW}
    first, second = PixelColor.decompose(ORANGE)
    assert first.mix(second) is ORANGE, "Components should mix back to ORANGE"


def test_decompose_rejects_non_composites():
    for color in (RED, YELLOW, EMPTY):
        with pytest.raises(InvalidColorKind, match="not a composite color"):
            PixelColor.decompose(color)


def test_invalid_color_kind_is_value_error():
    err = InvalidColorKind(RED, "composite")
    assert isinstance(err, ValueError)
    assert err.color is RED
    assert err.required_kind == "composite"


def test_direction():
    """direction(speed) is speed times the directional multiplier."""
    print("Testing direction...")
    multipliers = {RED: 1, YELLOW: -1, ORANGE: 0, EMPTY: 0}
    for color, multiplier in multipliers.items():
        for speed in range(6):
            assert color.direction(speed) == speed * multiplier, f"{color} at speed {speed}"
    assert ORANGE.direction(100) == 0
    assert EMPTY.direction(100) == 0
    print("  ✓ direction working correctly")


def test_has_movement():
    assert RED.has_movement()
    assert YELLOW.has_movement()
    assert not ORANGE.has_movement()
    assert not EMPTY.has_movement()


def test_primary_flags():
    assert RED.is_primary() and YELLOW.is_primary()
    assert not ORANGE.is_primary()
    assert not EMPTY.is_primary()


def test_lookup():
    assert PixelColor.lookup("R") is RED
    assert PixelColor.lookup("Y") is YELLOW
    assert PixelColor.lookup("O") is ORANGE
    assert PixelColor.lookup(".") is EMPTY
    assert PixelColor.lookup("X") is None
    assert PixelColor.lookup("r") is None, "Lookup is case sensitive"
    assert PixelColor.lookup("") is None
    assert PixelColor.lookup("RY") is None


def test_str_is_id():
    assert "".join(str(c) for c in PixelColor) == "RYO."


if __name__ == "__main__":
    print("\n=== Testing Pixel Colors ===\n")

    test_mix_identities()
    test_mix_primaries_is_symmetric()
    test_decompose()
    test_direction()
    test_has_movement()
    test_lookup()

    print("\n✓ All tests passed!\n")
