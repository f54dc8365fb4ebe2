"""
Palettes for Pixel Animation Rendering

Maps each PixelColor to an RGB triple. A palette is turned into a
(len(PixelColor), 3) uint8 array that serves as a lookup table indexed by
color code, so a whole animation renders to a space-time image in one
numpy indexing step (time runs down, track position runs across).
"""

import numpy as np

from .colors import PixelColor


# Color code per PixelColor (enum definition order)
COLOR_CODES = {color: code for code, color in enumerate(PixelColor)}
_ID_CODES = {color.id: code for color, code in COLOR_CODES.items()}
EMPTY_CODE = COLOR_CODES[PixelColor.EMPTY]


# --- Palette Definitions ---

def classic():
    """Plain red, yellow and orange on near-black."""
    return {
        PixelColor.RED: (220, 40, 40),
        PixelColor.YELLOW: (240, 210, 40),
        PixelColor.ORANGE: (245, 130, 20),
        PixelColor.EMPTY: (18, 18, 24),
    }


def neon():
    """Saturated glow colors on black."""
    return {
        PixelColor.RED: (255, 40, 110),
        PixelColor.YELLOW: (220, 255, 60),
        PixelColor.ORANGE: (255, 150, 40),
        PixelColor.EMPTY: (0, 0, 0),
    }


def paper():
    """Muted inks on white - for printing."""
    return {
        PixelColor.RED: (180, 30, 30),
        PixelColor.YELLOW: (200, 160, 0),
        PixelColor.ORANGE: (210, 100, 10),
        PixelColor.EMPTY: (250, 248, 240),
    }


# Registry of all palettes
PALETTES = {
    "classic": classic,
    "neon": neon,
    "paper": paper,
}

PALETTE_ORDER = list(PALETTES.keys())


def get_palette(name):
    """Get a palette LUT (len(PixelColor), 3) uint8 array by name."""
    colors = PALETTES[name]()
    lut = np.zeros((len(COLOR_CODES), 3), dtype=np.uint8)
    for color, code in COLOR_CODES.items():
        lut[code] = colors[color]
    return lut


def encode_rows(rows):
    """
    Convert rendered rows to a 2D array of color codes.

    Args:
        rows: Sequence of equal-length row strings

    Returns:
        (T, N) int array; unknown ids map to the EMPTY code
    """
    width = len(rows[0]) if rows else 0
    codes = np.full((len(rows), width), EMPTY_CODE, dtype=np.int64)
    for t, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {t} has length {len(row)}, expected {width}")
        codes[t] = [_ID_CODES.get(ch, EMPTY_CODE) for ch in row]
    return codes


def render_rows(rows, palette="classic", scale=1):
    """
    Render rows as a space-time RGB image.

    Args:
        rows: Sequence of equal-length row strings
        palette: Palette name or a LUT from get_palette()
        scale: Pixels per cell edge in the output image

    Returns:
        (T * scale, N * scale, 3) uint8 RGB image
    """
    lut = get_palette(palette) if isinstance(palette, str) else palette
    rgb = lut[encode_rows(rows)]
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)
    return rgb
