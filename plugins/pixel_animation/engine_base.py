"""
Abstract Base Class for Track Engines

A track engine owns a one-dimensional track of pixels and advances it one
tick at a time, so the CLI and the viewer can drive any engine the same way.
"""

from abc import ABC, abstractmethod
import numpy as np

from .colormaps import COLOR_CODES as _CODES
from .colors import PixelColor


class TrackEngine(ABC):
    """Base class for one-dimensional track engines."""

    engine_name = ""   # e.g. "animation"
    engine_label = ""  # e.g. "Pixel Animation"

    def __init__(self, speed, length):
        self.speed = speed
        self.length = length
        self.track = ()
        self.generation = 0

    @abstractmethod
    def advance(self, track):
        """Return the track one tick after `track`. Must not modify `track`."""

    @abstractmethod
    def reset(self):
        """Restore the initial track."""

    def step(self):
        """Advance one tick. Returns the new track."""
        self.track = self.advance(self.track)
        self.generation += 1
        return self.track

    def step_n(self, n):
        """Advance n ticks. Returns final track."""
        for _ in range(n):
            self.step()
        return self.track

    def is_empty(self):
        return is_empty(self.track)

    def render(self):
        return render(self.track)

    @property
    def stats(self):
        """Return current track statistics."""
        codes = np.array([_CODES[p.mix_color()] for p in self.track], dtype=np.intp)
        counts = np.bincount(codes, minlength=len(_CODES))
        return {
            "generation": self.generation,
            "length": self.length,
            "moving": sum(1 for p in self.track if p.has_movement()),
            **{color.name.lower(): int(counts[code]) for color, code in _CODES.items()},
        }


def render(track):
    """Render a track as a string of visible color ids."""
    return "".join(p.mix_color().id for p in track)


def is_empty(track):
    """True if every pixel on the track renders as EMPTY."""
    return all(p.mix_color() is PixelColor.EMPTY for p in track)
