"""
Pixel Animation Engine

Pixels slide along a one-dimensional track until every one of them has
left it. Each tick:

  - every moving pixel sends each of its primary components
    `color.direction(speed)` positions away (RED right, YELLOW left)
  - components landing outside the track are dropped
  - components landing on the same position are mixed together, so a RED
    and a YELLOW arriving together become ORANGE; an ORANGE pixel splits
    back into RED and YELLOW on the next tick

The animation is the list of rendered rows from the initial state up to
and including the first all-empty row.

Usage:
    from pixel_animation.animation import Animation
    Animation(2, "..R....").animate()
    # ['..R....', '....R..', '......R', '.......']
"""

import logging

from .colors import PixelColor
from .engine_base import TrackEngine, is_empty, render
from .pixel import Pixel

logger = logging.getLogger(__name__)


class SimulationDidNotConverge(RuntimeError):
    """The track still had visible pixels after the tick limit."""

    def __init__(self, ticks, rows=()):
        super().__init__(f"Track still not empty after {ticks} ticks")
        self.ticks = ticks
        self.rows = list(rows)


class Animation(TrackEngine):

    engine_name = "animation"
    engine_label = "Pixel Animation"

    def __init__(self, speed, initial_state, max_ticks=None):
        """
        Args:
            speed: Positions each pixel moves per tick (no direction), >= 0
            initial_state: One color id per position; unknown ids become
                empty pixels
            max_ticks: Tick limit before giving up; defaults to the track
                length + 1, enough for any input that can terminate
        """
        if isinstance(speed, bool) or not isinstance(speed, int) or speed < 0:
            raise ValueError(f"speed must be a non-negative integer, got {speed!r}")
        if max_ticks is None:
            max_ticks = len(initial_state) + 1
        elif isinstance(max_ticks, bool) or not isinstance(max_ticks, int) or max_ticks < 1:
            raise ValueError(f"max_ticks must be a positive integer, got {max_ticks!r}")

        super().__init__(speed, len(initial_state))
        self.initial_state = initial_state
        self.max_ticks = max_ticks
        # Shared by every empty position
        self.empty_pixel = Pixel.empty(speed)
        self.initial_value = tuple(self._parse(initial_state))
        self.track = self.initial_value

    def _parse(self, state):
        for index, id in enumerate(state):
            color = PixelColor.lookup(id)
            if color is None:
                logger.warning("Substituting an empty pixel for %r at position %d", id, index)
                yield self.empty_pixel
            else:
                yield Pixel.of(self.speed, color)

    def advance(self, track):
        result = [self.empty_pixel] * len(track)
        for index, pixel in enumerate(track):
            if not pixel.has_movement():
                continue
            for instruction in pixel.move_instructions():
                target = index + instruction.direction()
                if 0 <= target < len(result):
                    # Mix with whatever already landed here this tick
                    mixed = result[target].mix_color().mix(instruction.color)
                    result[target] = Pixel.of(self.speed, mixed)
        return tuple(result)

    def frames(self, track=None):
        """Yield rendered rows lazily, starting with `track` (default: the initial track)."""
        if track is None:
            track = self.initial_value
        start = track

        yield render(track)
        ticks = 0
        while True:
            track = self.advance(track)
            ticks += 1
            if is_empty(track):
                break
            if ticks >= self.max_ticks:
                raise SimulationDidNotConverge(ticks)
            logger.debug("tick %d: [%s]", ticks, render(track))
            yield render(track)

        # An empty start is its own final row
        if not is_empty(start):
            yield render(track)

    def run(self, track):
        """Run `track` to completion. Returns the list of rendered rows."""
        rows = []
        try:
            for row in self.frames(track):
                rows.append(row)
        except SimulationDidNotConverge as exc:
            exc.rows = rows
            raise
        return rows

    def animate(self):
        """Run the animation from its initial state. Returns the list of rendered rows."""
        return self.run(self.initial_value)

    def reset(self):
        self.track = self.initial_value
        self.generation = 0

    def __eq__(self, other):
        if not isinstance(other, Animation):
            return NotImplemented
        return self.speed == other.speed and self.initial_value == other.initial_value

    def __hash__(self):
        return hash((self.speed, self.initial_value))

    def __repr__(self):
        return f"Animation(speed={self.speed}, initial_state={self.initial_state!r})"
