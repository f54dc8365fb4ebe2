"""
Interactive Pygame Viewer for Pixel Animations

Draws the animation as a space-time diagram: each tick adds one row of
cells below the previous one, so red pixels trace diagonals down-right,
yellow pixels down-left, and collisions show up as orange cells.

Controls:
  SPACE       Pause / Resume
  N           Single tick (while paused)
  R           Restart current preset
  P           Cycle palette
  S           Save screenshot
  H           Toggle HUD overlay
  1-9         Select preset
  Q / ESC     Quit
"""

import os
import time
import numpy as np
import pygame

from .animation import SimulationDidNotConverge
from .colormaps import PALETTE_ORDER, get_palette, render_rows
from .presets import PRESET_ORDER, create_animation, get_preset


HUD_HEIGHT = 24
MAX_CELL = 32

# Theme colors
THEME = {
    "bg": (18, 18, 24),
    "hud_bg": (0, 0, 0, 140),
    "text": (210, 215, 225),
    "warn": (255, 120, 90),
}


class Viewer:
    def __init__(self, width=900, height=600, start_preset="single_red",
                 palette="classic", tick_rate=4.0, speed=None, state=None):
        self.canvas_w = width
        self.canvas_h = height
        self.running = True
        self.paused = False
        self.show_hud = True
        self.fps_history = []

        # Fractional tick rate (accumulator pattern)
        self.tick_rate = tick_rate
        self.tick_accumulator = 0.0

        self.palette_name = palette
        self.lut = get_palette(palette)

        # Command-line overrides, only applied to the start preset
        self._overrides = {"speed": speed, "state": state}

        if get_preset(start_preset) is None:
            raise ValueError(f"Unknown preset: {start_preset!r}. Available: {PRESET_ORDER}")
        self.preset_key = start_preset
        self.animation = None  # Created in _apply_preset
        self.rows = []
        self.finished = False
        self.error = None

        self._apply_preset(self.preset_key)

    def _apply_preset(self, key):
        """Load a preset and restart from its initial state."""
        if get_preset(key) is None:
            return
        overrides = self._overrides if key == self.preset_key else {}
        self.preset_key = key
        self.animation = create_animation(key, **overrides)
        self._on_reset()

    def _on_reset(self):
        self.animation.reset()
        self.rows = [self.animation.render()]
        self.finished = self.animation.is_empty()
        self.error = None
        self.tick_accumulator = 0.0

    def _advance(self):
        """Advance one tick, stopping at the first empty track or the tick limit."""
        if self.finished:
            return
        self.animation.step()
        if self.animation.is_empty():
            self.finished = True
            self.rows.append(self.animation.render())
        elif self.animation.generation >= self.animation.max_ticks:
            # Same cut-off as Animation.frames: the row at the limit is not shown
            self.finished = True
            self.error = SimulationDidNotConverge(self.animation.generation, self.rows)
            print(f"[PA] {self.error}")
        else:
            self.rows.append(self.animation.render())

    def _cell_size(self):
        length = max(self.animation.length, 1)
        return max(1, min(self.canvas_w // length, MAX_CELL))

    def _render_frame(self):
        """Render the visible tail of the space-time diagram to a surface."""
        if self.animation.length == 0:
            return pygame.Surface((1, 1))
        cell = self._cell_size()
        visible = max(1, (self.canvas_h - HUD_HEIGHT) // cell)
        rows = self.rows[-visible:]
        rgb = render_rows(rows, self.lut, scale=cell)
        return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.swapaxes(0, 1)))

    def _draw_hud(self, screen, fps):
        if not self.show_hud:
            return

        font = self.hud_font
        stats = self.animation.stats
        preset = get_preset(self.preset_key)

        line = (f"{preset['name']}  |  Speed: {self.animation.speed}  |  "
                f"Time: {stats['generation']:02d}  |  "
                f"R {stats['red']}  Y {stats['yellow']}  O {stats['orange']}  |  "
                f"{self.palette_name}  |  FPS: {fps:.0f}")
        if self.paused:
            line = "[PAUSED]  " + line
        elif self.finished:
            line = "[DONE]  " + line

        padding = 6
        bg_surface = pygame.Surface((self.canvas_w, HUD_HEIGHT), pygame.SRCALPHA)
        bg_surface.fill(THEME["hud_bg"])
        screen.blit(bg_surface, (0, 0))

        color = THEME["warn"] if self.error is not None else THEME["text"]
        text_surface = font.render(line, True, color)
        screen.blit(text_surface, (padding + 4, padding))

    def _save_screenshot(self):
        screenshots_dir = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
            "screenshots"
        )
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir, f"pa_{self.preset_key}_{timestamp}.png")

        rgb = render_rows(self.rows, self.lut, scale=self._cell_size())
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(rgb.swapaxes(0, 1)))
        pygame.image.save(surface, path)
        print(f"Screenshot saved: {path}")

    def run(self):
        """Main viewer loop."""
        pygame.init()

        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h))
        pygame.display.set_caption("Pixel Animation")
        clock = pygame.time.Clock()

        self.hud_font = pygame.font.SysFont("menlo", 13)

        last_time = time.time()

        while self.running:
            now = time.time()
            dt = min(now - last_time, 0.1)  # cap dt to avoid jumps
            last_time = now
            frame_start = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            if not self.paused:
                self.tick_accumulator += dt * self.tick_rate
                while self.tick_accumulator >= 1.0:
                    self._advance()
                    self.tick_accumulator -= 1.0

            screen.fill(THEME["bg"])
            sim_surface = self._render_frame()
            x = (self.canvas_w - sim_surface.get_width()) // 2
            screen.blit(sim_surface, (max(x, 0), HUD_HEIGHT))

            frame_time = time.time() - frame_start
            self.fps_history.append(frame_time)
            if len(self.fps_history) > 30:
                self.fps_history.pop(0)
            avg_fps = 1.0 / max(np.mean(self.fps_history), 0.001)

            self._draw_hud(screen, avg_fps)

            pygame.display.flip()
            clock.tick(60)

        pygame.quit()

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_n and self.paused:
            self._advance()

        elif key == pygame.K_r:
            self._on_reset()

        elif key == pygame.K_h:
            self.show_hud = not self.show_hud

        elif key == pygame.K_s:
            self._save_screenshot()

        elif key == pygame.K_p:
            idx = (PALETTE_ORDER.index(self.palette_name) + 1) % len(PALETTE_ORDER)
            self.palette_name = PALETTE_ORDER[idx]
            self.lut = get_palette(self.palette_name)

        # Preset selection (1-9)
        elif pygame.K_1 <= key <= pygame.K_9:
            idx = key - pygame.K_1
            if idx < len(PRESET_ORDER):
                self._apply_preset(PRESET_ORDER[idx])
