"""
Pixel Animation - Entry Point

Usage:
    python -m pixel_animation [preset] [--speed N] [--state STR] [--max-ticks N]
                              [--palette NAME] [--snap PATH] [--scale N]
                              [--view] [--verbose]

Examples:
    python -m pixel_animation
    python -m pixel_animation crowd
    python -m pixel_animation --speed 3 --state RR..YRY
    python -m pixel_animation convoy --snap convoy.png --scale 12
    python -m pixel_animation pass_through --view

Prints one row per tick. Row characters are color ids:
    R  red (moves right)     Y  yellow (moves left)
    O  orange (red+yellow)   .  empty

Use --list to see all available presets.
"""

import logging
import sys

from .animation import SimulationDidNotConverge
from .colormaps import PALETTES, render_rows
from .logging_config import setup_logging
from .presets import DEFAULT_PRESET, PRESETS, create_animation, list_presets


def print_rows(rows, speed):
    """Print each row with its time index."""
    for time, row in enumerate(rows):
        print(f"speed={speed}, time={time:02d}: [{row}]")


def snap(rows, path, palette="classic", scale=8):
    """Headless mode: save the space-time diagram as a PNG."""
    from PIL import Image

    rgb = render_rows(rows, palette, scale=scale)
    Image.fromarray(rgb).save(path)
    print(f" saved: {path}")


def main(argv=None):
    preset = DEFAULT_PRESET
    speed = None
    state = None
    max_ticks = None
    palette = "classic"
    snap_path = None
    scale = 8
    view = False
    level = logging.WARNING

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--speed" and i + 1 < len(args):
                speed = int(args[i + 1])
                i += 2
            elif arg == "--state" and i + 1 < len(args):
                state = args[i + 1]
                i += 2
            elif arg == "--max-ticks" and i + 1 < len(args):
                max_ticks = int(args[i + 1])
                i += 2
            elif arg == "--palette" and i + 1 < len(args):
                palette = args[i + 1]
                i += 2
            elif arg == "--snap" and i + 1 < len(args):
                snap_path = args[i + 1]
                i += 2
            elif arg == "--scale" and i + 1 < len(args):
                scale = int(args[i + 1])
                i += 2
            elif arg == "--view":
                view = True
                i += 1
            elif arg in ("--verbose", "-v"):
                level = logging.DEBUG
                i += 1
            elif arg == "--list":
                print("\nAvailable presets:")
                for key, name, desc in list_presets():
                    print(f"    {key:16s} {name:16s} {desc}")
                print()
                return 0
            elif arg in ("--help", "-h"):
                print(__doc__)
                return 0
            elif arg in PRESETS:
                preset = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print("Use --list to see available presets")
                return 2
    except ValueError as e:
        print(f"Invalid value for {args[i]}: {e}")
        return 2

    if palette not in PALETTES:
        print(f"Unknown palette: {palette}. Available: {', '.join(PALETTES)}")
        return 2

    setup_logging(level)

    if view:
        from .viewer import Viewer

        try:
            viewer = Viewer(start_preset=preset, palette=palette, speed=speed, state=state)
        except ValueError as e:
            print(f"Error: {e}")
            return 2
        viewer.run()
        return 0

    try:
        animation = create_animation(preset, speed=speed, state=state, max_ticks=max_ticks)
        rows = animation.animate()
    except SimulationDidNotConverge as e:
        print_rows(e.rows, animation.speed)
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    print_rows(rows, animation.speed)

    if snap_path:
        if animation.length == 0:
            print("Error: cannot snap an empty track")
            return 2
        try:
            snap(rows, snap_path, palette=palette, scale=scale)
        except (ValueError, OSError) as e:
            print(f"Error: {e}")
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
