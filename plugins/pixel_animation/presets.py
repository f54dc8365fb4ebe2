"""
Pixel Animation Presets

Each preset defines a speed and an initial track state. The first five are
the reference scenarios whose full row sequences are pinned by the tests.
"""

from .animation import Animation

PRESETS = {
    # =====================================================================
    # REFERENCE SCENARIOS
    # =====================================================================
    "single_red": {
        "name": "Single Red",
        "description": "One red pixel drifting right and off the track",
        "speed": 2, "state": "..R....",
    },
    "pass_through": {
        "name": "Pass Through",
        "description": "Five pixels passing through each other",
        "speed": 3, "state": "RR..YRY",
    },
    "instant_exit": {
        "name": "Instant Exit",
        "description": "Every pixel leaves the track on the first tick",
        "speed": 10, "state": "RYRYRYRYRY",
    },
    "empty": {
        "name": "Empty",
        "description": "Nothing to animate",
        "speed": 1, "state": "...",
    },
    "crowd": {
        "name": "Crowd",
        "description": "Nineteen positions of mixed traffic at speed 1",
        "speed": 1, "state": "YRRY.YR.YRR.R.YRRY.",
    },

    # =====================================================================
    # DEMOS
    # =====================================================================
    "head_on": {
        "name": "Head On",
        "description": "Red and yellow meet in the middle and turn orange",
        "speed": 1, "state": "R...Y",
    },
    "orange_burst": {
        "name": "Orange Burst",
        "description": "A lone orange pixel splitting into red and yellow",
        "speed": 2, "state": "....O....",
    },
    "convoy": {
        "name": "Convoy",
        "description": "Two opposing convoys crossing a long track",
        "speed": 1, "state": "RRRR........................YYYY",
    },
    "frozen": {
        "name": "Frozen",
        "description": "Speed 0 never empties the track (hits the tick limit)",
        "speed": 0, "state": "..R..", "max_ticks": 8,
    },
}


# Preset order - shown in the viewer, number keys 1-9 map here
PRESET_ORDER = [
    "single_red", "pass_through", "instant_exit", "empty", "crowd",
    "head_on", "orange_burst", "convoy", "frozen",
]

DEFAULT_PRESET = "single_red"


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]


def create_animation(key, speed=None, state=None, max_ticks=None):
    """Build an Animation from a preset, with optional overrides."""
    preset = get_preset(key)
    if preset is None:
        raise ValueError(f"Unknown preset: {key!r}. Available: {PRESET_ORDER}")
    return Animation(
        preset["speed"] if speed is None else speed,
        preset["state"] if state is None else state,
        max_ticks=preset.get("max_ticks") if max_ticks is None else max_ticks,
    )
