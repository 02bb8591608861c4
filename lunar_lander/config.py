"""
Central configuration for the lunar lander: window, per-run settings, HUD
colours and persistence paths.

Keep ALL constants here so tuning doesn't require hunting through code.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

# Window
WIDTH, HEIGHT = 900, 600
FPS = 60

# Terrain generation
FLAT_PROBABILITY = 0.1
SEGMENT_MIN, SEGMENT_MAX = 20, 50
INITIAL_HEIGHT_MIN = 0.166  # fraction of world height, from the bottom
INITIAL_HEIGHT_MAX = 0.333
MAX_FLAT_SLOPE = 0.05

# Spawn
SPAWN_MARGIN_X = 200
SPAWN_Y = 50
SPAWN_VX_RANGE = (-0.5, 1.5)

# High scores
HIGH_SCORES_PATH = Path("lunar_lander_scores.json")
HIGH_SCORES_KEY = "highScores"
MAX_HIGH_SCORES = 10
INITIALS_LENGTH = 3

# HUD
FUEL_BAR_RECT = (10, 10, 200, 20)
HUD_TEXT_X = 10
HUD_TEXT_Y = 40
HUD_LINE_H = 15
TIMER_OK_SECONDS = 10
TIMER_WARN_SECONDS = 5

WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
ORANGE = (255, 165, 0)
BLACK = (0, 0, 0)

CRASH_PREFIXES = [
    "You fool,",
    "Idiot pilot,",
    "Clumsy commander,",
    "Reckless rookie,",
    "Incompetent astronaut,",
]
CRASH_SUFFIXES = [
    "you destroyed the lander!",
    "mission failed miserably!",
    "back to flight school!",
    "what a disaster!",
    "you call that flying?",
]


@dataclass(frozen=True)
class Settings:
    """Per-run configuration. Built once at startup and never mutated mid-run."""

    hilliness: int = 100
    initial_time: float = 20.0
    initial_fuel: float = 15
    max_vertical_vel: float = 1.0
    max_horizontal_vel: float = 1.0
    max_landing_angle: float = 8
    gravity: float = 0.03
    max_peak_height_percent: float = 0.9
    min_valley_height_percent: float = 0.02
    max_zoom_level: float = 5.0
    zoom_start_height: float = 300
    debug: bool = False
    music_list: Tuple[str, ...] = field(
        default=(
            "music/lunar_descent.mp3",
            "music/lunar_reflections.mp3",
            "music/lunar_surface.mp3",
        )
    )
    lander_fixed_size_percent: float = 0.01
    minimum_landing_zone_percent: float = 1.5
    landing_height_tolerance: float = 10

    # Craft
    thrust_power: float = 0.1
    rotation_speed: float = 3.0
    fuel_burn: float = 0.05

    # World
    world_width: int = WIDTH
    world_height: int = HEIGHT
    tick_rate: int = FPS

    @property
    def lander_size(self) -> float:
        return self.world_height * self.lander_fixed_size_percent

    @property
    def lander_leg_span(self) -> float:
        return self.lander_size * 3.0

    @property
    def min_y(self) -> float:
        # highest allowed peak (screen y grows downward)
        return self.world_height - self.world_height * self.max_peak_height_percent

    @property
    def max_y(self) -> float:
        # lowest allowed valley
        return self.world_height - self.world_height * self.min_valley_height_percent
