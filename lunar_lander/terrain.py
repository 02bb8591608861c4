"""
Terrain generation and landing zone logic.

Responsibilities:
- Generate a random piecewise-linear height profile across the world width
- Record flat runs of that profile as landing zones with a score factor
- Provide height_at(x), slope_at(x) and zone lookup for a leg span
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import config as C
from .config import Settings


@dataclass(frozen=True)
class LandingZone:
    x1: float
    x2: float
    y: float
    factor: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def center(self) -> float:
        return (self.x1 + self.x2) / 2

    def contains_span(self, lo: float, hi: float) -> bool:
        return self.x1 <= lo and self.x2 >= hi


class TerrainProfile:
    """Polyline of (x, y) vertices with strictly increasing x starting at 0."""

    def __init__(self, points: Sequence[Tuple[float, float]], world_height: float = C.HEIGHT):
        if len(points) < 2:
            raise ValueError("Need at least two vertices to build a terrain profile")
        arr = np.asarray(points, dtype=np.float64)
        if arr[0, 0] != 0:
            raise ValueError(f"Terrain must start at x=0, got x={arr[0, 0]}")
        if np.any(np.diff(arr[:, 0]) <= 0):
            raise ValueError("Terrain x-coordinates must be strictly increasing")

        self.xs = arr[:, 0]
        self.ys = arr[:, 1]
        self.world_height = float(world_height)

    @property
    def points(self) -> List[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in zip(self.xs, self.ys)]

    def __len__(self) -> int:
        return len(self.xs)

    def _segment_index(self, x: float) -> Optional[int]:
        # first segment whose closed x-range contains x
        if x < self.xs[0] or x > self.xs[-1]:
            return None
        i = int(np.searchsorted(self.xs, x, side="left")) - 1
        return max(i, 0)

    def height_at(self, x: float) -> float:
        i = self._segment_index(x)
        if i is None:
            return self.world_height
        x1, x2 = self.xs[i], self.xs[i + 1]
        y1, y2 = self.ys[i], self.ys[i + 1]
        t = (x - x1) / (x2 - x1)
        return float(y1 + t * (y2 - y1))

    def slope_at(self, x: float) -> float:
        i = self._segment_index(x)
        if i is None:
            return 0.0
        return float((self.ys[i + 1] - self.ys[i]) / (self.xs[i + 1] - self.xs[i]))


def zone_factor(width: float, y: float, min_y: float, max_y: float) -> float:
    """Narrow pads score more; the height term adds up to 0.5 across [min_y, max_y]."""
    if width < 25:
        base = 2.0
    elif width < 35:
        base = 1.5
    else:
        base = 1.0
    height_bonus = (y - min_y) / (max_y - min_y) * 0.5
    return base + height_bonus


def find_zone(zones: Sequence[LandingZone], lo: float, hi: float) -> Optional[LandingZone]:
    for zone in zones:
        if zone.contains_span(lo, hi):
            return zone
    return None


def generate_terrain(
    settings: Settings,
    leg_span: float,
    rng: random.Random,
) -> Tuple[TerrainProfile, List[LandingZone]]:
    """One random draw of terrain. May return no landing zones."""
    width = settings.world_width
    height = settings.world_height
    min_y, max_y = settings.min_y, settings.max_y
    min_flat = int(leg_span * settings.minimum_landing_zone_percent)

    start_lo = int(height * C.INITIAL_HEIGHT_MIN)
    start_hi = int(height * C.INITIAL_HEIGHT_MAX)
    points: List[Tuple[float, float]] = [(0, height - rng.randint(start_lo, start_hi))]
    spans: List[List[float]] = []  # [x1, x2, y]

    x = 0
    while x < width:
        is_flat = rng.random() < C.FLAT_PROBABILITY
        segment = rng.randint(C.SEGMENT_MIN, C.SEGMENT_MAX)
        if is_flat:
            segment = max(segment, min_flat)
        x = min(x + segment, width)

        last_x, last_y = points[-1]
        if is_flat:
            y = last_y
            if spans and spans[-1][1] == last_x and spans[-1][2] == y:
                spans[-1][1] = x
            else:
                spans.append([last_x, x, y])
        else:
            dy = 0
            while dy == 0:
                dy = rng.randint(-settings.hilliness, settings.hilliness)
            y = max(min_y, min(last_y + dy, max_y))
        points.append((x, y))

    zones = [
        LandingZone(x1, x2, y, zone_factor(x2 - x1, y, min_y, max_y))
        for x1, x2, y in spans
    ]
    return TerrainProfile(points, world_height=height), zones


def generate_valid_terrain(
    settings: Settings,
    leg_span: float,
    rng: random.Random,
) -> Tuple[TerrainProfile, List[LandingZone]]:
    """Redraw until the terrain has at least one landing zone."""
    while True:
        profile, zones = generate_terrain(settings, leg_span, rng)
        if zones:
            return profile, zones
