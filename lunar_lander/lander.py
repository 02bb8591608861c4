"""
Lander physics, state and touchdown evaluation.

Responsibilities:
- Maintain lander state (x, y, vx, vy, angle, fuel, phase)
- Apply held controls -> one physics tick
- Compute leg tip geometry
- Detect touchdown and decide LANDED / CRASHED
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional, Sequence, Tuple

import numpy as np

from . import config as C
from .config import Settings
from .controls import Control
from .terrain import LandingZone, TerrainProfile, find_zone

Point = Tuple[float, float]


class Phase(Enum):
    FLYING = "flying"
    LANDED = "landed"
    CRASHED = "crashed"


@dataclass(frozen=True)
class TouchdownSnapshot:
    """Kinematics frozen at the tick of landing; scored once."""

    vy: float
    vx: float
    angle: float
    fuel: float
    factor: float


def effective_angle(angle: float) -> float:
    """Wrap degrees into (-180, 180]."""
    return 180.0 - (180.0 - angle) % 360.0


def rotate_points(points, angle_deg: float) -> np.ndarray:
    """Rotate local (x, y) offsets by angle_deg (clockwise on screen, y down)."""
    rad = math.radians(angle_deg)
    ca, sa = math.cos(rad), math.sin(rad)
    rot = np.array([[ca, -sa], [sa, ca]])
    return np.asarray(points, dtype=np.float64) @ rot.T


def leg_offsets(size: float) -> np.ndarray:
    return np.array([[-size * 1.5, size * 1.2], [size * 1.5, size * 1.2]])


class Lander:
    def __init__(self, settings: Settings, x: float = 0.0, y: float = 0.0, vx: float = 0.0, vy: float = 0.0):
        self.settings = settings
        self.size = settings.lander_size
        self.x = float(x)
        self.y = float(y)
        self.vx = float(vx)
        self.vy = float(vy)
        self.angle = 0.0
        self.fuel = float(settings.initial_fuel)

        self.phase = Phase.FLYING
        self.thrusting = False
        self.touchdown: Optional[TouchdownSnapshot] = None

    @classmethod
    def spawn(cls, settings: Settings, rng: random.Random) -> "Lander":
        x = rng.uniform(C.SPAWN_MARGIN_X, settings.world_width - C.SPAWN_MARGIN_X)
        vx = rng.uniform(*C.SPAWN_VX_RANGE)
        return cls(settings, x=x, y=C.SPAWN_Y, vx=vx)

    @property
    def flying(self) -> bool:
        return self.phase is Phase.FLYING

    @property
    def landed(self) -> bool:
        return self.phase is Phase.LANDED

    @property
    def crashed(self) -> bool:
        return self.phase is Phase.CRASHED

    @property
    def effective_angle(self) -> float:
        return effective_angle(self.angle)

    @property
    def fuel_fraction(self) -> float:
        return self.fuel / self.settings.initial_fuel

    def crash(self) -> None:
        if self.flying:
            self.phase = Phase.CRASHED
            self.thrusting = False

    def step(self, held: Collection[Control]) -> None:
        if not self.flying:
            return
        s = self.settings

        self.vy += s.gravity

        # rotation is a fixed increment per tick, not an integrated rate
        if Control.ROTATE_LEFT in held:
            self.angle -= s.rotation_speed
        if Control.ROTATE_RIGHT in held:
            self.angle += s.rotation_speed

        self.thrusting = False
        if Control.THRUST in held and self.fuel > 0:
            self.thrusting = True
            rad = math.radians(self.angle)
            self.vx += s.thrust_power * math.sin(rad)
            self.vy -= s.thrust_power * math.cos(rad)
            self.fuel = max(0.0, self.fuel - s.fuel_burn)

        self.x += self.vx
        self.y += self.vy

        if self.x < 0:
            self.x = 0.0
            self.vx = 0.0
        if self.x > s.world_width:
            self.x = float(s.world_width)
            self.vx = 0.0

    def leg_positions(self) -> Tuple[Point, Point]:
        tips = rotate_points(leg_offsets(self.size), self.angle) + (self.x, self.y)
        (l1x, l1y), (l2x, l2y) = tips
        return (float(l1x), float(l1y)), (float(l2x), float(l2y))

    def check_landing(self, terrain: TerrainProfile, zones: Sequence[LandingZone]) -> None:
        """Resolve touchdown once the craft is down at terrain level."""
        if not self.flying:
            return
        s = self.settings

        if self.y < terrain.height_at(self.x) - self.size / 2:
            return

        (l1x, l1y), (l2x, l2y) = self.leg_positions()
        ground1 = terrain.height_at(l1x)
        ground2 = terrain.height_at(l2x)
        slope = terrain.slope_at(self.x)
        angle = self.effective_angle
        zone = find_zone(zones, min(l1x, l2x), max(l1x, l2x))

        touched = l1y >= ground1 and l2y >= ground2
        level = abs(ground1 - ground2) < s.landing_height_tolerance
        slow_down = self.vy < s.max_vertical_vel
        slow_side = abs(self.vx) < s.max_horizontal_vel
        upright = abs(angle) < s.max_landing_angle
        flat = abs(slope) < C.MAX_FLAT_SLOPE

        if touched and level and slow_down and slow_side and upright and flat and zone is not None:
            self.vx = 0.0
            self.vy = 0.0
            # the snapshot is taken after the craft is brought to rest
            self.touchdown = TouchdownSnapshot(
                vy=self.vy,
                vx=self.vx,
                angle=angle,
                fuel=self.fuel,
                factor=zone.factor,
            )
            self.thrusting = False
            leg_drop = (l1y - self.y + l2y - self.y) / 2
            self.y = (ground1 + ground2) / 2 - leg_drop
            self.phase = Phase.LANDED
        else:
            self.crash()
