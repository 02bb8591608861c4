"""
Landing score.

Five sub-scores, each 100 for a perfect value, summed and scaled by the
landing zone factor. Sub-scores are deliberately left unclamped.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import Settings
from .lander import TouchdownSnapshot


@dataclass(frozen=True)
class ScoreBreakdown:
    fuel: float
    time: float
    vy: float
    vx: float
    angle: float
    factor: float

    @property
    def base(self) -> float:
        return self.fuel + self.time + self.vy + self.vx + self.angle

    @property
    def total(self) -> float:
        return self.base * self.factor


def compute_score(touchdown: TouchdownSnapshot, time_remaining: float, settings: Settings) -> ScoreBreakdown:
    return ScoreBreakdown(
        fuel=(touchdown.fuel / settings.initial_fuel) * 100,
        time=(time_remaining / settings.initial_time) * 100,
        vy=(1 - touchdown.vy / settings.max_vertical_vel) * 100,
        vx=(1 - abs(touchdown.vx) / settings.max_horizontal_vel) * 100,
        angle=(1 - abs(touchdown.angle) / settings.max_landing_angle) * 100,
        factor=touchdown.factor,
    )
