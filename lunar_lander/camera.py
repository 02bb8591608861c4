"""
Camera follow + proximity zoom.

Zoom rises linearly from 1.0 to max_zoom_level as the lander's height above
ground drops below zoom_start_height. The view is centred on the lander and
clamped so it never shows anything outside the world.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .config import Settings


@dataclass(frozen=True)
class Camera:
    x: float
    y: float
    zoom: float

    def world_to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        return ((wx - self.x) * self.zoom, (wy - self.y) * self.zoom)


def zoom_for_height(height_above_ground: float, settings: Settings) -> float:
    h = max(0.0, height_above_ground)
    fraction = max(0.0, (settings.zoom_start_height - h) / settings.zoom_start_height)
    return 1 + (settings.max_zoom_level - 1) * fraction


def follow(x: float, y: float, ground_y: float, settings: Settings) -> Camera:
    zoom = zoom_for_height(ground_y - y, settings)
    visible_w = settings.world_width / zoom
    visible_h = settings.world_height / zoom

    cam_x = x - visible_w / 2
    cam_y = y - visible_h / 2
    cam_x = max(0.0, min(cam_x, settings.world_width - visible_w))
    cam_y = max(0.0, min(cam_y, settings.world_height - visible_h))
    return Camera(cam_x, cam_y, zoom)
