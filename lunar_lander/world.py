"""
One game session: terrain, lander, countdown, score and high-score entry.

The World owns all run state. A scheduler calls tick() once per frame with the
current InputState and renders the returned WorldSnapshot; nothing here needs
a display, so runs can be driven headlessly.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from . import config as C
from .camera import Camera, follow
from .config import Settings
from .controls import Command, InputState, filter_initials
from .highscores import HighScoreEntry, HighScoreTable
from .lander import Lander, Phase
from .scoring import ScoreBreakdown, compute_score
from .terrain import LandingZone, TerrainProfile, generate_valid_terrain


@dataclass(frozen=True)
class LanderView:
    x: float
    y: float
    angle: float
    effective_angle: float
    vx: float
    vy: float
    size: float
    thrusting: bool
    fuel_fraction: float
    phase: Phase


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything the renderer needs for one frame, in world space plus a camera."""

    settings: Settings
    terrain: List[Tuple[float, float]]
    zones: List[LandingZone]
    lander: LanderView
    camera: Camera
    time_remaining: float
    score: Optional[ScoreBreakdown]
    high_scores: List[HighScoreEntry]
    needs_initials: bool
    initials: str
    crash_message: Optional[str]
    running: bool


class World:
    def __init__(
        self,
        settings: Settings,
        rng: random.Random,
        scores: HighScoreTable,
        on_track: Optional[Callable[[str], None]] = None,
    ):
        self.settings = settings
        self.rng = rng
        self.scores = scores
        self.on_track = on_track
        self.running = True

        self.terrain: TerrainProfile
        self.zones: List[LandingZone]
        self.lander: Lander
        self.new_run()

    def new_run(self) -> None:
        s = self.settings
        self.terrain, self.zones = generate_valid_terrain(s, s.lander_leg_span, self.rng)
        self.lander = Lander.spawn(s, self.rng)
        self.timer = float(s.initial_time)
        self.score: Optional[ScoreBreakdown] = None
        self.needs_initials = False
        self.initials = ""
        self.high_score_entered = False
        self.crash_message: Optional[str] = None
        self.select_track()

    def select_track(self) -> Optional[str]:
        if not self.settings.music_list:
            return None
        track = self.rng.choice(self.settings.music_list)
        if self.on_track is not None:
            self.on_track(track)
        return track

    def restart(self, inputs: Optional[InputState] = None) -> None:
        self.new_run()
        if inputs is not None:
            inputs.held.clear()

    def confirm_initials(self) -> bool:
        if not self.needs_initials or len(self.initials) != C.INITIALS_LENGTH:
            return False
        self.scores.insert(self.initials, self.score.total)
        self.needs_initials = False
        self.high_score_entered = True
        return True

    def _handle(self, command: Command, inputs: InputState) -> None:
        if command is Command.QUIT:
            self.running = False
        elif command is Command.CONFIRM:
            self.confirm_initials()
        elif command is Command.BACKSPACE:
            if self.needs_initials:
                self.initials = self.initials[:-1]
        elif command is Command.RESTART:
            # R is also a letter; ignore it as a restart while initials are being typed
            if not self.lander.flying and not self.needs_initials:
                self.restart(inputs)

    def tick(self, inputs: InputState) -> WorldSnapshot:
        for event in inputs.drain():
            if isinstance(event, str):
                if self.needs_initials:
                    self.initials = filter_initials(self.initials, event)
                continue
            self._handle(event, inputs)
            if not self.running:
                return self.snapshot()

        lander = self.lander
        lander.step(inputs.held)
        lander.check_landing(self.terrain, self.zones)

        if lander.flying:
            self.timer -= 1 / self.settings.tick_rate
            if self.timer <= 0:
                self.timer = 0.0
                lander.crash()

        if lander.landed and self.score is None:
            self.score = compute_score(lander.touchdown, self.timer, self.settings)
            if self.scores.qualifies(self.score.total):
                self.needs_initials = True
                self.initials = ""
            else:
                self.high_score_entered = True

        if lander.crashed and self.crash_message is None:
            self.crash_message = f"{self.rng.choice(C.CRASH_PREFIXES)} {self.rng.choice(C.CRASH_SUFFIXES)}"

        return self.snapshot()

    def snapshot(self) -> WorldSnapshot:
        lander = self.lander
        camera = follow(lander.x, lander.y, self.terrain.height_at(lander.x), self.settings)
        return WorldSnapshot(
            settings=self.settings,
            terrain=self.terrain.points,
            zones=list(self.zones),
            lander=LanderView(
                x=lander.x,
                y=lander.y,
                angle=lander.angle,
                effective_angle=lander.effective_angle,
                vx=lander.vx,
                vy=lander.vy,
                size=lander.size,
                thrusting=lander.thrusting,
                fuel_fraction=lander.fuel_fraction,
                phase=lander.phase,
            ),
            camera=camera,
            time_remaining=self.timer,
            score=self.score,
            high_scores=list(self.scores),
            needs_initials=self.needs_initials,
            initials=self.initials,
            crash_message=self.crash_message,
            running=self.running,
        )
