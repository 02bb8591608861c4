import random
from typing import Optional

import pygame

from . import config as C
from .audio import MusicPlayer
from .config import Settings
from .controls import Command, Control, InputState
from .highscores import HighScoreTable, JsonStore
from .hud import render
from .world import World

KEY_CONTROLS = {
    pygame.K_LEFT: Control.ROTATE_LEFT,
    pygame.K_RIGHT: Control.ROTATE_RIGHT,
    pygame.K_SPACE: Control.THRUST,
    pygame.K_UP: Control.THRUST,
}

KEY_COMMANDS = {
    pygame.K_r: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_RETURN: Command.CONFIRM,
    pygame.K_BACKSPACE: Command.BACKSPACE,
}


def pump_events(inputs: InputState) -> None:
    """Translate pending pygame events into held controls, commands and typed text."""
    for e in pygame.event.get():
        if e.type == pygame.QUIT:
            inputs.push(Command.QUIT)
        elif e.type == pygame.KEYDOWN:
            if e.key in KEY_CONTROLS:
                inputs.press(KEY_CONTROLS[e.key])
            if e.key in KEY_COMMANDS:
                inputs.push(KEY_COMMANDS[e.key])
            if e.unicode and e.unicode.isalpha():
                inputs.type_text(e.unicode)
        elif e.type == pygame.KEYUP:
            if e.key in KEY_CONTROLS:
                inputs.release(KEY_CONTROLS[e.key])


def run(
    settings: Optional[Settings] = None,
    seed: Optional[int] = None,
    scores_path=C.HIGH_SCORES_PATH,
    music: bool = True,
):
    settings = settings or Settings()
    rng = random.Random(seed)

    pygame.init()
    screen = pygame.display.set_mode((settings.world_width, settings.world_height))
    pygame.display.set_caption("Lunar Lander")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    player = MusicPlayer(enabled=music)
    scores = HighScoreTable(JsonStore(scores_path))
    world = World(settings, rng, scores, on_track=player.play)
    inputs = InputState()

    snap = world.snapshot()
    while snap.running:
        clock.tick(settings.tick_rate)
        pump_events(inputs)
        snap = world.tick(inputs)
        render(screen, snap, font)

    player.stop()
    pygame.quit()
