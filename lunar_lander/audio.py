"""
Background music.

The world picks a track; this player loops it through pygame.mixer.music.
Any mixer failure is reported and otherwise ignored so the game keeps running.
"""
import pygame


class MusicPlayer:
    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.current = None
        if not enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as ex:
            print(f"⚠️ Audio unavailable, continuing without music: {ex}")
            self.enabled = False

    def play(self, track: str) -> None:
        self.current = track
        if not self.enabled:
            return
        try:
            pygame.mixer.music.load(track)
            pygame.mixer.music.play(loops=-1)
        except (pygame.error, FileNotFoundError) as ex:
            print(f"⚠️ Music playback failed for {track}: {ex}")

    def stop(self) -> None:
        if not self.enabled:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as ex:
            print(f"⚠️ Failed to stop music: {ex}")
