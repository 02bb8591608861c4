"""
Rendering of a WorldSnapshot.

Responsibilities:
- Terrain polyline and landing-zone factor labels
- Lander body, legs, thrust flame (and debug bounding box)
- Fuel bar and colour-coded velocity / angle / timer readouts
- End-of-run overlays: landed with score breakdown, crashed, initials prompt, high-score list
"""
import pygame

from . import config as C
from .lander import Phase, rotate_points


def safe_color(value, limit):
    return C.GREEN if value < limit else C.RED


def timer_color(seconds):
    if seconds > C.TIMER_OK_SECONDS:
        return C.GREEN
    if seconds >= C.TIMER_WARN_SECONDS:
        return C.ORANGE
    return C.RED


def lander_shapes(size):
    """Local-space polygons/polylines of the craft, y pointing down."""
    base = [(-size, size / 2), (size, size / 2), (size / 1.5, 0), (-size / 1.5, 0)]
    ascent = [(-size / 1.5, 0), (size / 1.5, 0), (size / 2, -size), (-size / 2, -size)]
    leg1 = [(-size / 1.5, size / 2), (-size * 1.2, size), (-size * 1.5, size * 1.2)]
    leg2 = [(size / 1.5, size / 2), (size * 1.2, size), (size * 1.5, size * 1.2)]
    flame = [(-size / 4, size / 2), (size / 4, size / 2), (0, size / 2 + size * 1.5)]
    return base, ascent, leg1, leg2, flame


def draw_terrain(screen, snap):
    cam = snap.camera
    pts = [cam.world_to_screen(x, y) for x, y in snap.terrain]
    pygame.draw.lines(screen, C.WHITE, False, pts, 2)

    label_font = pygame.font.SysFont("monospace", max(1, int(12 * cam.zoom)))
    for zone in snap.zones:
        txt = label_font.render(f"{zone.factor:.1f}x", True, C.WHITE)
        sx, sy = cam.world_to_screen(zone.center, zone.y - 15)
        screen.blit(txt, (sx - txt.get_width() / 2, sy - txt.get_height()))


def draw_lander(screen, snap):
    lv = snap.lander
    cam = snap.camera

    def to_screen(local):
        world = rotate_points(local, lv.angle) + (lv.x, lv.y)
        return [cam.world_to_screen(wx, wy) for wx, wy in world]

    base, ascent, leg1, leg2, flame = lander_shapes(lv.size)
    pygame.draw.polygon(screen, C.WHITE, to_screen(base), 1)
    pygame.draw.polygon(screen, C.WHITE, to_screen(ascent), 1)
    pygame.draw.lines(screen, C.WHITE, False, to_screen(leg1), 1)
    pygame.draw.lines(screen, C.WHITE, False, to_screen(leg2), 1)

    if lv.thrusting and lv.fuel_fraction > 0:
        pygame.draw.polygon(screen, C.WHITE, to_screen(flame), 1)

    if snap.settings.debug:
        pts = to_screen(base + ascent + leg1 + leg2)
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        rect = pygame.Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        pygame.draw.rect(screen, C.RED, rect, 1)


def draw_readouts(screen, snap, font):
    s = snap.settings
    lv = snap.lander

    x, y, w, h = C.FUEL_BAR_RECT
    pygame.draw.rect(screen, C.WHITE, (x, y, w, h), 1)
    fill = int(max(0.0, lv.fuel_fraction) * w)
    if fill > 0:
        pygame.draw.rect(screen, C.WHITE, (x, y, fill, h))

    lines = [
        (f"Vert Vel: {lv.vy:.2f}", safe_color(lv.vy, s.max_vertical_vel)),
        (f"Horiz Vel: {lv.vx:.2f}", safe_color(abs(lv.vx), s.max_horizontal_vel)),
        (f"Angle: {lv.effective_angle:.2f}", safe_color(abs(lv.effective_angle), s.max_landing_angle)),
        (f"Time: {snap.time_remaining:.1f}", timer_color(snap.time_remaining)),
    ]
    ty = C.HUD_TEXT_Y
    for text, color in lines:
        screen.blit(font.render(text, True, color), (C.HUD_TEXT_X, ty))
        ty += C.HUD_LINE_H


def score_lines(score):
    """Per-component breakdown shown under the total on the landed screen."""
    return [
        f"Fuel: {score.fuel:.0f}",
        f"Time: {score.time:.0f}",
        f"Vert Vel: {score.vy:.0f}",
        f"Horiz Vel: {score.vx:.0f}",
        f"Angle: {score.angle:.0f}",
        f"Zone: x{score.factor:.1f}",
    ]


def draw_high_scores(screen, snap, y, font):
    title_font = pygame.font.SysFont(None, 28)
    cx = snap.settings.world_width // 2 - 100
    screen.blit(title_font.render("High Scores:", True, C.WHITE), (cx, y))
    y += 30
    for i, entry in enumerate(snap.high_scores):
        line = f"{i + 1}. {entry.initials} - {int(entry.score)}"
        screen.blit(font.render(line, True, C.WHITE), (cx, y))
        y += 20


def draw_overlay(screen, snap, font):
    big = pygame.font.SysFont(None, 28)
    cx = snap.settings.world_width // 2

    def line(text, y, dx=-100):
        screen.blit(big.render(text, True, C.WHITE), (cx + dx, y))

    phase = snap.lander.phase
    if phase is Phase.LANDED:
        if snap.needs_initials:
            line("Enter your initials (3 letters):", 150, -150)
            line(snap.initials, 180, -50)
            return
        line("Landed Safely!", 150)
        line("Congratulations Commander for a good landing!", 180, -250)
        line(f"Score: {int(snap.score.total) if snap.score else 0}", 210)
        y = 240
        if snap.score:
            for text in score_lines(snap.score):
                screen.blit(font.render(text, True, C.WHITE), (cx - 100, y))
                y += C.HUD_LINE_H
            y += 10
        line("Press R to restart", y)
        draw_high_scores(screen, snap, y + 30, font)
    elif phase is Phase.CRASHED:
        line("Crashed!", 150)
        line(snap.crash_message or "", 180, -150)
        line("Press R to restart", 210)
        draw_high_scores(screen, snap, 240, font)


def render(screen, snap, font):
    screen.fill(C.BLACK)
    draw_terrain(screen, snap)
    draw_lander(screen, snap)
    draw_readouts(screen, snap, font)
    draw_overlay(screen, snap, font)
    pygame.display.flip()
