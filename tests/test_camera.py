import pytest

from lunar_lander import config as C
from lunar_lander.camera import Camera, follow, zoom_for_height
from lunar_lander.hud import lander_shapes, safe_color, score_lines, timer_color
from lunar_lander.lander import leg_offsets
from lunar_lander.scoring import ScoreBreakdown


@pytest.mark.parametrize(
    "height, zoom",
    [(1000, 1.0), (300, 1.0), (150, 3.0), (0, 5.0), (-20, 5.0)],
)
def test_zoom_grows_near_the_ground(settings, height, zoom):
    assert zoom_for_height(height, settings) == pytest.approx(zoom)


def test_camera_centres_on_lander_when_room(settings):
    # 150 above ground -> zoom 3, view 300x200
    cam = follow(450, 300, 450, settings)

    assert cam.zoom == pytest.approx(3.0)
    assert cam.x == pytest.approx(300)
    assert cam.y == pytest.approx(200)
    assert cam.world_to_screen(450, 300) == pytest.approx((450, 300))


def test_camera_is_clamped_to_world(settings):
    cam = follow(5, 10, 100, settings)
    assert (cam.x, cam.y) == (0, 0)

    cam = follow(895, 590, 595, settings)
    assert cam.x == pytest.approx(settings.world_width - settings.world_width / cam.zoom)
    assert cam.y == pytest.approx(settings.world_height - settings.world_height / cam.zoom)


def test_unzoomed_camera_shows_the_whole_world(settings):
    cam = follow(450, 50, 500, settings)
    assert (cam.x, cam.y, cam.zoom) == (0, 0, 1.0)


def test_world_to_screen_translates_then_scales():
    cam = Camera(100, 50, 2.0)
    assert cam.world_to_screen(110, 60) == (20, 20)


def test_hud_colour_coding():
    assert safe_color(0.5, 1.0) == C.GREEN
    assert safe_color(1.0, 1.0) == C.RED
    assert timer_color(15) == C.GREEN
    assert timer_color(10) == C.ORANGE
    assert timer_color(5) == C.ORANGE
    assert timer_color(4.9) == C.RED


def test_drawn_leg_tips_match_touchdown_geometry():
    size = 6.0
    _, _, leg1, leg2, _ = lander_shapes(size)
    tips = leg_offsets(size)

    assert leg1[-1] == pytest.approx(tuple(tips[0]))
    assert leg2[-1] == pytest.approx(tuple(tips[1]))


def test_landed_screen_lists_each_score_component():
    score = ScoreBreakdown(fuel=72.4, time=88.6, vy=100.0, vx=100.0, angle=53.3, factor=1.8)

    assert score_lines(score) == [
        "Fuel: 72",
        "Time: 89",
        "Vert Vel: 100",
        "Horiz Vel: 100",
        "Angle: 53",
        "Zone: x1.8",
    ]
