import pygame
import pytest

from core.frame_stats import FrameStats
from core.hud_base import HudText
from core.speed_controls import SpeedControls
from hud.stats_hud import StatsHud, format_stats


def test_format_stats():
    assert format_stats(100, 99.9, 143.7) == "SPEED_MOV: 100, SPEED_ROT: 99, FPS: 143"


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def _has_ink(surface, rect):
    return any(
        tuple(surface.get_at((x, y)))[:3] != (0, 0, 0)
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    )


def test_stats_hud_draws_live_values(fonts):
    controls = SpeedControls(base_speed=100)
    frame_stats = FrameStats()
    frame_stats.tick(0.25)
    hud = StatsHud(controls, frame_stats)

    assert hud.stats_text.current_text() == "SPEED_MOV: 100, SPEED_ROT: 100, FPS: 4"
    controls.speed_mov = 250
    assert hud.stats_text.current_text().startswith("SPEED_MOV: 250,")

    screen = pygame.Surface((400, 60))
    hud.draw(screen)
    assert _has_ink(screen, pygame.Rect(10, 10, 300, 20))
    # Nothing above or left of the text origin
    assert not _has_ink(screen, pygame.Rect(0, 0, 400, 10))


def test_hidden_text_draws_nothing(fonts):
    text = HudText(position=(10, 10), text="hello")
    text.visible = False
    screen = pygame.Surface((100, 40))
    text.draw(screen)
    assert not _has_ink(screen, pygame.Rect(0, 0, 100, 40))
