from settings import HUD_TEXT_COLOR
from core.hud_base import HudLayer, HudText


def format_stats(speed_mov, speed_rot, fps):
    return f"SPEED_MOV: {int(speed_mov)}, SPEED_ROT: {int(speed_rot)}, FPS: {int(fps)}"


class StatsHud(HudLayer):
    """Speed and FPS readout in the top-left corner.

    ``controls`` needs .speed_mov and .speed_rot, ``frame_stats`` an
    .average_fps; both are read every draw.
    """

    def __init__(self, controls, frame_stats):
        super().__init__()

        self.stats_text = self.add(HudText(
            position=(10, 10),
            text_source=lambda: format_stats(
                controls.speed_mov, controls.speed_rot, frame_stats.average_fps,
            ),
            color=HUD_TEXT_COLOR,
            font_size=24,
        ))
