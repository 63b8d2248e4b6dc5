from scenes.scene_base import SceneBase
from settings import WIDTH, HEIGHT


class DefaultScene(SceneBase):
    def __init__(self, light_stats=None):
        super().__init__(width=WIDTH, height=HEIGHT, light_stats=light_stats)

        self._build_walls()
        # Boundaries go last: movement checks walls in registration order
        self.add_boundaries()

    def _build_walls(self):
        self.add_wall((300, 100), (500, 300))    # diagonal, top left
        self.add_wall((200, 600), (500, 800))    # diagonal, bottom left
        self.add_wall((600, 300), (600, 500))    # vertical, center
        self.add_wall((800, 600), (1000, 600))   # horizontal
        self.add_wall((1200, 100), (1200, 700))  # long vertical, right
