import json
import logging

from core.errors import GeometryError
from core.geometry import Point, Segment
from core.light_source import LightSource
from core.obstacles import ObstacleRegistry
from data.light_stats import LIGHT_STATS
from settings import MAX_RAY_LENGTH

log = logging.getLogger(__name__)


class SceneFormatError(ValueError):
    """A scene JSON file is missing fields or holds an unusable value."""


def _is_positive_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


class SceneBase:
    def __init__(self, width, height, light_stats=None):
        self.width = width
        self.height = height
        self.obstacles = ObstacleRegistry()
        self.light = LightSource((width / 2, height / 2), light_stats or LIGHT_STATS["sun"])

    @classmethod
    def from_json(cls, path):
        """Construct a scene from a JSON layout.

        {"width": W, "height": H, "walls": [[[x1, y1], [x2, y2]], ...],
         "light": {"position": [x, y], "ray_count": N}}

        "light" and each of its keys are optional.  Boundary walls are always
        added after the listed walls.
        """
        with open(path, "r") as f:
            data = json.load(f)

        try:
            width = data["width"]
            height = data["height"]
            walls = data["walls"]
        except KeyError as exc:
            raise SceneFormatError(f"{path}: missing field {exc.args[0]!r}") from exc

        if not (_is_positive_number(width) and _is_positive_number(height)):
            raise SceneFormatError(f"{path}: width and height must be positive numbers, "
                                   f"got {width!r} x {height!r}")

        light_data = data.get("light", {})
        ray_count = light_data.get("ray_count", LIGHT_STATS["sun"]["ray_count"])
        if isinstance(ray_count, bool) or not isinstance(ray_count, int) or ray_count <= 0:
            raise SceneFormatError(f"{path}: light ray_count must be a positive integer, "
                                   f"got {ray_count!r}")

        # Registry defaults, overridden by JSON values
        stats = dict(LIGHT_STATS["sun"])
        stats.update({k: v for k, v in light_data.items() if k in stats})
        stats["color"] = tuple(stats["color"])

        scene = cls(width=width, height=height, light_stats=stats)
        if "position" in light_data:
            scene.light.pos = Point(*light_data["position"])

        for i, wall in enumerate(walls):
            try:
                start, end = wall
                scene.add_wall(start, end)
            except (TypeError, ValueError) as exc:
                raise SceneFormatError(f"{path}: wall {i} is invalid: {exc}") from exc
        scene.add_boundaries()

        log.info("Loaded scene %s: %dx%d, %d walls", path, width, height, len(walls))
        return scene

    # =====================================================
    # SETUP
    # =====================================================

    def add_wall(self, start, end):
        return self.obstacles.register(Segment(start, end), rotatable=True)

    def add_boundaries(self):
        """Register the four edges of the scene as fixed obstacles."""
        w, h = self.width, self.height
        edges = [
            ((0, 0), (w, 0)),   # top
            ((0, 0), (0, h)),   # left
            ((w, 0), (w, h)),   # right
            ((0, h), (w, h)),   # bottom
        ]
        return [self.obstacles.register(Segment(a, b), rotatable=False) for a, b in edges]

    # =====================================================
    # FRAME COMMANDS
    # =====================================================

    def rotate_walls(self, delta_degrees):
        return self.obstacles.rotate_all(delta_degrees)

    def rotate_wall(self, obstacle_id, delta_degrees):
        """Rotate one obstacle. A failed rotation is logged and skipped for this frame."""
        try:
            self.obstacles.rotate(obstacle_id, delta_degrees)
        except GeometryError as exc:
            log.warning("Skipping rotation: %s", exc)
            return False
        return True

    def move_light(self, direction, distance):
        """Move the light; a rejected move is logged and leaves it in place."""
        try:
            return self.light.move(direction, distance, self.obstacles,
                                   (self.width, self.height))
        except GeometryError as exc:
            log.warning("Skipping light move: %s", exc)
            return self.light.pos

    def cast_rays(self, max_length=MAX_RAY_LENGTH):
        return self.light.cast(self.obstacles, max_length)
