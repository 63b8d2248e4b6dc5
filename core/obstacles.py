import logging
import math
from enum import Enum

from core.errors import NotRotatableError, UnknownObstacleError
from core.geometry import Point, Segment

log = logging.getLogger(__name__)


class ObjectKind(Enum):
    """Tag the renderer switches on to pick how a scene object is drawn."""
    WALL = "wall"
    BOUNDARY_WALL = "boundary_wall"
    LIGHT_SOURCE = "light_source"


class Obstacle(Segment):
    def __init__(self, start, end, rotatable=True):
        super().__init__(start, end)
        self.rotatable = rotatable

    @property
    def kind(self):
        return ObjectKind.WALL if self.rotatable else ObjectKind.BOUNDARY_WALL

    def rotate(self, delta_degrees):
        """Rotate both endpoints in place about the segment's center."""
        if not self.rotatable:
            raise NotRotatableError(self)

        c = self.center
        theta = math.radians(delta_degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        def _turn(p):
            tx = p.x - c.x
            ty = p.y - c.y
            return Point(tx * cos_t - ty * sin_t + c.x,
                         tx * sin_t + ty * cos_t + c.y)

        self.start = _turn(self.start)
        self.end = _turn(self.end)


class ObstacleRegistry:
    """Ordered obstacles of a scene.

    Order is insertion order and matters: movement blocking picks the first
    registered obstacle that crosses the path.  Ids are insertion indices.
    """

    def __init__(self):
        self._obstacles = []

    def __len__(self):
        return len(self._obstacles)

    def __iter__(self):
        return iter(self._obstacles)

    def __getitem__(self, obstacle_id):
        return self.get(obstacle_id)

    def register(self, segment, rotatable=True):
        """Add a segment as an obstacle and return its id."""
        obstacle = Obstacle(segment.start, segment.end, rotatable=rotatable)
        self._obstacles.append(obstacle)
        obstacle_id = len(self._obstacles) - 1
        log.info("Registered %s obstacle %d: %r", obstacle.kind.value, obstacle_id, obstacle)
        return obstacle_id

    def get(self, obstacle_id):
        if not isinstance(obstacle_id, int) or not 0 <= obstacle_id < len(self._obstacles):
            raise UnknownObstacleError(obstacle_id)
        return self._obstacles[obstacle_id]

    def rotate(self, obstacle_id, delta_degrees):
        obstacle = self.get(obstacle_id)
        if not obstacle.rotatable:
            raise NotRotatableError(obstacle, obstacle_id)
        obstacle.rotate(delta_degrees)

    def rotate_all(self, delta_degrees):
        """Rotate every rotatable obstacle; boundaries stay put. Returns the count rotated."""
        rotated = 0
        for obstacle in self._obstacles:
            if obstacle.rotatable:
                obstacle.rotate(delta_degrees)
                rotated += 1
        return rotated

    def walls(self):
        return [o for o in self._obstacles if o.rotatable]

    def boundaries(self):
        return [o for o in self._obstacles if not o.rotatable]
