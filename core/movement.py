import logging
import math

from core.errors import UnsupportedDirectionError
from core.geometry import Direction, Segment
from settings import ANGLE_TOLERANCE

log = logging.getLogger(__name__)

# Wall angles that stop movement outright instead of sliding along the wall
STOP_ANGLES = (math.pi, -math.pi, math.pi / 4, -math.pi / 4)

_COLLISION_DIRECTIONS = (Direction.LEFT, Direction.RIGHT)


def is_stop_angle(angle, tolerance=ANGLE_TOLERANCE):
    return any(math.isclose(angle, stop, rel_tol=0.0, abs_tol=tolerance)
               for stop in STOP_ANGLES)


def find_blocking_obstacle(current, proposed, obstacles):
    """First obstacle (in registry order) whose segment crosses current -> proposed.

    This is first-match, not nearest-match.
    """
    path = Segment(current, proposed)
    for obstacle in obstacles:
        if path.crosses(obstacle):
            return obstacle
    return None


def resolve_movement(current, proposed, direction, obstacles, tolerance=ANGLE_TOLERANCE):
    """Resolve a horizontal step from ``current`` toward ``proposed``.

    Unblocked: returns ``proposed``.  Blocked by a wall whose angle (walked
    toward ``direction``) is one of STOP_ANGLES: returns ``current``.
    Otherwise the step length is redirected along the blocking wall.
    """
    if direction not in _COLLISION_DIRECTIONS:
        raise UnsupportedDirectionError(direction)

    if proposed == current:
        return current

    blocker = find_blocking_obstacle(current, proposed, obstacles)
    if blocker is None:
        return proposed

    wall_angle = blocker.angle(direction)
    if is_stop_angle(wall_angle, tolerance):
        log.debug("Move %s blocked by %r", direction.value, blocker)
        return current

    step = current.distance_to(proposed)
    log.debug("Move %s sliding along %r at %.3f rad", direction.value, blocker, wall_angle)
    return current.offset(wall_angle, step)
