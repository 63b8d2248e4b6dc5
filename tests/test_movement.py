import math

import pytest

from core.errors import UnsupportedDirectionError
from core.geometry import Direction, Point, Segment
from core.movement import STOP_ANGLES, find_blocking_obstacle, is_stop_angle, resolve_movement
from core.obstacles import ObstacleRegistry


def _registry(*segments):
    registry = ObstacleRegistry()
    for start, end in segments:
        registry.register(Segment(start, end))
    return registry


def test_unblocked_move_returns_proposed():
    registry = _registry(((300, 100), (500, 300)))
    current = Point(0, 0)
    proposed = Point(10, 0)
    assert resolve_movement(current, proposed, Direction.RIGHT, registry) == proposed


def test_zero_length_move():
    registry = _registry(((300, 100), (500, 300)))
    p = Point(5, 5)
    assert resolve_movement(p, Point(5, 5), Direction.LEFT, registry) == p


@pytest.mark.parametrize("wall", [
    ((0, -5), (10, 5)),    # pi/4 walking right
    ((0, 5), (10, -5)),    # -pi/4 walking right
])
def test_stop_angle_wall_halts_movement(wall):
    registry = _registry(wall)
    current = Point(0, 0)
    assert resolve_movement(current, Point(10, 0), Direction.RIGHT, registry) == current


def test_stop_angle_uses_tolerance():
    # A hair off pi/4
    registry = _registry(((0, -5), (10, 5 + 1e-8)))
    current = Point(0, 0)
    assert resolve_movement(current, Point(10, 0), Direction.RIGHT, registry) == current


def test_is_stop_angle():
    for angle in STOP_ANGLES:
        assert is_stop_angle(angle)
    assert is_stop_angle(math.pi - 1e-9)
    assert not is_stop_angle(math.pi / 2)
    assert not is_stop_angle(0.0)


def test_slide_along_vertical_wall():
    registry = _registry(((5, -10), (5, 10)))
    result = resolve_movement(Point(0, 0), Point(10, 0), Direction.RIGHT, registry)
    # Redirected to pi/2 with the same step length
    assert result.x == pytest.approx(0, abs=1e-9)
    assert result.y == pytest.approx(10)


def test_slide_moving_left():
    registry = _registry(((0, -5), (10, 5)))
    current = Point(10, 0)
    result = resolve_movement(current, Point(0, 0), Direction.LEFT, registry)
    # angle(LEFT) is -3pi/4
    assert result.x == pytest.approx(10 - 10 / math.sqrt(2))
    assert result.y == pytest.approx(-10 / math.sqrt(2))
    assert current.distance_to(result) == pytest.approx(10)


def test_first_registered_blocker_wins_over_nearest():
    registry = _registry(
        ((80, -10), (80, 10)),   # far, vertical -> slide
        ((20, -10), (40, 10)),   # near, pi/4 -> would stop
    )
    current = Point(0, 0)
    proposed = Point(100, 0)
    assert find_blocking_obstacle(current, proposed, registry) is registry[0]
    result = resolve_movement(current, proposed, Direction.RIGHT, registry)
    assert result.x == pytest.approx(0, abs=1e-9)
    assert result.y == pytest.approx(100)


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN])
def test_vertical_direction_rejected(direction):
    with pytest.raises(UnsupportedDirectionError):
        resolve_movement(Point(0, 0), Point(0, 10), direction, [])
