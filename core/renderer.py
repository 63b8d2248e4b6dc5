import pygame

from core.obstacles import ObjectKind
from data.wall_stats import WALL_STATS


def draw_object(screen, obj):
    """Draw one scene object according to its ObjectKind tag."""
    kind = obj.kind
    if kind == ObjectKind.WALL:
        _draw_segment(screen, obj, WALL_STATS["wall"])
    elif kind == ObjectKind.BOUNDARY_WALL:
        _draw_segment(screen, obj, WALL_STATS["boundary"])
    elif kind == ObjectKind.LIGHT_SOURCE:
        pygame.draw.circle(screen, obj.color, tuple(obj.pos), obj.radius)
    else:
        raise ValueError(f"no renderer for {kind!r}")


def draw_rays(screen, rays, color):
    """Draw the (source, endpoint) list from compute_visibility in one pass."""
    for source, end in rays:
        pygame.draw.line(screen, color, tuple(source), tuple(end))


def draw_scene(screen, scene, rays=None):
    for obstacle in scene.obstacles:
        draw_object(screen, obstacle)
    if rays:
        draw_rays(screen, rays, scene.light.color)
    draw_object(screen, scene.light)


def _draw_segment(screen, segment, stats):
    pygame.draw.line(screen, stats["color"], tuple(segment.start), tuple(segment.end), stats["width"])
