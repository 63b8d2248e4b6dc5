import math
from dataclasses import dataclass

from core.geometry import Point


@dataclass(frozen=True)
class Probe:
    source: Point
    angle: float
    max_length: float

    @property
    def end(self):
        return self.source.offset(self.angle, self.max_length)


def cast_ray(probe, obstacles):
    """Return where ``probe`` stops: the nearest obstacle hit, or its full length."""
    end = probe.end
    nearest_dist = probe.max_length
    nearest_point = None

    for obstacle in obstacles:
        hit = obstacle.intersect_segment(probe.source, end)
        if hit is None:
            continue
        dist = probe.source.distance_to(hit)
        if dist < nearest_dist:
            nearest_dist = dist
            nearest_point = hit

    # A hit exactly at max_length is also the probe's own end point
    return nearest_point if nearest_point is not None else end


def compute_visibility(light_pos, ray_count, max_length, obstacles):
    """Cast ``ray_count`` evenly spaced rays from ``light_pos``.

    Returns a list of (source, endpoint) pairs ordered by angle, starting at
    angle 0 and turning by 2*pi/ray_count each step.  Each endpoint is the
    nearest obstacle hit or the point ``max_length`` away.  Nothing is cached,
    so calling it again for an unchanged scene gives the same list.

    The whole list is meant to be drawn in one pass by the renderer.
    """
    if ray_count <= 0:
        raise ValueError(f"ray_count must be positive, got {ray_count}")
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")

    source = Point(*light_pos)
    # Materialize once; the registry is scanned once per ray
    obstacles = list(obstacles)
    step = 2 * math.pi / ray_count

    rays = []
    for i in range(ray_count):
        probe = Probe(source, i * step, max_length)
        rays.append((source, cast_ray(probe, obstacles)))
    return rays
