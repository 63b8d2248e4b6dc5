import math
from dataclasses import dataclass
from enum import Enum

from core.errors import DegenerateSegmentError, UnsupportedDirectionError

# |d(p, start) + d(p, end) - length| below this counts as "on the segment"
ON_SEGMENT_TOLERANCE = 0.01


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self):
        # Lets a Point unpack / pass where pygame expects an (x, y) pair
        yield self.x
        yield self.y

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset(self, angle, distance):
        """Point reached by travelling ``distance`` from here along ``angle`` (radians)."""
        return Point(self.x + math.cos(angle) * distance,
                     self.y + math.sin(angle) * distance)

    def lies_on(self, segment, tolerance=ON_SEGMENT_TOLERANCE):
        """True if this point sits on ``segment`` (within ``tolerance`` pixels)."""
        around = self.distance_to(segment.start) + self.distance_to(segment.end)
        return abs(around - segment.length) < tolerance


def _ccw(a, b, c):
    return (c.y - a.y) * (b.x - a.x) > (b.y - a.y) * (c.x - a.x)


class Segment:
    def __init__(self, start, end):
        start = Point(*start)
        end = Point(*end)
        if start == end:
            raise DegenerateSegmentError(start)
        self.start = start
        self.end = end

    def __repr__(self):
        return (f"{type(self).__name__}(({self.start.x}, {self.start.y}), "
                f"({self.end.x}, {self.end.y}))")

    # =====================================================
    # DERIVED
    # =====================================================

    @property
    def center(self):
        return Point((self.start.x + self.end.x) / 2,
                     (self.start.y + self.end.y) / 2)

    @property
    def length(self):
        return self.start.distance_to(self.end)

    def angle(self, direction):
        """Orientation of the segment when walked toward ``direction``.

        LEFT walks end -> start, RIGHT walks start -> end.  Vertical
        directions have no defined orientation and raise
        UnsupportedDirectionError.
        """
        if direction == Direction.LEFT:
            dx = self.start.x - self.end.x
            dy = self.start.y - self.end.y
        elif direction == Direction.RIGHT:
            dx = self.end.x - self.start.x
            dy = self.end.y - self.start.y
        else:
            raise UnsupportedDirectionError(direction)
        return math.atan2(dy, dx)

    # =====================================================
    # INTERSECTION
    # =====================================================

    def crosses(self, other):
        """True if the two segments properly cross each other.

        Only answers yes/no; use intersect_segment to locate the crossing.
        """
        a, b = self.start, self.end
        c, d = other.start, other.end
        return _ccw(a, c, d) != _ccw(b, c, d) and _ccw(a, b, c) != _ccw(a, b, d)

    def intersect_segment(self, p1, p2):
        """Where the probe p1 -> p2 meets this segment, or None.

        Parallel lines and hits outside either finite segment both give None.
        """
        x1, y1 = p1.x, p1.y
        x2, y2 = p2.x, p2.y
        x3, y3 = self.start.x, self.start.y
        x4, y4 = self.end.x, self.end.y

        denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
        if denom == 0:
            return None

        ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
        ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
        if ua < 0 or ua > 1 or ub < 0 or ub > 1:
            return None

        return Point(x1 + ua * (x2 - x1), y1 + ua * (y2 - y1))

    def intersect_point(self, origin, angle, max_length):
        """Intersect a probe of ``max_length`` cast from ``origin`` along ``angle``."""
        return self.intersect_segment(origin, origin.offset(angle, max_length))
