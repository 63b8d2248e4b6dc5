class GeometryError(Exception):
    """Base class for failures raised by the geometry core."""


class DegenerateSegmentError(GeometryError, ValueError):
    def __init__(self, point):
        super().__init__(f"segment endpoints coincide at ({point.x}, {point.y})")
        self.point = point


class UnsupportedDirectionError(GeometryError, ValueError):
    def __init__(self, direction):
        super().__init__(f"direction {direction!r} is not implemented")
        self.direction = direction


class NotRotatableError(GeometryError):
    def __init__(self, obstacle, obstacle_id=None):
        name = repr(obstacle) if obstacle_id is None else f"obstacle {obstacle_id}"
        super().__init__(f"{name} is a boundary and cannot rotate")
        self.obstacle = obstacle
        self.obstacle_id = obstacle_id


class UnknownObstacleError(GeometryError, KeyError):
    def __init__(self, obstacle_id):
        super().__init__(f"no obstacle registered under id {obstacle_id!r}")
        self.obstacle_id = obstacle_id

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]
