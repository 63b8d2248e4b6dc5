from core.errors import UnsupportedDirectionError
from core.geometry import Direction, Point
from core.movement import resolve_movement
from core.obstacles import ObjectKind
from core.raycast import compute_visibility


class LightSource:
    def __init__(self, position, stats):
        # -----------------------------
        # Position
        # -----------------------------
        self.pos = Point(*position)
        self._last_mouse = None

        # -----------------------------
        # Stats
        # -----------------------------
        self.color = stats["color"]
        self.radius = stats["radius"]
        self.ray_count = stats["ray_count"]

    @property
    def kind(self):
        return ObjectKind.LIGHT_SOURCE

    # =====================================================
    # MOVEMENT
    # =====================================================

    def follow_mouse(self, mouse_pos):
        """Jump to the mouse if it moved since last frame. Returns True if it did."""
        mouse = Point(*mouse_pos)
        if mouse == self._last_mouse:
            return False
        self._last_mouse = mouse
        self.pos = mouse
        return True

    def move(self, direction, distance, obstacles, bounds):
        """Step ``distance`` pixels toward ``direction`` inside ``bounds`` (w, h).

        Vertical steps are only clamped to the bounds.  Horizontal steps are
        clamped, then resolved against ``obstacles`` so the light slides
        along or stops at walls.  Anything that is not a Direction raises
        UnsupportedDirectionError.
        """
        width, height = bounds
        x, y = self.pos.x, self.pos.y

        if direction == Direction.UP:
            self.pos = Point(x, max(0.0, y - distance))
        elif direction == Direction.DOWN:
            self.pos = Point(x, min(float(height), y + distance))
        elif direction == Direction.LEFT:
            proposed = Point(max(0.0, x - distance), y)
            self.pos = resolve_movement(self.pos, proposed, direction, obstacles)
        elif direction == Direction.RIGHT:
            proposed = Point(min(float(width), x + distance), y)
            self.pos = resolve_movement(self.pos, proposed, direction, obstacles)
        else:
            raise UnsupportedDirectionError(direction)
        return self.pos

    # =====================================================
    # RAYS
    # =====================================================

    def cast(self, obstacles, max_length):
        return compute_visibility(self.pos, self.ray_count, max_length, obstacles)
