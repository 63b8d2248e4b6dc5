from settings import SPEED


class SpeedControls:
    """Movement (px/s) and rotation (deg/s) speeds the player can tune live."""

    def __init__(self, base_speed=SPEED):
        self.base_speed = base_speed
        self.speed_mov = base_speed
        self.speed_rot = base_speed

    def update(self, input_manager):
        if input_manager.is_down("speed_up"):
            self.speed_mov += 1
        if input_manager.is_down("speed_down"):
            self.speed_mov = abs(self.speed_mov - 1)
        if input_manager.is_down("rot_speed_down"):
            self.speed_rot = abs(self.speed_rot - 1)
        if input_manager.is_down("rot_speed_up"):
            self.speed_rot += 1
        if input_manager.is_down("reset_speed"):
            self.reset()

    def reset(self):
        self.speed_mov = self.base_speed
        self.speed_rot = self.base_speed
