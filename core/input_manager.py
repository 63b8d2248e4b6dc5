import pygame


class InputManager:
    def __init__(self):
        # -------------------------
        # Action → Key bindings
        # -------------------------
        self.keymap = {
            "move_up": pygame.K_w,
            "move_down": pygame.K_s,
            "move_left": pygame.K_a,
            "move_right": pygame.K_d,
            "cast": pygame.K_SPACE,
            "rotate_cw": pygame.K_RSHIFT,
            "rotate_ccw": pygame.K_LSHIFT,
            "speed_up": pygame.K_EQUALS,
            "speed_down": pygame.K_MINUS,
            "rot_speed_up": pygame.K_RIGHT,
            "rot_speed_down": pygame.K_LEFT,
            "reset_speed": pygame.K_ESCAPE,
        }

        self.keys = pygame.key.get_pressed()

        self.mouse_pos = pygame.mouse.get_pos()
        self.mouse_buttons = pygame.mouse.get_pressed()

    # =====================================================
    # UPDATE (call once per frame before reading actions)
    # =====================================================

    def update(self):
        self.keys = pygame.key.get_pressed()
        self.mouse_pos = pygame.mouse.get_pos()
        self.mouse_buttons = pygame.mouse.get_pressed()

    # =====================================================
    # HELD DOWN (continuous)
    # =====================================================

    def is_down(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False
        return self.keys[key]

    # =====================================================
    # MOUSE
    # =====================================================

    def get_mouse_pos(self):
        return self.mouse_pos

    def is_casting(self):
        """Rays are shown while the left button or the cast key is held."""
        return self.mouse_buttons[0] or self.is_down("cast")
